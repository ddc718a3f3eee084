"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Check-ins after 09:15 local time are late; 09:15 itself is still on time.
LATE_THRESHOLD_HOUR = 9
LATE_THRESHOLD_MINUTE = 15

FAULT_WINDOW_DAYS = 30

EMPLOYEE_NUMBER_PREFIX = "EMP"
EMPLOYEE_NUMBER_WIDTH = 3

STORAGE_KEY_EMPLOYEES = "checkin_employees"
STORAGE_KEY_RECORDS = "checkin_records"
