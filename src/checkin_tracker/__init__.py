"""Check-in tracker package.

Feature modules (employees, attendance, reports) sit on top of a small
key-value storage layer, with thin Flask controllers and service/repository
layers doing the actual work.
"""
