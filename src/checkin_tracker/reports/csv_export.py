from __future__ import annotations

import csv
import io
import re
from typing import Iterable, Mapping

from ..employees.model import Employee

EXPORT_FIELDS = ["Name", "Date", "Time", "Status"]


def write_report_csv(rows: Iterable[Mapping[str, str]]) -> bytes:
    """Encode export rows as CSV; the UTF-8 BOM keeps spreadsheet apps happy with accents."""
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: row[k] for k in EXPORT_FIELDS})
    return out.getvalue().encode("utf-8-sig")


def export_filename(employee: Employee) -> str:
    slug = re.sub(r"\s+", "_", employee.name.strip())
    return f"faults-{slug}.csv"
