from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from textwrap import fill

from ..common.datetime_utils import to_local


@dataclass(frozen=True)
class ActaDocument:
    """Printable administrative record ("acta") for one check-in."""

    employee_name: str
    employee_number: str
    department: str
    record_id: str
    record_time: datetime
    is_late: bool
    issued_at: datetime

    def render_text(self, *, width: int = 78) -> str:
        record_local = to_local(self.record_time)
        issued_local = to_local(self.issued_at)

        if self.is_late:
            finding = "which constitutes an unjustified late arrival with respect to the established work schedule"
        else:
            finding = "which constitutes an attendance record"

        header = [
            "ADMINISTRATIVE LABOR RECORD",
            "",
            f"Date: {issued_local.strftime('%B %d, %Y')}",
            f"Time: {issued_local.strftime('%H:%M')}",
        ]
        paragraphs = [
            "Present at the company premises are the legal representative / head of human "
            f"resources on behalf of the employer, and the employee {self.employee_name.upper()} "
            f"({self.employee_number}), who works in {self.department.upper()}, together with two "
            "witnesses.",
            "The purpose of this record is to document the events of "
            f"{record_local.strftime('%A, %B %d, %Y')}.",
            "It is recorded that the employee registered their arrival at "
            f"{record_local.strftime('%H:%M:%S')}, {finding}.",
            "There being no other matter to address, this record is closed and signed by those "
            "who took part in it.",
        ]
        signatures = [
            "_" * 28 + " " * 6 + "_" * 28,
            f"{'Employer representative':<28}      {self.employee_name}",
            "",
            "",
            "_" * 28 + " " * 6 + "_" * 28,
            f"{'Witness':<28}      Witness",
        ]

        body = "\n\n".join(fill(p, width=width) for p in paragraphs)
        return "\n".join(header) + "\n\n" + body + "\n\n\n" + "\n".join(signatures) + "\n"
