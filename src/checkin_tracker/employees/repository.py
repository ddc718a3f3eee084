from __future__ import annotations

from typing import ContextManager, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def load_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_employees(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError

    def locked(self) -> ContextManager[None]:
        raise NotImplementedError
