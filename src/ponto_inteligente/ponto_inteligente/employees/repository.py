from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee, NewEmployee


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_cpf(self, cpf: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(self, employee: NewEmployee) -> int:
        """Insert and return the new employee_id.

        Raises DuplicateRecordError(field="cpf" | "email") on unique key violations.
        """

        raise NotImplementedError
