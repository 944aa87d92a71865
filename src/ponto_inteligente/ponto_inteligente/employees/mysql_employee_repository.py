from __future__ import annotations

from typing import Optional

from ..core.enums import Profile
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, translate_duplicate_key
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, name, email, cpf, profile, password_hash, company_id
    FROM employees
"""


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        cpf=r["cpf"],
        profile=Profile(r["profile"]),
        password_hash=r["password_hash"],
        company_id=int(r["company_id"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, value) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where}=%s", (value,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._get_one("employee_id", int(employee_id))

    def get_by_cpf(self, cpf: str) -> Optional[Employee]:
        return self._get_one("cpf", cpf)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return self._get_one("email", email)

    def create_employee(self, employee: NewEmployee) -> int:
        with translate_duplicate_key({"uq_employees_cpf": "cpf", "uq_employees_email": "email"}):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(name, email, cpf, profile, password_hash, company_id)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.name,
                        employee.email,
                        employee.cpf,
                        employee.profile.value,
                        employee.password_hash,
                        employee.company_id,
                    ),
                )
                return int(cur.lastrowid)
