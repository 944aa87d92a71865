from __future__ import annotations

from dataclasses import dataclass

from .companies.mysql_company_repository import MySQLCompanyRepository
from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_PASSWORD_HASH_METHOD
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .entries.service import TimeEntryService
from .registration.service import RegistrationService
from .security.passwords import PasswordHasher


@dataclass(frozen=True)
class Container:
    employees_repo: MySQLEmployeeRepository

    registration_service: RegistrationService
    time_entry_service: TimeEntryService


def build_container(
    *,
    db_config: dict,
    page_size: int = DEFAULT_PAGE_SIZE,
    password_hash_method: str = DEFAULT_PASSWORD_HASH_METHOD,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    companies_repo = MySQLCompanyRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    entries_repo = MySQLTimeEntryRepository(conn)

    registration_service = RegistrationService(
        companies_repo,
        employees_repo,
        conn,
        hasher=PasswordHasher(password_hash_method),
    )
    time_entry_service = TimeEntryService(entries_repo, default_page_size=page_size)

    return Container(
        employees_repo=employees_repo,
        registration_service=registration_service,
        time_entry_service=time_entry_service,
    )
