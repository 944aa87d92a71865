from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Optional

import pytest

from src.ponto_inteligente.ponto_inteligente.companies.model import Company, NewCompany
from src.ponto_inteligente.ponto_inteligente.core.exceptions import DuplicateRecordError
from src.ponto_inteligente.ponto_inteligente.employees.model import Employee, NewEmployee
from src.ponto_inteligente.ponto_inteligente.entries.model import NewTimeEntry, TimeEntry


class InMemoryCompanies:
    def __init__(self):
        self.by_id: dict[int, Company] = {}
        self._id = 0
        self.writes = 0

    def get_by_cnpj(self, cnpj: str) -> Optional[Company]:
        return next((c for c in self.by_id.values() if c.cnpj == cnpj), None)

    def create_company(self, company: NewCompany) -> int:
        if self.get_by_cnpj(company.cnpj):
            raise DuplicateRecordError("cnpj")
        self._id += 1
        self.writes += 1
        self.by_id[self._id] = company.persisted(self._id)
        return self._id

    def snapshot(self):
        return copy.copy(self.by_id), self._id

    def restore(self, state) -> None:
        self.by_id, self._id = copy.copy(state[0]), state[1]


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[int, Employee] = {}
        self._id = 0
        self.writes = 0
        self.fail_on_create: Optional[Exception] = None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def get_by_cpf(self, cpf: str) -> Optional[Employee]:
        return next((e for e in self.by_id.values() if e.cpf == cpf), None)

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self.by_id.values() if e.email == email), None)

    def create_employee(self, employee: NewEmployee) -> int:
        if self.fail_on_create is not None:
            raise self.fail_on_create
        self._id += 1
        self.writes += 1
        self.by_id[self._id] = employee.persisted(self._id)
        return self._id

    def snapshot(self):
        return copy.copy(self.by_id), self._id

    def restore(self, state) -> None:
        self.by_id, self._id = copy.copy(state[0]), state[1]


class InMemoryTransactions:
    """Snapshot/restore the given stores around a block, like a DB transaction."""

    def __init__(self, *stores):
        self._stores = stores
        self.committed = 0
        self.rolled_back = 0

    @contextmanager
    def transaction(self):
        states = [s.snapshot() for s in self._stores]
        try:
            yield self
        except Exception:
            for store, state in zip(self._stores, states):
                store.restore(state)
            self.rolled_back += 1
            raise
        self.committed += 1


class InMemoryTimeEntries:
    def __init__(self):
        self.by_id: dict[int, TimeEntry] = {}
        self._id = 0

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self.by_id.get(entry_id)

    def create(self, entry: NewTimeEntry) -> int:
        self._id += 1
        self.by_id[self._id] = TimeEntry(
            entry_id=self._id,
            employee_id=entry.employee_id,
            entry_date=entry.entry_date,
            entry_type=entry.entry_type,
            description=entry.description,
            location=entry.location,
        )
        return self._id

    def delete_by_id(self, entry_id: int) -> bool:
        return self.by_id.pop(entry_id, None) is not None

    def _sorted(self, employee_id: int, *, reverse: bool):
        items = [e for e in self.by_id.values() if e.employee_id == employee_id]
        items.sort(key=lambda e: (e.entry_date, e.entry_id), reverse=reverse)
        return items

    def list_for_employee(self, employee_id: int):
        return self._sorted(employee_id, reverse=False)

    def count_for_employee(self, employee_id: int) -> int:
        return len(self._sorted(employee_id, reverse=False))

    def list_recent_for_employee(self, employee_id: int, *, limit: int, offset: int = 0):
        return self._sorted(employee_id, reverse=True)[offset : offset + limit]

    def get_latest_for_employee(self, employee_id: int):
        items = self._sorted(employee_id, reverse=True)
        return items[0] if items else None


@pytest.fixture
def companies():
    return InMemoryCompanies()


@pytest.fixture
def employees():
    return InMemoryEmployees()


@pytest.fixture
def transactions(companies, employees):
    return InMemoryTransactions(companies, employees)


@pytest.fixture
def entries():
    return InMemoryTimeEntries()


@pytest.fixture
def client(companies, employees, transactions, entries):
    from types import SimpleNamespace

    from flask import Flask

    from src.ponto_inteligente.ponto_inteligente.entries.service import TimeEntryService
    from src.ponto_inteligente.ponto_inteligente.main import register_routes
    from src.ponto_inteligente.ponto_inteligente.registration.service import RegistrationService
    from src.ponto_inteligente.ponto_inteligente.security.passwords import PasswordHasher

    container = SimpleNamespace(
        employees_repo=employees,
        registration_service=RegistrationService(
            companies, employees, transactions, hasher=PasswordHasher("pbkdf2:sha256:1000")
        ),
        time_entry_service=TimeEntryService(entries, default_page_size=25),
    )

    app = Flask(__name__)
    app.config.update(TESTING=True, PAGE_SIZE=2, MAX_PAGE_SIZE=3)
    register_routes(app, container)
    return app.test_client()
