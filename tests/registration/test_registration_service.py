from __future__ import annotations

import pytest

from src.ponto_inteligente.ponto_inteligente.core.enums import Profile
from src.ponto_inteligente.ponto_inteligente.core.exceptions import (
    DuplicateRecordError,
    HashingError,
    RegistrationCommitError,
)
from src.ponto_inteligente.ponto_inteligente.registration.model import RegistrationInput
from src.ponto_inteligente.ponto_inteligente.registration.service import RegistrationService
from src.ponto_inteligente.ponto_inteligente.security.passwords import PasswordHasher, verify_password

# Low iteration count keeps the suite fast; still a real salted pbkdf2 hash.
fast_hasher = PasswordHasher("pbkdf2:sha256:1000")


def acme(**overrides) -> RegistrationInput:
    data = dict(
        cnpj="12.345.678/0001-99",
        legal_name="Acme Ltd",
        name="Jane Doe",
        email="jane@acme.com",
        cpf="111.222.333-44",
        password="p@ss",
    )
    data.update(overrides)
    return RegistrationInput(**data)


@pytest.fixture
def service(companies, employees, transactions):
    return RegistrationService(companies, employees, transactions, hasher=fast_hasher)


def test_register_new_company_creates_admin_employee(service, companies, employees):
    result = service.register(acme())

    assert result.is_success
    out = result.output
    assert out.profile == Profile.ROLE_ADMIN
    assert out.legal_name == "Acme Ltd"
    assert out.cnpj == "12.345.678/0001-99"
    assert out.name == "Jane Doe"

    assert companies.writes == 1
    assert employees.writes == 1
    saved_company = companies.get_by_cnpj("12.345.678/0001-99")
    saved_employee = employees.get_by_id(out.employee_id)
    assert out.company_id == saved_company.company_id
    assert saved_employee.company_id == saved_company.company_id


def test_register_stores_hash_not_plaintext(service, employees):
    out = service.register(acme()).output

    stored = employees.get_by_id(out.employee_id).password_hash
    assert stored != "p@ss"
    assert verify_password("p@ss", stored)


def test_register_existing_cnpj_fails_without_writes(service, companies, employees):
    service.register(acme())

    result = service.register(acme(name="John Roe", email="john@acme.com", cpf="999.888.777-66"))

    assert not result.is_success
    assert result.output is None
    assert result.errors.messages() == ["Empresa já existente."]
    assert companies.writes == 1
    assert employees.writes == 1


def test_register_reports_cpf_and_email_conflicts_together(service):
    service.register(acme())

    result = service.register(acme(cnpj="98.765.432/0001-10", legal_name="Other Co"))

    assert result.errors.messages() == ["CPF já existente.", "Email já existente."]
    assert result.errors.as_dict() == {"cpf": ["CPF já existente."], "email": ["Email já existente."]}


def test_register_reports_every_conflict(service):
    service.register(acme())

    result = service.register(acme())

    assert result.errors.messages() == ["Empresa já existente.", "CPF já existente.", "Email já existente."]


def test_hashing_failure_is_fatal_and_writes_nothing(companies, employees, transactions):
    def broken_hasher(secret: str) -> str:
        raise HashingError("no algorithm")

    svc = RegistrationService(companies, employees, transactions, hasher=broken_hasher)

    with pytest.raises(HashingError):
        svc.register(acme())
    assert companies.writes == 0
    assert employees.writes == 0


def test_employee_write_failure_rolls_back_company(service, companies, employees, transactions):
    employees.fail_on_create = RuntimeError("connection lost")

    with pytest.raises(RegistrationCommitError):
        service.register(acme())

    assert companies.get_by_cnpj("12.345.678/0001-99") is None
    assert transactions.rolled_back == 1
    assert transactions.committed == 0


def test_unique_key_race_becomes_validation_result(service, companies, employees, transactions):
    # Another request inserted the same CPF between the check and the write.
    employees.fail_on_create = DuplicateRecordError("cpf")

    result = service.register(acme())

    assert not result.is_success
    assert result.errors.messages() == ["CPF já existente."]
    assert companies.get_by_cnpj("12.345.678/0001-99") is None
    assert transactions.rolled_back == 1
