from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any, Callable, Protocol

from ..companies.model import NewCompany
from ..companies.repository import CompanyRepository
from ..core.constants import MSG_COMPANY_EXISTS, MSG_CPF_EXISTS, MSG_EMAIL_EXISTS
from ..core.enums import Profile
from ..core.exceptions import DuplicateRecordError, RegistrationCommitError
from ..employees.model import EmployeeDraft
from ..employees.repository import EmployeeRepository
from ..security.passwords import hash_password
from .model import FieldErrors, RegistrationInput, RegistrationOutput, RegistrationResult

logger = logging.getLogger(__name__)

_DUPLICATE_MESSAGES = {
    "cnpj": MSG_COMPANY_EXISTS,
    "cpf": MSG_CPF_EXISTS,
    "email": MSG_EMAIL_EXISTS,
}


class TransactionManager(Protocol):
    def transaction(self) -> AbstractContextManager[Any]:
        raise NotImplementedError


class RegistrationService:
    """Use case: cadastro de pessoa jurídica (empresa + administrador)."""

    def __init__(
        self,
        companies: CompanyRepository,
        employees: EmployeeRepository,
        transactions: TransactionManager,
        *,
        hasher: Callable[[str], str] = hash_password,
    ):
        self._companies = companies
        self._employees = employees
        self._transactions = transactions
        self._hasher = hasher

    def register(self, data: RegistrationInput) -> RegistrationResult:
        logger.info("Cadastrando PJ: cnpj=%s email=%s", data.cnpj, data.email)

        errors = self._check_existing(data)

        company = NewCompany(cnpj=data.cnpj, legal_name=data.legal_name)
        # HashingError propagates as-is; it is not a validation problem.
        draft = EmployeeDraft(
            name=data.name,
            email=data.email,
            cpf=data.cpf,
            profile=Profile.ROLE_ADMIN,
            password_hash=self._hasher(data.password),
        )

        if errors:
            logger.warning("Erro validando dados de cadastro PJ: %s", errors.as_dict())
            return RegistrationResult.failed(errors)

        try:
            output = self._persist(company, draft)
        except DuplicateRecordError as exc:
            # Lost a race with a concurrent registration; the unique key caught it.
            logger.warning("Cadastro PJ rejeitado pelo banco: campo %s duplicado", exc.field)
            errors.add(exc.field, _DUPLICATE_MESSAGES.get(exc.field, str(exc)))
            return RegistrationResult.failed(errors)

        logger.info("PJ cadastrada: company_id=%s employee_id=%s", output.company_id, output.employee_id)
        return RegistrationResult.succeeded(output)

    def _check_existing(self, data: RegistrationInput) -> FieldErrors:
        errors = FieldErrors()
        if self._companies.get_by_cnpj(data.cnpj):
            errors.add("cnpj", MSG_COMPANY_EXISTS)
        if self._employees.get_by_cpf(data.cpf):
            errors.add("cpf", MSG_CPF_EXISTS)
        if self._employees.get_by_email(data.email):
            errors.add("email", MSG_EMAIL_EXISTS)
        return errors

    def _persist(self, company: NewCompany, draft: EmployeeDraft) -> RegistrationOutput:
        with self._transactions.transaction():
            saved_company = company.persisted(self._companies.create_company(company))

            employee = draft.link(saved_company.company_id)
            try:
                employee_id = self._employees.create_employee(employee)
            except DuplicateRecordError:
                raise
            except Exception as exc:
                logger.error("Falha ao persistir funcionário da empresa %s: %s", saved_company.cnpj, exc)
                raise RegistrationCommitError("Falha ao concluir o cadastro da empresa") from exc

            return RegistrationOutput.from_records(employee.persisted(employee_id), saved_company)
