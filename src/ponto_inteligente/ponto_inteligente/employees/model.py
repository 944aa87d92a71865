from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Profile


@dataclass(frozen=True)
class EmployeeDraft:
    """Funcionário montado a partir do cadastro, ainda sem empresa.

    A draft cannot be persisted; ``link`` it to a saved company first.
    """

    name: str
    email: str
    cpf: str
    profile: Profile
    password_hash: str

    def link(self, company_id: int) -> "NewEmployee":
        return NewEmployee(
            name=self.name,
            email=self.email,
            cpf=self.cpf,
            profile=self.profile,
            password_hash=self.password_hash,
            company_id=int(company_id),
        )


@dataclass(frozen=True)
class NewEmployee:
    """Funcionário pronto para persistir (empresa já definida)."""

    name: str
    email: str
    cpf: str
    profile: Profile
    password_hash: str
    company_id: int

    def persisted(self, employee_id: int) -> "Employee":
        return Employee(
            employee_id=int(employee_id),
            name=self.name,
            email=self.email,
            cpf=self.cpf,
            profile=self.profile,
            password_hash=self.password_hash,
            company_id=self.company_id,
        )


@dataclass(frozen=True)
class Employee:
    """Entidade de domínio: Funcionário.

    Note: plain data object, no database access here.
    """

    employee_id: int
    name: str
    email: str
    cpf: str
    profile: Profile
    password_hash: str
    company_id: int
