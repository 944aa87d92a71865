from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..companies.model import Company
from ..core.enums import Profile
from ..employees.model import Employee


@dataclass(frozen=True)
class RegistrationInput:
    """Dados do cadastro de pessoa jurídica (empresa + funcionário administrador)."""

    cnpj: str
    legal_name: str
    name: str
    email: str
    cpf: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class RegistrationOutput:
    employee_id: int
    name: str
    email: str
    cpf: str
    profile: Profile
    company_id: int
    legal_name: str
    cnpj: str

    @classmethod
    def from_records(cls, employee: Employee, company: Company) -> "RegistrationOutput":
        return cls(
            employee_id=employee.employee_id,
            name=employee.name,
            email=employee.email,
            cpf=employee.cpf,
            profile=employee.profile,
            company_id=company.company_id,
            legal_name=company.legal_name,
            cnpj=company.cnpj,
        )


class FieldErrors:
    """Validation messages grouped by field, in the order they were found."""

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add(self, field_name: str, message: str) -> None:
        self._errors.setdefault(field_name, []).append(message)

    def messages(self) -> List[str]:
        return [m for msgs in self._errors.values() for m in msgs]

    def as_dict(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._errors.items()}

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __contains__(self, field_name: str) -> bool:
        return field_name in self._errors

    def __repr__(self) -> str:
        return f"FieldErrors({self._errors!r})"


@dataclass(frozen=True)
class RegistrationResult:
    """Either an output (success) or the complete set of field errors, never both."""

    output: Optional[RegistrationOutput] = None
    errors: FieldErrors = field(default_factory=FieldErrors)

    @classmethod
    def succeeded(cls, output: RegistrationOutput) -> "RegistrationResult":
        return cls(output=output)

    @classmethod
    def failed(cls, errors: FieldErrors) -> "RegistrationResult":
        return cls(output=None, errors=errors)

    @property
    def is_success(self) -> bool:
        return self.output is not None and not self.errors
