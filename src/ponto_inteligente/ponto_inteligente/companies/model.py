from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewCompany:
    """Empresa ainda não persistida."""

    cnpj: str
    legal_name: str

    def persisted(self, company_id: int) -> "Company":
        return Company(company_id=int(company_id), cnpj=self.cnpj, legal_name=self.legal_name)


@dataclass(frozen=True)
class Company:
    """Entidade de domínio: Empresa (pessoa jurídica)."""

    company_id: int
    cnpj: str
    legal_name: str
