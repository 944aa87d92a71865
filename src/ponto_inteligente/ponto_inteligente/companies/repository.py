from __future__ import annotations

from typing import Optional, Protocol

from .model import Company, NewCompany


class CompanyRepository(Protocol):
    """Repository interface for Company.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_cnpj(self, cnpj: str) -> Optional[Company]:
        raise NotImplementedError

    def create_company(self, company: NewCompany) -> int:
        """Insert and return the new company_id.

        Raises DuplicateRecordError(field="cnpj") if the store already holds the cnpj.
        """

        raise NotImplementedError
