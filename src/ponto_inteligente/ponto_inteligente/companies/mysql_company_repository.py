from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, translate_duplicate_key
from .model import Company, NewCompany
from .repository import CompanyRepository


def _row_to_company(r: dict) -> Company:
    return Company(company_id=int(r["company_id"]), cnpj=r["cnpj"], legal_name=r["legal_name"])


class MySQLCompanyRepository(CompanyRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_cnpj(self, cnpj: str) -> Optional[Company]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT company_id, cnpj, legal_name FROM companies WHERE cnpj=%s",
                (cnpj,),
            )
            r = fetchone(cur)
            return _row_to_company(r) if r else None

    def create_company(self, company: NewCompany) -> int:
        with translate_duplicate_key({"uq_companies_cnpj": "cnpj"}):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO companies(cnpj, legal_name) VALUES(%s,%s)",
                    (company.cnpj, company.legal_name),
                )
                return int(cur.lastrowid)
