from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} não pode ser vazio.")
    return str(value).strip()


def require_length(value: str, field_name: str, min_len: int, max_len: int) -> str:
    if value is None or not (min_len <= len(value) <= max_len):
        raise ValidationError(f"{field_name} deve conter entre {min_len} e {max_len} caracteres.")
    return value


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} inválido.")
    if isinstance(value, bool) or number <= 0:
        raise ValidationError(f"{field_name} inválido.")
    return number


def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def is_valid_email(value: str) -> bool:
    return bool(value) and _EMAIL_RE.match(value) is not None


def _check_digit(digits: str, weights: list[int]) -> int:
    remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """Validate a CPF (11 digits, two mod-11 check digits)."""
    cpf = only_digits(value)
    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False

    first = _check_digit(cpf[:9], list(range(10, 1, -1)))
    second = _check_digit(cpf[:10], list(range(11, 1, -1)))
    return cpf[-2:] == f"{first}{second}"


def is_valid_cnpj(value: str) -> bool:
    """Validate a CNPJ (14 digits, two mod-11 check digits)."""
    cnpj = only_digits(value)
    if len(cnpj) != 14 or cnpj == cnpj[0] * 14:
        return False

    weights = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    first = _check_digit(cnpj[:12], weights)
    second = _check_digit(cnpj[:13], [6] + weights)
    return cnpj[-2:] == f"{first}{second}"
