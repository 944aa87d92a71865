from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import (
    is_valid_cnpj,
    is_valid_cpf,
    is_valid_email,
    only_digits,
    require_length,
    require_non_empty,
)
from ..core.exceptions import ValidationError
from ..container import Container
from .model import RegistrationInput, RegistrationOutput


def _parse_registration(payload: dict) -> tuple[RegistrationInput | None, list[str]]:
    """Schema validation for the registration body; collects every problem it finds."""

    errors: list[str] = []

    def field(key: str, label: str, min_len: int, max_len: int) -> str:
        try:
            value = require_non_empty(payload.get(key, ""), label)
            return require_length(value, label, min_len, max_len)
        except ValidationError as e:
            errors.append(str(e))
            return ""

    def secret(key: str, label: str, max_len: int) -> str:
        # Hashed exactly as typed; only a missing or blank value is rejected.
        value = payload.get(key)
        value = "" if value is None else str(value)
        if not value.strip():
            errors.append(f"{label} não pode ser vazio.")
            return ""
        if len(value) > max_len:
            errors.append(f"{label} deve conter entre 1 e {max_len} caracteres.")
            return ""
        return value

    name = field("nome", "Nome", 3, 200)
    email = field("email", "Email", 5, 200)
    password = secret("senha", "Senha", 200)
    cpf = field("cpf", "CPF", 11, 14)
    legal_name = field("razaoSocial", "Razão social", 5, 200)
    cnpj = field("cnpj", "CNPJ", 14, 18)

    if email and not is_valid_email(email):
        errors.append("Email inválido.")
    if cpf and not is_valid_cpf(cpf):
        errors.append("CPF inválido.")
    if cnpj and not is_valid_cnpj(cnpj):
        errors.append("CNPJ inválido.")

    if errors:
        return None, errors

    return (
        RegistrationInput(
            cnpj=only_digits(cnpj),
            legal_name=legal_name,
            name=name,
            email=email.lower(),
            cpf=only_digits(cpf),
            password=password,
        ),
        [],
    )


def _output_to_json(out: RegistrationOutput) -> dict:
    return {
        "id": out.employee_id,
        "nome": out.name,
        "email": out.email,
        "cpf": out.cpf,
        "perfil": out.profile.value,
        "empresaId": out.company_id,
        "razaoSocial": out.legal_name,
        "cnpj": out.cnpj,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/cadastrar-pj", methods=["POST"], endpoint="register_company")
    def register_company():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        data, errors = _parse_registration(payload)
        if data is None:
            return jsonify({"data": None, "errors": errors}), 400

        result = container.registration_service.register(data)
        if not result.is_success:
            return jsonify({"data": None, "errors": result.errors.messages()}), 400
        return jsonify({"data": _output_to_json(result.output), "errors": []}), 200
