from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.datetime_utils import format_datetime, parse_entry_datetime
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.enums import EntryType
from ..core.exceptions import ValidationError
from ..container import Container
from .model import NewTimeEntry, TimeEntry


def _entry_to_json(entry: TimeEntry) -> dict:
    return {
        "id": entry.entry_id,
        "funcionarioId": entry.employee_id,
        "data": format_datetime(entry.entry_date),
        "tipo": entry.entry_type.value if entry.entry_type else None,
        "descricao": entry.description,
        "localizacao": entry.location,
        "dataCriacao": format_datetime(entry.created_at),
    }


def _ok(data, status: int = 200):
    return jsonify({"data": data, "errors": []}), status


def _fail(message: str, status: int):
    return jsonify({"data": None, "errors": [message]}), status


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Parâmetro '{name}' inválido.")


def register(app: Flask, container: Container) -> None:
    service = container.time_entry_service

    def parse_entry(payload: dict) -> NewTimeEntry:
        employee_id = require_positive_int(payload.get("funcionarioId"), "Funcionário")
        if not container.employees_repo.get_by_id(employee_id):
            raise ValidationError("Funcionário não encontrado. ID inexistente.")

        entry_type = None
        tipo = str(payload.get("tipo") or "").strip()
        if tipo:
            try:
                entry_type = EntryType(tipo)
            except ValueError:
                raise ValidationError("Tipo inválido.")

        return NewTimeEntry(
            employee_id=employee_id,
            entry_date=parse_entry_datetime(payload.get("data", "")),
            entry_type=entry_type,
            description=str(payload.get("descricao") or "").strip() or None,
            location=str(payload.get("localizacao") or "").strip() or None,
        )

    @app.route("/api/lancamentos", methods=["POST"], endpoint="create_entry")
    def create_entry():
        payload = request.get_json(silent=True)
        entry = service.create(parse_entry(payload if isinstance(payload, dict) else {}))
        return _ok(_entry_to_json(entry), 201)

    @app.route("/api/lancamentos/<int:entry_id>", methods=["GET"], endpoint="get_entry")
    def get_entry(entry_id: int):
        entry = service.get_by_id(entry_id)
        if not entry:
            return _fail(f"Lançamento não encontrado para o id {entry_id}", 404)
        return _ok(_entry_to_json(entry))

    @app.route("/api/lancamentos/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    def delete_entry(entry_id: int):
        service.remove(entry_id)
        return _ok(None)

    @app.route("/api/lancamentos/funcionario/<int:employee_id>", methods=["GET"], endpoint="list_entries_page")
    def list_entries_page(employee_id: int):
        default_size = int(current_app.config.get("PAGE_SIZE", DEFAULT_PAGE_SIZE))
        max_size = int(current_app.config.get("MAX_PAGE_SIZE", MAX_PAGE_SIZE))
        page = _int_arg("pag", 0)
        size = min(_int_arg("qtd", default_size), max_size)

        result = service.list_page(employee_id, page, size)
        return _ok(result.to_dict(_entry_to_json))

    @app.route("/api/lancamentos/funcionario/<int:employee_id>/todos", methods=["GET"], endpoint="list_all_entries")
    def list_all_entries(employee_id: int):
        return _ok([_entry_to_json(e) for e in service.list_all(employee_id)])

    @app.route("/api/lancamentos/funcionario/<int:employee_id>/ultimo", methods=["GET"], endpoint="latest_entry")
    def latest_entry(employee_id: int):
        entry = service.most_recent(employee_id)
        return _ok(_entry_to_json(entry) if entry else None)
