from __future__ import annotations

from enum import Enum


class Profile(str, Enum):
    """Perfil de acesso do funcionário."""

    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_USUARIO = "ROLE_USUARIO"


class EntryType(str, Enum):
    """Tipo de lançamento (batida de ponto)."""

    INICIO_TRABALHO = "INICIO_TRABALHO"
    TERMINO_TRABALHO = "TERMINO_TRABALHO"
    INICIO_ALMOCO = "INICIO_ALMOCO"
    TERMINO_ALMOCO = "TERMINO_ALMOCO"
    INICIO_PAUSA = "INICIO_PAUSA"
    TERMINO_PAUSA = "TERMINO_PAUSA"
