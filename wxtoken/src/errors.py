"""Errores al obtener credenciales del proveedor."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .services.credentials import Credential


class FetchError(RuntimeError):
    """Base de todos los fallos de un CredentialFetcher."""


class TransportError(FetchError):
    """No se pudo contactar con el proveedor (red, DNS, timeout)."""


class ParseError(FetchError):
    """La respuesta del proveedor no tiene la forma esperada."""


class RemoteError(FetchError):
    def __init__(self, code: int, message: str, credential: Optional["Credential"] = None):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        # Solo para diagnóstico; nunca se guarda en caché
        self.credential = credential
