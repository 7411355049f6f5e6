"""Base helper for exchanging provider secrets for a time-limited credential."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

import requests

from ..errors import ParseError, RemoteError, TransportError


@dataclass(frozen=True)
class Credential:
    value: str
    validity: int  # segundos


class CredentialFetcher(ABC):
    """Una sola petición al proveedor; sin estado y sin reintentos."""

    name: str = "credential"
    value_field: str = "value"

    def __init__(self, api_base: str, timeout: float = 20):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @abstractmethod
    def url(self, *params: str) -> str:
        """Return the provider URL for the given parameters."""

    def fetch(self, *params: str) -> Credential:
        try:
            resp = requests.get(self.url(*params), timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"{self.name}: {exc}") from exc
        try:
            data = resp.json()
        except ValueError as exc:
            raise ParseError(f"{self.name}: invalid JSON body (HTTP {resp.status_code})") from exc
        return self._parse(data)

    def _parse(self, data: Any) -> Credential:
        if not isinstance(data, dict):
            raise ParseError(f"{self.name}: expected a JSON object, got {type(data).__name__}")
        errcode = self._int_field(data, "errcode")
        validity = self._int_field(data, "expires_in")
        value = data.get(self.value_field) or ""
        if not isinstance(value, str):
            raise ParseError(f"{self.name}: {self.value_field} is not a string")

        credential = Credential(value=value, validity=validity)
        if errcode != 0:
            raise RemoteError(errcode, str(data.get("errmsg") or ""), credential)
        if not value:
            raise ParseError(f"{self.name}: response did not include {self.value_field}")
        # Una validez nula haría que el loop consultara sin pausa
        if validity <= 0:
            raise ParseError(f"{self.name}: expires_in must be positive, got {validity}")
        return credential

    def _int_field(self, data: Dict[str, Any], key: str) -> int:
        """Entero de la respuesta; ausente -> 0. Rechaza bool, NaN, infinito y fracciones."""
        raw = data.get(key)
        if raw is None:
            return 0
        if isinstance(raw, bool):
            raise ParseError(f"{self.name}: {key} is not an integer: {raw!r}")
        if isinstance(raw, float):
            if not math.isfinite(raw) or not raw.is_integer():
                raise ParseError(f"{self.name}: {key} is not an integer: {raw!r}")
            return int(raw)
        try:
            return int(raw)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ParseError(f"{self.name}: {key} is not an integer: {raw!r}") from exc
