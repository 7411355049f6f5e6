"""Relevo sin búfer entre el loop del access_token y el del jsapi_ticket.

`publish` bloquea hasta que un receptor toma el valor y `receive` bloquea
hasta que alguien publica: el loop del ticket nunca usa un token de dos
ciclos atrás.
"""

from __future__ import annotations

import threading
from typing import Optional


class RelayClosed(Exception):
    """El relevo se cerró mientras se esperaba."""


class RelayTimeout(Exception):
    """No había ningún valor ofrecido dentro del plazo."""


class CredentialRelay:
    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._value: Optional[str] = None
        self._offered = False
        self._published = 0
        self._received = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, value: str) -> int:
        """Entrega `value` y espera a que se reciba. Devuelve su número de secuencia."""
        with self._cond:
            # Un solo mensaje en vuelo
            self._cond.wait_for(lambda: not self._offered or self._closed)
            if self._closed:
                raise RelayClosed()
            self._value = value
            self._offered = True
            self._published += 1
            seq = self._published
            self._cond.notify_all()
            self._cond.wait_for(lambda: self._received >= seq or self._closed)
            if self._received < seq:
                self._value = None
                self._offered = False
                raise RelayClosed()
            return seq

    def receive(self, timeout: Optional[float] = None) -> str:
        with self._cond:
            ready = self._cond.wait_for(lambda: self._offered or self._closed, timeout)
            if self._closed:
                raise RelayClosed()
            if not ready:
                raise RelayTimeout()
            value = self._value
            self._value = None
            self._offered = False
            self._received += 1
            self._cond.notify_all()
            return value

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()
