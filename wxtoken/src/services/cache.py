"""Caché de una credencial protegida por un lock de lectura/escritura.

Varios lectores pueden leer a la vez; un escritor excluye a lectores y a otros
escritores. El valor se guarda completo o no se guarda.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            # Los escritores en espera tienen prioridad para no quedar hambrientos
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class CredentialCache:
    def __init__(self, name: str = "credential") -> None:
        self.name = name
        self._lock = ReadWriteLock()
        self._value = ""

    def get(self) -> str:
        """Último valor confirmado; cadena vacía si nunca hubo uno."""
        with self._lock.read():
            return self._value

    def set(self, value: str) -> None:
        with self._lock.write():
            self._value = value
