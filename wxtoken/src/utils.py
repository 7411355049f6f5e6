import secrets
import string
from typing import Tuple


NONCE_ALPHABET = string.ascii_letters


def make_nonce(length: int = 32) -> str:
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


def parse_addr(addr: str, default_port: int = 3001) -> Tuple[str, int]:
    """Convierte "host:port" (o ":port") en (host, port); sin host -> 0.0.0.0."""
    host, sep, port = addr.strip().rpartition(":")
    if not sep:
        host, port = port, ""
    host = host.strip("[]") or "0.0.0.0"
    try:
        return host, int(port) if port else default_port
    except ValueError:
        raise ValueError(f"Dirección inválida: {addr!r}") from None
