"""Loops de refresco en segundo plano para el access_token y el jsapi_ticket.

Cada loop alterna dos estados: obtener la credencial y dormir. Tras un éxito
duerme lo que dura la credencial; tras un fallo reintenta a intervalo fijo,
sin límite de fallos consecutivos.

Uso:
    refresher = CredentialRefresher()
    refresher.start()
    refresher.access_token()
    refresher.stop()
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Tuple

from ..config import Config
from ..errors import FetchError
from .cache import CredentialCache
from .credentials import Credential
from .relay import CredentialRelay, RelayClosed, RelayTimeout
from .weixin import AccessTokenFetcher, JSApiTicketFetcher


logger = logging.getLogger(__name__)

FetchFn = Callable[..., Credential]


class RefreshLoop:
    def __init__(
        self,
        name: str,
        fetch: FetchFn,
        cache: CredentialCache,
        params: Tuple[str, ...] = (),
        upstream: Optional[CredentialRelay] = None,
        downstream: Optional[CredentialRelay] = None,
        retry_interval: Optional[float] = None,
    ):
        self.name = name
        self.fetch = fetch
        self.cache = cache
        self.params = params
        self.upstream = upstream
        self.downstream = downstream
        self.retry_interval = Config.WXTOKEN_RETRY_INTERVAL if retry_interval is None else retry_interval
        self.failures = 0
        self._upstream_value: Optional[str] = None
        self._last_ok = False
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _next_params(self) -> Tuple[str, ...]:
        if self.upstream is None:
            return self.params
        if self._upstream_value is None or self._last_ok:
            self._upstream_value = self.upstream.receive()
        else:
            # Reintento: usar un token más nuevo solo si ya está ofrecido
            try:
                self._upstream_value = self.upstream.receive(timeout=0)
            except RelayTimeout:
                pass
        return (self._upstream_value,)

    def run_once(self) -> float:
        """Run one fetch cycle and return how long to sleep before the next one.

        Raises RelayClosed if the loop is stopped while waiting on a relay.
        """
        params = self._next_params()
        logger.info("requesting new %s", self.name)
        try:
            credential = self.fetch(*params)
        except FetchError as exc:
            self._last_ok = False
            self.failures += 1
            logger.warning(
                "%s refresh failed (%d in a row), retrying in %ss: %s",
                self.name,
                self.failures,
                self.retry_interval,
                exc,
            )
            return self.retry_interval

        self.cache.set(credential.value)
        self._last_ok = True
        self.failures = 0
        logger.info("cached new %s (expires in %ds)", self.name, credential.validity)
        if self.downstream is not None:
            self.downstream.publish(credential.value)
        return float(credential.validity)

    def run(self) -> None:
        logger.info("start caching %s", self.name)
        try:
            while not self._stop.is_set():
                delay = self.run_once()
                if self._stop.wait(delay):
                    break
        except RelayClosed:
            pass
        logger.info("stopped caching %s", self.name)

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError(f"{self.name} loop already started")
        self._thread = threading.Thread(target=self.run, name=f"refresh-{self.name}", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        for relay in (self.upstream, self.downstream):
            if relay is not None:
                relay.close()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()


class CredentialRefresher:
    """Caches, relevo y los dos loops; se inyecta en la app de Flask."""

    def __init__(
        self,
        token_fetcher: Optional[AccessTokenFetcher] = None,
        ticket_fetcher: Optional[JSApiTicketFetcher] = None,
        retry_interval: Optional[float] = None,
    ):
        token_fetcher = token_fetcher or AccessTokenFetcher()
        ticket_fetcher = ticket_fetcher or JSApiTicketFetcher()
        self.access_token_cache = CredentialCache("access token")
        self.jsapi_ticket_cache = CredentialCache("jsapi ticket")
        self.relay = CredentialRelay()
        self.token_loop = RefreshLoop(
            "access token",
            token_fetcher.fetch,
            self.access_token_cache,
            downstream=self.relay,
            retry_interval=retry_interval,
        )
        self.ticket_loop = RefreshLoop(
            "jsapi ticket",
            ticket_fetcher.fetch,
            self.jsapi_ticket_cache,
            upstream=self.relay,
            retry_interval=retry_interval,
        )

    def access_token(self) -> str:
        return self.access_token_cache.get()

    def jsapi_ticket(self) -> str:
        return self.jsapi_ticket_cache.get()

    def start(self) -> None:
        self.token_loop.start()
        self.ticket_loop.start()

    def stop(self) -> None:
        self.token_loop.stop()
        self.ticket_loop.stop()

    def join(self, timeout: Optional[float] = None) -> None:
        self.token_loop.join(timeout)
        self.ticket_loop.join(timeout)
