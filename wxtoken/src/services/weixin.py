"""Fetchers de WeChat: access_token (client credential) y jsapi_ticket.

Uso:
    token = AccessTokenFetcher(appid, secret).fetch()
    ticket = JSApiTicketFetcher().fetch(token.value)
"""

from __future__ import annotations

from typing import Optional

from ..config import Config
from .credentials import CredentialFetcher


ACCESS_TOKEN_PATH = "/cgi-bin/token?grant_type=client_credential&appid=%s&secret=%s"
JSAPI_TICKET_PATH = "/cgi-bin/ticket/getticket?access_token=%s&type=jsapi"


class AccessTokenFetcher(CredentialFetcher):
    name = "access token"
    value_field = "access_token"

    def __init__(
        self,
        appid: Optional[str] = None,
        secret: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(
            api_base=api_base or Config.WXTOKEN_API_BASE,
            timeout=timeout or Config.WXTOKEN_FETCH_TIMEOUT,
        )
        self.appid = Config.WXTOKEN_APPID if appid is None else appid
        self.secret = Config.WXTOKEN_APPSECRET if secret is None else secret

    def url(self, *params: str) -> str:
        # El formato documentado por WeChat no requiere escapar los parámetros
        return self.api_base + ACCESS_TOKEN_PATH % (self.appid, self.secret)


class JSApiTicketFetcher(CredentialFetcher):
    name = "jsapi ticket"
    value_field = "ticket"

    def __init__(self, api_base: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(
            api_base=api_base or Config.WXTOKEN_API_BASE,
            timeout=timeout or Config.WXTOKEN_FETCH_TIMEOUT,
        )

    def url(self, *params: str) -> str:
        (access_token,) = params
        return self.api_base + JSAPI_TICKET_PATH % access_token
