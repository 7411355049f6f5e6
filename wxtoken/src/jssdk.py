"""Firma de configuración del JS-SDK de WeChat."""

import hashlib


def sign(jsapi_ticket: str, noncestr: str, timestamp: str, url: str) -> str:
    """SHA-1 en hex de la cadena `jsapi_ticket=..&noncestr=..&timestamp=..&url=..`.

    El fragmento (`#...`) de la URL no forma parte de lo firmado.
    """
    url = url.split("#", 1)[0]
    raw = f"jsapi_ticket={jsapi_ticket}&noncestr={noncestr}&timestamp={timestamp}&url={url}"
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()
