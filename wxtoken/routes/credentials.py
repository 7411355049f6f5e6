"""Endpoints de solo lectura sobre las credenciales cacheadas.

Si una credencial todavía no se obtuvo, se devuelve vacía (`"t": ""`) en
lugar de un error; el cliente debe volver a consultar.
"""

import time

from flask import Blueprint, current_app, jsonify, request

from ..src.jssdk import sign
from ..src.utils import make_nonce


bp = Blueprint("credentials", __name__)


def _refresher():
    return current_app.extensions["wxtoken"]


@bp.get("/access_token")
def access_token():
    return jsonify({"t": _refresher().access_token()}), 200


@bp.get("/jsapi_ticket")
def jsapi_ticket():
    return jsonify({"t": _refresher().jsapi_ticket()}), 200


@bp.get("/jssdk_config")
def jssdk_config():
    url = request.args.get("url", "")
    nonce = make_nonce(32)
    timestamp = int(time.time())
    signature = sign(_refresher().jsapi_ticket(), nonce, str(timestamp), url)
    return jsonify({
        "error": "ok",
        "msg": "get jssdk config success",
        "config": {
            "appId": current_app.config.get("WXTOKEN_APPID", ""),
            "nonceStr": nonce,
            "signature": signature,
            "timestamp": timestamp,
        },
    }), 200
