from flask import Blueprint


bp = Blueprint("health", __name__)


@bp.get("/ping")
def ping():
    return "", 200
