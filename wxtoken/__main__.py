import logging

from . import create_app
from .src.config import Config
from .src.services.refresher import CredentialRefresher
from .src.utils import parse_addr


def main():
    refresher = CredentialRefresher()
    app = create_app(Config, refresher)
    host, port = parse_addr(Config.WXTOKEN_ADDR)

    # create_app ya configuró el logging
    if not (Config.WXTOKEN_APPID and Config.WXTOKEN_APPSECRET):
        logging.warning("WXTOKEN_APPID / WXTOKEN_APPSECRET no configurados")

    refresher.start()
    try:
        app.run(host=host, port=port, debug=False, threaded=True)
    finally:
        refresher.stop()
        refresher.join(timeout=5)


if __name__ == "__main__":
    main()
