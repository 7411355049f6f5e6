import os
from dotenv import load_dotenv


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Credenciales de la cuenta oficial de WeChat
    WXTOKEN_APPID = os.getenv("WXTOKEN_APPID", "")
    WXTOKEN_APPSECRET = os.getenv("WXTOKEN_APPSECRET", "")

    # host:port; sin host escucha en todas las interfaces
    WXTOKEN_ADDR = os.getenv("WXTOKEN_ADDR", ":3001")

    WXTOKEN_API_BASE = os.getenv("WXTOKEN_API_BASE", "https://api.weixin.qq.com")
    WXTOKEN_FETCH_TIMEOUT = float(os.getenv("WXTOKEN_FETCH_TIMEOUT", "20"))
    # Reintento fijo tras un fallo (segundos)
    WXTOKEN_RETRY_INTERVAL = float(os.getenv("WXTOKEN_RETRY_INTERVAL", "1"))
