import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", "./public"))
TEMPLATE_DIR = Path(os.getenv("TEMPLATE_DIR", "./templates"))
DATABASE_PATH = Path(os.getenv("DATABASE_PATH", "./electric_vehicles.db"))

# Off by default so pages match the legacy unescaped output byte for byte.
ESCAPE_HTML = _flag("ESCAPE_HTML")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
