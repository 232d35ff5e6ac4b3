import os
import re
from pathlib import Path
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from settings import DATABASE_PATH


def sqlite_readonly_url(path: str | Path) -> str:
    # pysqlite opens the file through a URI so that mode=ro is honoured
    resolved = quote(Path(path).expanduser().resolve().as_posix())
    return f"sqlite:///file:{resolved}?mode=ro&uri=true"


def _normalize_database_url(raw_url: str) -> str:
    return re.sub(r"\s+", "", (raw_url or "").strip())


def resolve_database_url(env_url: str | None, path: str | Path) -> str:
    if env_url and env_url.strip():
        return _normalize_database_url(env_url)
    return sqlite_readonly_url(path)


DATABASE_URL = resolve_database_url(os.getenv("DATABASE_URL"), DATABASE_PATH)

engine_kwargs = {
    "pool_pre_ping": True,
}

if DATABASE_URL.startswith("sqlite"):
    # sync handlers run in the threadpool, so connections cross threads
    engine_kwargs["connect_args"] = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, **engine_kwargs)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
