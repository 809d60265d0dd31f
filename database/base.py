import os

from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base

import core.config as config

Base = declarative_base()


def build_database_url() -> str:
    """DATABASE_URL 이 있으면 그대로, 없으면 DB_* 조각으로 조립 (비밀번호 escape 포함)."""
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return URL.create(
        drivername=config.DB,
        username=config.DB_USER or None,
        password=config.DB_PASSWORD or None,
        host=config.DB_SERVER or None,
        port=int(config.DB_PORT) if config.DB_PORT else None,
        database=config.DB_NAME or None,
    ).render_as_string(hide_password=False)


DATABASE_URL = build_database_url()
