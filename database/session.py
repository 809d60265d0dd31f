from __future__ import annotations

from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

import core.config as config
import database.base as base


def create_db_engine(url: Optional[str] = None, **kwargs) -> Engine:
    """
    프로세스당 한 번 생성하는 커넥션 풀.
    PostgreSQL(psycopg2) 이면 connect_timeout / statement_timeout 을 드라이버에 넘긴다.
    """
    url = url or base.DATABASE_URL
    if make_url(url).get_backend_name() == "postgresql":
        connect_args = {"connect_timeout": config.DB_CONNECT_TIMEOUT}
        if config.DB_STATEMENT_TIMEOUT_MS > 0:
            connect_args["options"] = f"-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}"
        kwargs.setdefault("connect_args", connect_args)
        if "poolclass" not in kwargs:
            kwargs.setdefault("pool_size", config.DB_POOL_SIZE)
            kwargs.setdefault("max_overflow", config.DB_MAX_OVERFLOW)
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, echo=config.DB_ECHO, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    # 삭제된 행도 응답으로 직렬화해야 하므로 commit 후 만료시키지 않는다
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
