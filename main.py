
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from sqlalchemy.engine import Engine

import core.config as config
from app.errors import register_error_handlers
from app.routers import register_routers
from database.session import create_db_engine, make_session_factory

load_dotenv()
log = logging.getLogger("uvicorn")


def create_app(database_url: Optional[str] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    명시적 조립: 설정 → 엔진(커넥션 풀) → 세션 팩토리 → 라우터 → FastAPI.
    engine 을 넘기면 그대로 쓰고 종료 시 dispose 하지 않는다 (테스트용).
    """
    owns_engine = engine is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # startup
        db_engine = engine or create_db_engine(database_url)
        app.state.engine = db_engine
        app.state.session_factory = make_session_factory(db_engine)
        log.info("DB pool ready (%s)", db_engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            # shutdown
            if owns_engine:
                db_engine.dispose()
                log.info("DB pool disposed")

    app = FastAPI(title="customers", lifespan=lifespan)
    register_error_handlers(app)
    register_routers(app)
    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.RELOAD,
    )
