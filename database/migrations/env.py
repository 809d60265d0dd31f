import os, sys
from logging.config import fileConfig
from alembic import context
from sqlalchemy import pool

# 프로젝트 루트 (database/migrations/ 기준 두 단계 상위)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from database.base import Base, DATABASE_URL
from database.session import create_db_engine
import models  # customers 테이블 메타데이터 로드

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# 앱과 같은 DB 를 보도록 강제
config.set_main_option("sqlalchemy.url", DATABASE_URL)

target_metadata = Base.metadata


def run_migrations_offline():
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    # 마이그레이션은 풀 없이 한 번만 연결
    connectable = create_db_engine(DATABASE_URL, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
