# config.py
import os
from dotenv import load_dotenv

# 0) .env 로드
load_dotenv()

# 1) 서버
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "9999"))
RELOAD = bool(int(os.getenv("RELOAD", "0")))

# 2) 로깅
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 3) DB
DB = os.getenv("DB", "postgresql")
DB_USER = os.getenv("DB_USER", "app")
DB_PASSWORD = os.getenv("DB_PASSWORD", "pass")
DB_SERVER = os.getenv("DB_SERVER", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "db")

# 4) 커넥션 풀
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))        # 초
DB_STATEMENT_TIMEOUT_MS = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", "30000"))  # 0 = 제한 없음
DB_ECHO = bool(int(os.getenv("DB_ECHO", "0")))
