from sqlalchemy import text
from sqlalchemy.engine import Engine
from utils.logger import get_logger

logger = get_logger(__name__)

def get_db_schema_sql() -> str:
    """
    songs テーブルの DDL。
    SERIAL を持たない DuckDB に合わせてシーケンスで id を採番する (PostgreSQL でもそのまま動く)。
    "group" は予約語のため引用符で囲む。
    """
    return """
    CREATE SEQUENCE IF NOT EXISTS seq_songs_id START 1;

    CREATE TABLE IF NOT EXISTS songs (
        id INTEGER PRIMARY KEY DEFAULT nextval('seq_songs_id'),
        "group" VARCHAR NOT NULL,
        song VARCHAR NOT NULL,
        release_date VARCHAR DEFAULT '',
        text VARCHAR DEFAULT '',
        link VARCHAR DEFAULT ''
    );
    """

def get_schema_statements() -> list[str]:
    return [s.strip() for s in get_db_schema_sql().split(';') if s.strip()]

def init_raw_db(conn_engine: Engine):
    """songs テーブルを冪等に作成する"""
    logger.info("Initializing songs schema...")
    try:
        with conn_engine.begin() as conn:
            for stmt in get_schema_statements():
                conn.execute(text(stmt))
    except Exception as e:
        logger.error(f"Failed to initialize database schema: {e}")
        raise
