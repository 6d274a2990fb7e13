from sqlmodel import create_engine, Session
from sqlalchemy import inspect, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
import os
import threading
from config import settings
from infra.database.schema import init_raw_db
from utils.logger import get_logger

logger = get_logger(__name__)

DATABASE_URL = settings.DATABASE_URL
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def build_engine(url: str):
    """
    接続文字列からエンジンを作成する。
    DuckDB ファイルの場合は親ディレクトリを作成し、接続設定を固定する。
    """
    parsed = make_url(url)
    kwargs = {"echo": False}
    if parsed.drivername.startswith("duckdb"):
        if not parsed.database or parsed.database == ":memory:":
            # インメモリDBはプール設定を渡さない (SingletonThreadPool)
            return create_engine(url, **kwargs)
        db_dir = os.path.dirname(parsed.database)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        kwargs["connect_args"] = {'config': {'access_mode': 'READ_WRITE'}}

    return create_engine(url, pool_size=5, max_overflow=10, **kwargs)

# プロセス全体で共有するエンジン (import 時に一度だけ作成)
engine = build_engine(DATABASE_URL)

db_lock = threading.RLock()

def check_connection():
    """起動時の疎通確認。接続できなければ例外を送出し、起動を中止させる"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.critical(f"Failed to connect to database: {e}")
        raise

def init_db():
    """
    アプリケーション起動時のDB初期化フロー。
    1. 接続確認 2. Raw SQL によるテーブル作成 3. Alembic のスタンプ/アップグレード
    """
    from alembic.config import Config
    from alembic import command

    with db_lock:
        check_connection()

        # Alembic 管理下かどうかを事前にチェック
        is_new_db = not inspect(engine).has_table("alembic_version")

        try:
            init_raw_db(engine)

            alembic_cfg = Config(os.path.join(BASE_DIR, "alembic.ini"))
            alembic_cfg.set_main_option("script_location", os.path.join(BASE_DIR, "alembic"))

            # 既存のコネクションを Alembic に渡す (DuckDB のロック回避)
            with engine.begin() as connection:
                alembic_cfg.attributes["connection"] = connection

                if is_new_db:
                    logger.info("New database detected. Stamping version...")
                    command.stamp(alembic_cfg, "head")
                else:
                    logger.info("Existing database detected. Running migrations...")
                    command.upgrade(alembic_cfg, "head")
        except Exception as e:
            logger.error(f"Error during database initialization: {e}")
            raise

def close_db():
    """
    データベース接続を終了する。
    main.py の lifespan イベントから呼び出されます。
    """
    engine.dispose()

def get_session():
    with Session(engine) as session:
        yield session
