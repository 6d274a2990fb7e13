from logging.config import fileConfig
import sys
import os
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel
from alembic import context
from alembic.ddl.impl import DefaultImpl

# backend ディレクトリを sys.path に追加
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.models.song import Song  # noqa: F401  (metadata 登録)
from infra.database.connection import DATABASE_URL

class DuckDBImpl(DefaultImpl):
    # Alembic は duckdb 方言の実装を持たないため、既定実装を duckdb 名で登録する
    __dialect__ = "duckdb"

config = context.config
config.set_main_option("sqlalchemy.url", DATABASE_URL)

if config.config_file_name is not None:
    # アプリ側のロガーを無効化しない
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = SQLModel.metadata

def run_with_connection(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()

if context.is_offline_mode():
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()
elif "connection" in config.attributes:
    # init_db から渡されたコネクションを再利用 (DuckDB のファイルロック回避)
    run_with_connection(config.attributes["connection"])
else:
    # alembic CLI から実行された場合
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        run_with_connection(connection)
