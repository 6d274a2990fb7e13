import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError

import infra.database.connection as db_connection
from infra.database.schema import init_raw_db

def test_init_raw_db_is_idempotent(engine):
    init_raw_db(engine)
    init_raw_db(engine)

    assert inspect(engine).has_table("songs")
    with engine.connect() as conn:
        rows = conn.execute(text(
            "SELECT column_name FROM information_schema.columns WHERE table_name = 'songs'"
        )).all()
    columns = {row[0] for row in rows}
    assert columns == {"id", "group", "song", "release_date", "text", "link"}

def test_init_db_stamps_new_database(engine):
    db_connection.init_db()

    assert inspect(engine).has_table("songs")
    with engine.connect() as conn:
        version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar()
    assert version == "0001_create_songs"

    # 2回目は既存DBとして upgrade が走る
    db_connection.init_db()
    with engine.connect() as conn:
        count = conn.execute(text("SELECT COUNT(*) FROM alembic_version")).scalar()
    assert count == 1

def test_init_db_fails_when_store_unreachable(mocker):
    broken = mocker.MagicMock()
    broken.connect.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    mocker.patch.object(db_connection, "engine", broken)

    with pytest.raises(OperationalError):
        db_connection.init_db()

def test_build_engine_creates_parent_directory(tmp_path):
    db_file = tmp_path / "nested" / "songs.duckdb"
    engine = db_connection.build_engine(f"duckdb:///{db_file}")
    try:
        assert (tmp_path / "nested").is_dir()
    finally:
        engine.dispose()
