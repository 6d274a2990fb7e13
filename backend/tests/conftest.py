import os
import pytest
import sys
import tempfile
import uuid
from typing import Generator

# 1. パス解決: backendディレクトリをsys.pathに追加
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.dirname(CURRENT_DIR)
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# 2. 設定の読み込み前に、ユーザーデータ配下を汚さないよう環境変数を上書き
TEST_ROOT = os.path.join(tempfile.gettempdir(), "songs_tests")
os.environ.setdefault("DATABASE_URL", "duckdb:///:memory:")
os.environ.setdefault("SONGS_LOG_DIR", os.path.join(TEST_ROOT, "logs"))
os.environ.setdefault("SONG_INFO_URL", "http://song-info.test/info")

from sqlmodel import Session, create_engine

import infra.database.connection as db_connection
from infra.database.schema import init_raw_db

@pytest.fixture(name="db_path")
def db_path_fixture() -> Generator[str, None, None]:
    """テストごとにユニークな DuckDB ファイルパスを払い出す"""
    path = os.path.join(tempfile.gettempdir(), f"songs_test_{uuid.uuid4()}.duckdb")
    yield path
    for candidate in (path, f"{path}.wal"):
        if os.path.exists(candidate):
            try:
                os.remove(candidate)
            except OSError:
                pass

@pytest.fixture(name="engine")
def engine_fixture(db_path: str):
    """
    テストごとに完全に独立したDB環境（物理ファイル）を構築し、
    アプリケーション全体で使用されるエンジンを差し替える。
    """
    engine = create_engine(f"duckdb:///{db_path}")

    original_engine = db_connection.engine
    db_connection.engine = engine

    yield engine

    db_connection.engine = original_engine
    engine.dispose()

@pytest.fixture(name="session")
def session_fixture(engine) -> Generator[Session, None, None]:
    # Raw SQLでテーブルとシーケンスを直接作成
    init_raw_db(engine)

    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session: Session, mocker) -> Generator:
    """FastAPIのTestClientを提供し、DBセッションをDIで差し替える"""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session

    # アプリ起動時の init_db / close_db がテスト中に走らないようモック化
    mocker.patch("main.init_db")
    mocker.patch("main.close_db")

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

@pytest.fixture
def mock_song_info(mocker):
    """外部 song info サービス呼び出しをモック化する"""
    from utils.song_info import SongDetail

    mock_fetch = mocker.patch("app.services.song_app_service.fetch_song_detail")
    mock_fetch.return_value = SongDetail(
        release_date="2006-07-16",
        text="p1\n\np2",
        link="http://x"
    )
    return mock_fetch
