import os
from pydantic_settings import BaseSettings
from pydantic import Field
import platformdirs

APP_NAME = "SongLibrary"
APP_AUTHOR = "SongLibraryDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR
    ENV: str = "prod"

    # Paths
    # デフォルトは platformdirs を使用するが、環境変数 DATABASE_URL があればそれを優先する
    USER_DATA_DIR: str = Field(default_factory=lambda: platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    DATABASE_URL: str | None = None

    # External song info service
    SONG_INFO_URL: str = "http://localhost:8080/info"

    # Network
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Logging
    LOG_DIR: str | None = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def model_post_init(self, __context):
        # DATABASE_URLが未設定ならユーザーデータ配下の DuckDB ファイルを使う
        if not self.DATABASE_URL:
            self.DATABASE_URL = f"duckdb:///{os.path.join(self.USER_DATA_DIR, 'songs.duckdb')}"

        if not self.LOG_DIR:
            self.LOG_DIR = os.path.join(self.USER_DATA_DIR, "logs")

    @property
    def is_dev(self) -> bool:
        return self.ENV == "dev"

    def setup_environment(self):
        """ロガーなどが参照する環境変数を設定する"""
        if self.LOG_DIR:
            os.environ["SONGS_LOG_DIR"] = self.LOG_DIR

settings = Settings()
