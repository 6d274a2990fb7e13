import os
import uvicorn

if __name__ == "__main__":
    # 設定の読み込みと環境変数のセットアップ
    # ロガーより先に行うことで、ログ出力先が正しく設定される
    from config import settings
    settings.setup_environment()

    # アプリケーションデータディレクトリの確保
    os.makedirs(settings.USER_DATA_DIR, exist_ok=True)

    from main import app

    port = int(os.environ.get("PORT", settings.PORT))

    print(f"Starting Music info API on {settings.HOST}:{port}...")
    print(f"User Data Directory: {settings.USER_DATA_DIR}")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=port,
        reload=False,
        workers=1,
        log_level=settings.LOG_LEVEL.lower()
    )
