from fastapi import FastAPI
from contextlib import asynccontextmanager
from infra.database.connection import init_db, close_db
from api.exception_handlers import register_exception_handlers
from api.routers import songs

# Lifespan event to handle startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()  # 接続確認とスキーマ作成。失敗した場合は起動を中止する
    try:
        yield
    finally:
        close_db()

app = FastAPI(
    title="Music info",
    version="1.0",
    description="This is a music information API.",
    contact={
        "name": "API Support",
        "url": "http://www.swagger.io/support",
        "email": "support@swagger.io",
    },
    license_info={
        "name": "Apache 2.0",
        "url": "http://www.apache.org/licenses/LICENSE-2.0.html",
    },
    lifespan=lifespan,
)

register_exception_handlers(app)

# Root endpoint for health check
@app.get("/")
async def root():
    return {"message": "Music info API is running"}

# Include Routers
app.include_router(songs.router)
