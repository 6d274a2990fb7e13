from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.logger import get_logger

logger = get_logger(__name__)

def format_validation_error(exc: RequestValidationError) -> str:
    """
    バリデーションエラーを 1 行のメッセージにまとめる
    e.g. "body.group: Field required"
    """
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{loc}: {error.get('msg', 'invalid value')}" if loc else error.get("msg", "invalid value"))
    return "; ".join(messages) or "Invalid request"

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 入力エラーは 422 ではなく 400 で返す
    message = format_validation_error(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})

def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
