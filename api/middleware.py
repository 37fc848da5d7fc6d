"""
Middleware for the quotebook API.
Provides CORS, request logging, error handling and exception handlers.
"""

import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from quotebook import INVALID_INPUT_MESSAGE
from utils import api_logger, ApiConfig, ValidationError, create_error_response


class LoggingMiddleware(BaseHTTPMiddleware):
    """日志中间件"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        api_logger.info(f"[API] {request.method} {request.url}")

        try:
            response = await call_next(request)

            process_time = time.time() - start_time
            api_logger.info(f"[API] {request.method} {request.url} - {response.status_code} - {process_time:.3f}s")

            # 添加处理时间到响应头
            response.headers["X-Process-Time"] = str(process_time)

            return response

        except Exception as e:
            process_time = time.time() - start_time
            api_logger.error(f"[API] {request.method} {request.url} - ERROR - {process_time:.3f}s - {str(e)}")
            raise


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """兜底错误处理中间件，未预期的异常统一返回 500"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            api_logger.exception(f"[API] Unexpected error: {str(e)}")
            return JSONResponse(
                status_code=500,
                content={"error": "An unexpected error occurred"}
            )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """业务校验错误 -> 400 {"error": message}"""
    api_logger.warning(f"[API] Validation error on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content=create_error_response(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体无法解析或字段类型错误 -> 400，与缺失字段使用同一提示"""
    api_logger.warning(f"[API] Malformed request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": INVALID_INPUT_MESSAGE})


def setup_cors(app: FastAPI, api_config: ApiConfig):
    """设置CORS"""
    cors_origins = api_config.cors_origins

    if "*" in cors_origins:
        api_logger.warning("[CORS] Using wildcard origin is not recommended for production")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def setup_exception_handlers(app: FastAPI):
    """注册异常处理器"""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)


def setup_middleware(app: FastAPI, api_config: ApiConfig):
    """设置所有中间件"""
    setup_cors(app, api_config)

    # 后添加的中间件在外层
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    setup_exception_handlers(app)
