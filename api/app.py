"""
FastAPI application for the quotebook service.
Main application entry point for the API server.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from quotebook import QuoteStore
from utils import api_logger, config_manager, initialize_logging, UnifiedConfigManager

from .routes import routers
from .middleware import setup_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    initialize_logging()
    api_logger.info("[API] Starting Quotebook API...")

    yield

    api_logger.info("[API] Shutting down Quotebook API...")


def create_app(store: Optional[QuoteStore] = None,
               config: Optional[UnifiedConfigManager] = None) -> FastAPI:
    """创建应用；语录存储和配置都可以显式注入，便于测试隔离"""
    config = config or config_manager
    api_config = config.get_api_config()
    service_config = config.get_service_config()

    app = FastAPI(
        title="Quotebook API",
        description="Categorized quotes and small math utilities",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.state.quote_store = store if store is not None else QuoteStore()
    app.state.service_config = service_config

    # 设置中间件
    setup_middleware(app, api_config)

    # 添加路由
    for router in routers:
        app.include_router(router)

    return app


app = create_app()


def run(host: Optional[str] = None, port: Optional[int] = None, reload: Optional[bool] = None):
    """启动 uvicorn 服务，未指定的参数取自 api_config"""
    api_config = config_manager.get_api_config()
    host = host or api_config.host
    port = port or api_config.port
    reload = api_config.reload if reload is None else reload

    api_logger.info(f"[API] Starting server on http://{host}:{port}")

    # 开发模式
    if reload:
        uvicorn.run(
            "api.app:app",
            host=host,
            port=port,
            reload=True,
            log_level="info"
        )
    # 生产模式，多进程时 uvicorn 需要导入字符串
    else:
        uvicorn.run(
            "api.app:app" if api_config.workers > 1 else app,
            host=host,
            port=port,
            workers=api_config.workers,
            log_level="info"
        )


if __name__ == "__main__":
    run()
