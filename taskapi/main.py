import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, settings as default_settings
from .api import system, tasks
from .services.task_service import TaskService
from .storage.task_store import TaskStore

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """配置日志"""
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


setup_logging(default_settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时初始化
    logger.info(f"🚀 {app.state.settings.app_name} 启动")
    logger.info(f"📦 预置任务数: {len(app.state.task_service.store)}")
    yield
    # 关闭时清理
    logger.info(f"👋 {app.state.settings.app_name} 关闭")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
) -> FastAPI:
    """
    创建应用实例

    Args:
        settings: 配置，默认使用全局配置
        store: 任务存储，默认按配置新建（可在测试中注入）
    """
    settings = settings or default_settings
    if store is None:
        store = TaskStore(seed=settings.seed_examples)

    app = FastAPI(
        title=settings.app_name,
        description="内存任务存储的增删查 REST API",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.task_service = TaskService(store)

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 路由注册
    app.include_router(system.router)
    app.include_router(tasks.router)

    return app


app = create_app()


def run() -> None:
    """单进程启动服务；多 worker 会各自持有独立的内存存储

    端口被占用时 uvicorn 记录错误并以非零状态退出。
    """
    import uvicorn

    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
