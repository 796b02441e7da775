"""FastAPI主应用"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.routes import APP_VERSION, router
from app.api.schemas import ErrorResponse
from app.config import Settings, get_settings
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期"""
    settings: Settings = app.state.settings
    logger.info("应用启动中...")
    if not settings.upstream_configured:
        logger.warning("未配置 OPENROUTER_API_KEY，请在 .env 中设置，否则生成请求将失败")
    logger.info(
        f"应用启动完成 | "
        f"model={settings.openrouter_model} | "
        f"locale={settings.prompt_locale} | "
        f"timeout={settings.upstream_timeout_seconds}s"
    )
    yield
    logger.info("应用已关闭")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体校验失败时仍使用 {error, detail} 信封"""
    detail = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"请求体校验失败 | path={request.url.path} | detail={detail}")
    body = ErrorResponse(error="invalid request body", detail=detail)
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    创建FastAPI应用

    Args:
        settings: 应用配置，为None时从环境变量读取

    Returns:
        FastAPI: 应用实例
    """
    if settings is None:
        settings = get_settings()

    log_file_path = setup_logging(settings)
    if log_file_path:
        logger.info(f"日志文件已配置: {log_file_path}")

    app = FastAPI(
        title=settings.app_name,
        description="基于 OpenRouter 的派对策划助手",
        version=APP_VERSION,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(router, prefix="/api", tags=["party-planner"])

    # 静态前端页面（例如 public/index.html），需在API路由之后挂载
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"静态文件目录: {static_dir.resolve()}")
    else:
        logger.info(f"静态文件目录不存在，跳过挂载: {static_dir}")

    return app


app = create_app()


def run():
    """命令行入口"""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
