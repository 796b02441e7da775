"""API路由"""
import asyncio
import logging
from typing import Any, Awaitable, Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.api.schemas import ErrorResponse, HealthResponse, PartyPlanRequest
from app.config import Settings
from app.services import OpenRouterClient, PartyPlanService
from app.utils.exceptions import ClientDisconnected, PartyPlannerException, UpstreamTransportError

logger = logging.getLogger(__name__)

router = APIRouter()

APP_VERSION = "0.1.0"

# 检查调用方是否断开的间隔（秒）
DISCONNECT_POLL_INTERVAL = 0.5

# 开启 distinct_error_status 时各错误类型对应的状态码
DISTINCT_STATUS_CODES = {
    "upstream_error": 502,
    "upstream_timeout": 504,
    "no_content": 502,
    "invalid_json": 502,
    "invalid_shape": 422,
}


def get_app_settings(request: Request) -> Settings:
    """获取应用启动时构造的配置"""
    return request.app.state.settings


def get_openrouter_client(settings: Settings = Depends(get_app_settings)) -> OpenRouterClient:
    return OpenRouterClient(settings)


def get_plan_service(
    settings: Settings = Depends(get_app_settings),
    client: OpenRouterClient = Depends(get_openrouter_client)
) -> PartyPlanService:
    return PartyPlanService(settings, client)


async def _run_until_disconnect(http_request: Request, coro: Awaitable[Any]) -> Any:
    """执行上游调用，调用方断开时取消该调用"""
    task = asyncio.ensure_future(coro)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=DISCONNECT_POLL_INTERVAL)
            if done:
                return task.result()
            if await http_request.is_disconnected():
                task.cancel()
                await asyncio.gather(task, return_exceptions=True)
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


def _error_response(status_code: int, error: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _status_for(exc: PartyPlannerException, settings: Settings) -> int:
    if settings.distinct_error_status:
        return DISTINCT_STATUS_CODES.get(exc.error_code, 500)
    return 500


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)):
    """健康检查"""
    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        upstream_configured=settings.upstream_configured
    ).model_dump(by_alias=True)


@router.post(
    "/party-plan",
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}}
)
async def create_party_plan(
    http_request: Request,
    request: Optional[PartyPlanRequest] = Body(default=None),
    settings: Settings = Depends(get_app_settings),
    service: PartyPlanService = Depends(get_plan_service)
):
    """
    生成派对方案

    成功时原样返回模型输出的JSON；任何失败都返回 {error, detail} 信封
    """
    if request is None:
        request = PartyPlanRequest()

    try:
        plan = await _run_until_disconnect(http_request, service.generate_plan(request))
        return JSONResponse(content=plan)
    except ClientDisconnected:
        logger.warning("调用方已断开，取消上游调用")
        return Response(status_code=499)
    except UpstreamTransportError as e:
        return _error_response(_status_for(e, settings), "upstream call failed", e.body)
    except PartyPlannerException as e:
        logger.error(f"生成派对规划出错 | error_code={e.error_code} | error={e.message}")
        return _error_response(_status_for(e, settings), "failed to generate party plan", e.message)
    except Exception as e:
        logger.error(f"生成派对规划出错 | error={str(e)}", exc_info=True)
        return _error_response(500, "failed to generate party plan", str(e))
