"""OpenRouter客户端：单次 chat-completion 调用"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from app.api.schemas import UpstreamChatPayload
from app.config import Settings
from app.utils.exceptions import UpstreamTimeout, UpstreamTransportError

logger = logging.getLogger(__name__)


class OpenRouterClient:
    """OpenRouter chat-completion 客户端，每次调用只发一次请求，不做重试"""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        初始化客户端

        Args:
            settings: 应用配置
            transport: 可选的httpx传输层（测试时注入 MockTransport）
        """
        self.endpoint = settings.openrouter_endpoint
        self.timeout = settings.upstream_timeout_seconds
        self.transport = transport
        self.timeout_config = httpx.Timeout(
            self.timeout,
            connect=min(settings.upstream_connect_timeout_seconds, self.timeout)
        )
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {settings.openrouter_api_key}",
            "HTTP-Referer": settings.openrouter_referer,
            "X-Title": settings.openrouter_title,
        }

    async def create_chat_completion(self, payload: UpstreamChatPayload) -> Dict[str, Any]:
        """
        调用 chat-completion 接口

        Returns:
            Dict[str, Any]: 上游返回的JSON；响应体不是JSON对象时返回空字典

        Raises:
            UpstreamTransportError: 上游返回非2xx状态码
            UpstreamTimeout: 超过配置的超时时间
        """
        body = payload.model_dump()
        logger.info(f"OpenRouter请求 | url={self.endpoint} | model={payload.model}")
        logger.debug(f"OpenRouter请求体 | payload={json.dumps(body, ensure_ascii=False)}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout_config, transport=self.transport) as client:
                response = await client.post(self.endpoint, json=body, headers=self.headers)
        except httpx.TimeoutException as e:
            logger.error(
                f"OpenRouter请求超时 | "
                f"timeout={self.timeout}s | "
                f"error={str(e)}"
            )
            raise UpstreamTimeout(self.timeout) from e

        logger.debug(f"OpenRouter响应 | status={response.status_code}")

        if not response.is_success:
            text = response.text
            logger.error(
                f"OpenRouter调用失败 | "
                f"status={response.status_code} | "
                f"response={text}"
            )
            raise UpstreamTransportError(response.status_code, text)

        try:
            data = response.json()
        except ValueError:
            # 非JSON或非UTF-8的响应体
            logger.error(f"OpenRouter响应体不是JSON | response={response.text[:200]}")
            return {}
        return data if isinstance(data, dict) else {}
