"""派对方案生成服务：构造上游请求并解析模型输出"""
import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from app.api.schemas import ChatMessage, PartyPlan, PartyPlanRequest, UpstreamChatPayload
from app.config import Settings
from app.prompts import get_party_plan_system_prompt, get_party_plan_user_prompt
from app.services.openrouter_client import OpenRouterClient
from app.utils.exceptions import PlanShapeError, UpstreamContentMalformed, UpstreamContentMissing

logger = logging.getLogger(__name__)


def build_chat_payload(request: PartyPlanRequest, settings: Settings) -> UpstreamChatPayload:
    """根据请求构造发往上游的 system + user 两条消息"""
    locale = settings.prompt_locale
    user_prompt = get_party_plan_user_prompt(
        theme=request.theme,
        people=request.people,
        start_time=request.start_time,
        variant_index=request.variant_index,
        locale=locale
    )
    return UpstreamChatPayload(
        model=settings.openrouter_model,
        messages=[
            ChatMessage(role="system", content=get_party_plan_system_prompt(locale)),
            ChatMessage(role="user", content=user_prompt),
        ],
        temperature=settings.openrouter_temperature,
    )


def extract_content(data: Dict[str, Any]) -> str:
    """取出 choices[0].message.content，取不到时抛出 UpstreamContentMissing"""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        raise UpstreamContentMissing()
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        raise UpstreamContentMissing()
    return content


def _reject_constant(name: str):
    """NaN / Infinity / -Infinity 不是合法JSON"""
    raise ValueError(f"invalid JSON constant: {name}")


def parse_plan(content: str, validate_shape: bool = False) -> Any:
    """
    解析模型输出

    Args:
        content: 模型返回的原始文本
        validate_shape: 是否校验 PartyPlan 结构

    Returns:
        Any: 解析后的JSON，原样返回不做修改
    """
    try:
        plan = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error(f"JSON解析失败 | error={str(e)} | 原始内容={content}")
        raise UpstreamContentMalformed(content) from e

    if validate_shape:
        if not isinstance(plan, dict):
            raise PlanShapeError(f"expected an object, got {type(plan).__name__}")
        try:
            PartyPlan.model_validate(plan)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            logger.error(f"模型输出结构不符 | reason={reason} | 原始内容={content}")
            raise PlanShapeError(reason) from e

    return plan


class PartyPlanService:
    """派对方案生成服务"""

    def __init__(self, settings: Settings, client: OpenRouterClient):
        self.settings = settings
        self.client = client

    async def generate_plan(self, request: PartyPlanRequest) -> Any:
        payload = build_chat_payload(request, self.settings)
        logger.info(
            f"生成派对方案 | "
            f"theme={request.theme!r} | "
            f"people={request.people!r} | "
            f"variant={request.variant_index}"
        )
        data = await self.client.create_chat_completion(payload)
        content = extract_content(data)
        plan = parse_plan(content, validate_shape=self.settings.validate_plan_shape)
        logger.info("派对方案生成成功")
        return plan
