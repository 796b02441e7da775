"""服务模块"""
from .openrouter_client import OpenRouterClient
from .plan_service import PartyPlanService, build_chat_payload, extract_content, parse_plan

__all__ = ["OpenRouterClient", "PartyPlanService", "build_chat_payload", "extract_content", "parse_plan"]
