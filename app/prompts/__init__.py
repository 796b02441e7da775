"""提示词模板模块"""
from .prompt_templates import (
    VARIANT_STYLES,
    describe_variant,
    format_people_text,
    get_party_plan_system_prompt,
    get_party_plan_user_prompt,
    resolve_start_time,
    resolve_theme
)

__all__ = [
    "VARIANT_STYLES",
    "describe_variant",
    "format_people_text",
    "get_party_plan_system_prompt",
    "get_party_plan_user_prompt",
    "resolve_start_time",
    "resolve_theme"
]
