"""LLM提示词模板"""
from typing import Any, Dict, Optional

# 方案风格编号 -> 风格说明
VARIANT_STYLES: Dict[str, Dict[int, str]] = {
    "en": {
        0: "basic and relaxed",
        1: "interactive and lively",
        2: "ceremonial and atmospheric",
    },
    "zh": {
        0: "偏基础轻松",
        1: "偏互动热闹",
        2: "偏仪式感和氛围",
    },
}

DEFAULT_THEME = {
    "en": "themed party",
    "zh": "主题派对",
}

PEOPLE_UNSPECIFIED = {
    "en": "headcount to be decided",
    "zh": "人数待定",
}

PEOPLE_TEMPLATE = {
    "en": "{people} people approximately",
    "zh": "{people} 人左右",
}

START_TIME_UNSPECIFIED = {
    "en": "not specified, please assume a reasonable evening time yourself; relative time such as T+0′ is fine",
    "zh": "未指定，请你自行假设一个合理的晚上时间，可用相对时间表示",
}

SYSTEM_PROMPTS = {
    "en": """
You are a party planning assistant.
Based on the theme, time and headcount provided by the user, design a clear timeline and a checklist of items for an offline party.

You must return strict JSON in exactly this format (no extra nesting, no other fields):

{
  "title": "string, the party title",
  "vibe": "string, the overall atmosphere, e.g. laid-back / social and lively / warm and family-friendly",
  "durationText": "string, approximate duration, e.g. about 3 hours",
  "peopleText": "string, description of the headcount, e.g. around 10 people / headcount to be decided",
  "timeline": [
    {
      "time": "string, a time such as 19:30 / 20:00 / T+30′",
      "label": "string, name of the segment, e.g. Arrival & check-in",
      "detail": "string, what happens in this segment and how to run it"
    }
  ],
  "items": [
    "string, each entry describes one item to prepare"
  ],
  "tips": "string, overall advice or things to watch out for"
}

Make sure to:
1. Output valid JSON only (no comments, no extra text, no code fences).
2. Include 5 to 8 timeline entries covering the flow from arrival to the end.
3. If no start time is given, use relative times such as T+0′ and T+30′.
4. Keep it practical and actionable; avoid empty, generic advice.
""".strip(),
    "zh": """
你是一个中文派对策划助手。
请根据用户提供的主题、时间、人数，为一个线下派对设计清晰的行程时间轴和物品清单。

必须严格返回 JSON，格式如下（不要多一层，也不要有其他字段）：

{
  "title": "字符串，派对标题",
  "vibe": "字符串，整体氛围，例如：轻松随意 / 热闹社交 / 温馨家庭等",
  "durationText": "字符串，大致时长，例如：约 3 小时",
  "peopleText": "字符串，对人数的描述，例如：10 人左右 / 人数待定",
  "timeline": [
    {
      "time": "字符串，可以是 19:30 / 20:00 / T+30′ 等时间格式",
      "label": "字符串，环节名称，例如：入场 & 签到",
      "detail": "字符串，该环节的说明、怎么玩"
    }
  ],
  "items": [
    "字符串，每一项是一个需要准备的物品说明"
  ],
  "tips": "字符串，整体建议或注意事项"
}

务必：
1. 输出有效 JSON（不要加注释、不要多余文字、不要包裹在代码块里）。
2. timeline 建议 5～8 条，覆盖 从入场 到 结束 的流程。
3. 如果没给开始时间，可以用 T+0′、T+30′ 这类相对时间表示。
4. 风格偏实际可执行，避免太空洞的鸡汤。
""".strip(),
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _render_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_theme(theme: Optional[str], locale: str = "en") -> str:
    """主题为空时使用通用占位主题"""
    return DEFAULT_THEME[locale] if _is_blank(theme) else theme


def format_people_text(people: Any, locale: str = "en") -> str:
    """把人数渲染成提示词中的描述文本"""
    if _is_blank(people):
        return PEOPLE_UNSPECIFIED[locale]
    return PEOPLE_TEMPLATE[locale].format(people=_render_number(people))


def resolve_start_time(start_time: Optional[str], locale: str = "en") -> str:
    """开始时间为空时让模型自行假设晚上的时间"""
    return START_TIME_UNSPECIFIED[locale] if _is_blank(start_time) else start_time


def describe_variant(variant_index: Optional[int], locale: str = "en") -> str:
    """
    生成方案风格说明

    0/1/2 附带对应的风格；其他编号原样透传，不做校验
    """
    if variant_index is None:
        variant_index = 0
    styles = VARIANT_STYLES[locale]
    if locale == "zh":
        legend = "，".join(f"{idx} {text}" for idx, text in styles.items())
        line = f"{variant_index}（{legend}）"
        if variant_index in styles:
            line += f"，本次请{styles[variant_index]}"
        return line

    legend = ", ".join(f"{idx} = {text}" for idx, text in styles.items())
    line = f"{variant_index} ({legend})"
    if variant_index in styles:
        line += f"; this plan should be {styles[variant_index]}"
    return line


def get_party_plan_system_prompt(locale: str = "en") -> str:
    """获取派对策划的系统提示词"""
    return SYSTEM_PROMPTS[locale]


def get_party_plan_user_prompt(
    theme: Optional[str],
    people: Any,
    start_time: Optional[str],
    variant_index: Optional[int],
    locale: str = "en"
) -> str:
    """
    生成派对策划的用户提示词

    Args:
        theme: 派对主题
        people: 参与人数
        start_time: 开始时间
        variant_index: 方案风格编号
        locale: 提示词语言

    Returns:
        str: 完整的用户提示词
    """
    safe_theme = resolve_theme(theme, locale)
    people_text = format_people_text(people, locale)
    time_text = resolve_start_time(start_time, locale)
    variant_text = describe_variant(variant_index, locale)

    if locale == "zh":
        prompt = f"""
派对信息如下：
- 主题：{safe_theme}
- 参与人数：{people_text}
- 开始时间：{time_text}
- 方案风格编号：{variant_text}

请按照之前给你的 JSON 格式输出一份策划方案。
注意：只输出 JSON，不要解释，也不要包裹在代码块里。
"""
    else:
        prompt = f"""
Party details:
- Theme: {safe_theme}
- Headcount: {people_text}
- Start time: {time_text}
- Style variant: {variant_text}

Please produce a plan in the JSON format given earlier.
Note: output JSON only, with no explanation and no code fences.
"""
    return prompt.strip()
