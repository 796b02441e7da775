"""测试派对策划提示词模板"""
import pytest

from app.prompts import (
    VARIANT_STYLES,
    describe_variant,
    format_people_text,
    get_party_plan_system_prompt,
    get_party_plan_user_prompt,
    resolve_start_time,
    resolve_theme,
)


@pytest.mark.parametrize("theme", [None, ""])
def test_missing_theme_uses_placeholder(theme):
    prompt = get_party_plan_user_prompt(theme=theme, people=None, start_time=None, variant_index=0)
    assert "- Theme: themed party" in prompt


def test_theme_is_kept_verbatim():
    assert resolve_theme("Halloween costume night") == "Halloween costume night"


@pytest.mark.parametrize("people, expected", [
    (10, "10 people approximately"),
    ("12", "12 people approximately"),
    ("8-10", "8-10 people approximately"),
    (8.0, "8 people approximately"),
    (7.5, "7.5 people approximately"),
])
def test_people_text_when_present(people, expected):
    assert format_people_text(people) == expected


@pytest.mark.parametrize("people", [None, "", 0])
def test_people_text_when_absent(people):
    assert format_people_text(people) == "headcount to be decided"


def test_missing_start_time_asks_model_to_assume_evening():
    text = resolve_start_time(None)
    assert "evening" in text
    assert "relative" in text
    assert resolve_start_time("19:30") == "19:30"


@pytest.mark.parametrize("variant_index", [0, 1, 2])
def test_known_variant_includes_style_guidance(variant_index):
    prompt = get_party_plan_user_prompt(theme="Picnic", people=6, start_time="18:00", variant_index=variant_index)
    assert f"this plan should be {VARIANT_STYLES['en'][variant_index]}" in prompt
    assert f"- Style variant: {variant_index} (" in prompt


def test_unknown_variant_is_passed_through():
    text = describe_variant(7)
    assert text.startswith("7 (")
    assert "this plan should be" not in text


def test_missing_variant_defaults_to_zero():
    assert describe_variant(None) == describe_variant(0)


def test_user_prompt_repeats_json_only_instruction():
    prompt = get_party_plan_user_prompt(theme=None, people=None, start_time=None, variant_index=0)
    assert "output JSON only" in prompt
    assert "code fences" in prompt


def test_system_prompt_lists_schema_fields():
    prompt = get_party_plan_system_prompt()
    for field in ["title", "vibe", "durationText", "peopleText", "timeline", "items", "tips"]:
        assert f'"{field}"' in prompt
    assert "5 to 8 timeline entries" in prompt


def test_chinese_locale_prompt_wording():
    prompt = get_party_plan_user_prompt(theme=None, people=10, start_time=None, variant_index=1, locale="zh")
    assert "- 主题：主题派对" in prompt
    assert "- 参与人数：10 人左右" in prompt
    assert "偏互动热闹" in prompt
    assert format_people_text(None, locale="zh") == "人数待定"
    assert "只输出 JSON" in prompt
    assert "必须严格返回 JSON" in get_party_plan_system_prompt("zh")
