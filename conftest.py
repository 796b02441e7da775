"""
Pytest configuration and fixtures
"""
import json
import os

import httpx
import pytest
from fastapi.testclient import TestClient

# 测试时不写日志文件、不挂载静态目录
os.environ.setdefault("LOG_ENABLE_FILE", "false")
os.environ.setdefault("STATIC_DIR", "__no_static__")

from app.api.main import create_app
from app.api.routes import get_openrouter_client
from app.config import Settings
from app.services import OpenRouterClient

SAMPLE_PLAN = {
    "title": "Retro Arcade Night",
    "vibe": "social and lively",
    "durationText": "about 3 hours",
    "peopleText": "around 10 people",
    "timeline": [
        {"time": "T+0′", "label": "Arrival & check-in", "detail": "Hand out tokens at the door."},
        {"time": "T+20′", "label": "Warm-up", "detail": "Two-player rounds on the cabinets."},
        {"time": "T+60′", "label": "Tournament", "detail": "Bracket of eight, single elimination."},
        {"time": "T+120′", "label": "Snacks", "detail": "Pizza and soda break."},
        {"time": "T+150′", "label": "Awards", "detail": "Crown the high-score holder."},
    ],
    "items": ["Arcade tokens", "Printed bracket", "Pizza for 10"],
    "tips": "Test every cabinet the afternoon before.",
}


def make_settings(**overrides) -> Settings:
    values = {
        "openrouter_api_key": "test-key",
        "log_enable_file": False,
        "log_enable_console": False,
        "static_dir": "__no_static__",
    }
    values.update(overrides)
    return Settings(**values)


def completion_response(content, status_code: int = 200) -> httpx.Response:
    """构造 chat-completion 风格的上游响应"""
    return httpx.Response(status_code, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


class UpstreamRecorder:
    """记录发往上游的请求，并按给定的 handler 返回响应"""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def payloads(self):
        return [json.loads(req.content) for req in self.requests]


@pytest.fixture
def sample_plan():
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def make_client():
    """返回工厂：make_client(handler, **settings_overrides) -> (TestClient, UpstreamRecorder)"""
    def _make(handler, **overrides):
        settings = make_settings(**overrides)
        recorder = UpstreamRecorder(handler)
        app = create_app(settings)
        app.dependency_overrides[get_openrouter_client] = lambda: OpenRouterClient(
            settings, transport=httpx.MockTransport(recorder)
        )
        return TestClient(app), recorder

    return _make
