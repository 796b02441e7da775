"""应用配置管理模块"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenRouter配置
    openrouter_api_key: str = ""
    openrouter_endpoint: str = "https://openrouter.ai/api/v1/chat/completions"
    openrouter_model: str = "openrouter/sherlock-dash-alpha"
    openrouter_temperature: float = 0.7
    openrouter_referer: str = "https://your-app-domain-or-localhost"  # HTTP-Referer 请求头
    openrouter_title: str = "Party Planner Demo"  # X-Title 请求头

    # 上游调用超时（秒）
    upstream_timeout_seconds: float = 30.0
    upstream_connect_timeout_seconds: float = 10.0

    # 提示词语言：en 或 zh
    prompt_locale: Literal["en", "zh"] = "en"

    # 是否按 PartyPlan 结构校验模型输出（默认只保证是合法JSON）
    validate_plan_shape: bool = False

    # 是否为不同错误类型返回不同的HTTP状态码（默认全部为500）
    distinct_error_status: bool = False

    # 应用配置
    app_name: str = "派对策划助手"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"

    # 日志配置
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_file: str = "app.log"
    log_backup_count: int = 30  # 按天保留的备份数量
    log_enable_file: bool = True
    log_enable_console: bool = True

    @property
    def upstream_configured(self) -> bool:
        return bool(self.openrouter_api_key)


@lru_cache()
def get_settings() -> Settings:
    """获取配置实例（进程内只构造一次）"""
    return Settings()
