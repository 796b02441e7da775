"""API请求和响应模型"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


class PartyPlanRequest(BaseModel):
    """派对策划请求"""
    model_config = ConfigDict(populate_by_name=True)

    theme: Optional[str] = Field(default=None, description="派对主题")
    start_time: Optional[str] = Field(default=None, alias="startTime", description="开始时间")
    people: Optional[Union[StrictInt, StrictFloat, str]] = Field(default=None, description="参与人数")
    variant_index: Optional[int] = Field(default=0, alias="variantIndex", description="方案风格编号")


class ChatMessage(BaseModel):
    """上游对话消息"""
    role: str
    content: str


class UpstreamChatPayload(BaseModel):
    """发往 chat-completion 接口的请求体"""
    model: str
    messages: List[ChatMessage]
    temperature: float


class TimelineEntry(BaseModel):
    """时间轴条目"""
    time: str
    label: str
    detail: str


class PartyPlan(BaseModel):
    """模型返回的派对方案结构，仅在开启结构校验时使用"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    vibe: str
    duration_text: str = Field(alias="durationText")
    people_text: str = Field(alias="peopleText")
    timeline: List[TimelineEntry]
    items: List[str]
    tips: str


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str = Field(description="错误信息")
    detail: Optional[str] = Field(default=None, description="诊断详情")


class HealthResponse(BaseModel):
    """健康检查响应"""
    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(description="服务状态")
    version: str = Field(description="版本号")
    upstream_configured: bool = Field(alias="upstreamConfigured", description="是否配置了API Key")
