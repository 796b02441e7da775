"""自定义异常"""
from typing import Optional


class PartyPlannerException(Exception):
    """派对策划基础异常"""
    error_code = "internal_error"

    def __init__(self, message: str, error_code: Optional[str] = None, detail: Optional[str] = None):
        self.message = message
        if error_code:
            self.error_code = error_code
        self.detail = detail
        super().__init__(self.message)


class UpstreamTransportError(PartyPlannerException):
    """上游返回非2xx状态码"""
    error_code = "upstream_error"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"upstream returned HTTP {status_code}", detail=body)


class UpstreamTimeout(PartyPlannerException):
    """上游调用超时"""
    error_code = "upstream_timeout"

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"upstream did not respond within {timeout:g}s")


class UpstreamContentMissing(PartyPlannerException):
    """上游返回成功但没有可提取的文本"""
    error_code = "no_content"

    def __init__(self):
        super().__init__("model returned no content")


class UpstreamContentMalformed(PartyPlannerException):
    """模型输出不是合法JSON"""
    error_code = "invalid_json"

    def __init__(self, raw_content: str):
        self.raw_content = raw_content
        super().__init__("model output is not valid JSON")


class PlanShapeError(PartyPlannerException):
    """模型输出是JSON，但不符合 PartyPlan 结构"""
    error_code = "invalid_shape"

    def __init__(self, reason: str):
        super().__init__(f"model output does not match the plan schema: {reason}")


class ClientDisconnected(PartyPlannerException):
    """调用方在上游返回前断开了连接"""
    error_code = "client_disconnected"

    def __init__(self):
        super().__init__("client disconnected before the plan was ready")
