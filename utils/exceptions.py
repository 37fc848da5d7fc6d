"""
统一异常定义模块
提供项目特定的异常类和错误处理机制
"""

from typing import Optional, Dict, Any


class QuotebookError(Exception):
    """语录服务基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(QuotebookError):
    """配置相关错误"""
    pass


class ValidationError(QuotebookError):
    """请求参数验证错误，对外表现为 400"""
    pass


# 错误代码常量
class ErrorCodes:
    """错误代码常量"""

    # 配置错误
    CONFIG_NOT_FOUND = "CONFIG_001"
    CONFIG_INVALID_FORMAT = "CONFIG_002"
    CONFIG_INVALID_VALUE = "CONFIG_003"
    CONFIG_LOAD_ERROR = "CONFIG_004"

    # 验证错误
    VALIDATION_INVALID_CATEGORY = "VAL_001"
    VALIDATION_INVALID_NUMBER = "VAL_002"
    VALIDATION_INVALID_INPUT = "VAL_003"


def create_error_response(error: QuotebookError) -> Dict[str, Any]:
    """创建标准化的错误响应体 {"error": message}"""
    return {"error": error.message}
