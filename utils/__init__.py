"""
工具模块包
提供项目所需的通用工具和功能
"""

# 导出核心工具
from .config_manager import (
    config_manager,
    UnifiedConfigManager,
    ApiConfig,
    LoggingConfig,
    LoggingModuleConfig,
    ServiceConfig
)
from .exceptions import (
    QuotebookError,
    ConfigurationError,
    ValidationError,
    ErrorCodes,
    create_error_response
)
from .logging_manager import (
    logging_manager,
    logger,
    LogConfig,
    initialize_logging,
    ModuleLoggers,
    api_logger,
    store_logger,
    math_logger,
    config_logger
)
from .path_utils import BASE_DIR, CONFIG_DIR, LOG_DIR

# 版本信息
__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "UnifiedConfigManager",
    "ApiConfig",
    "LoggingConfig",
    "LoggingModuleConfig",
    "ServiceConfig",

    # 异常处理
    "QuotebookError",
    "ConfigurationError",
    "ValidationError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "logging_manager",
    "logger",
    "LogConfig",
    "initialize_logging",
    "ModuleLoggers",
    "api_logger",
    "store_logger",
    "math_logger",
    "config_logger",

    # 路径
    "BASE_DIR",
    "CONFIG_DIR",
    "LOG_DIR",
]
