"""
Math utilities for the quotebook service.
Pure closed-form computations behind the /math endpoints.
"""

import math
import re
from typing import Dict, Optional, Union

from .exceptions import ValidationError, ErrorCodes
from .logging_manager import math_logger

# 最长前导十进制字面量，其余字符忽略（如 "12abc" -> 12）
NUMBER_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

# 超过该量级的整数以指数形式输出，保持浮点
MAX_PLAIN_INTEGER = 1e21


def parse_number(raw: str) -> Optional[float]:
    """解析前导数字前缀，没有数字前缀时返回 None"""
    if not isinstance(raw, str):
        return None
    match = NUMBER_PREFIX_RE.match(raw)
    if match is None:
        return None
    # float() 可以直接解析 "Infinity" / "-Infinity"
    return float(match.group(1))


def require_numbers(message: str, *raw_values: str) -> tuple:
    """解析全部参数，任一失败则抛出 ValidationError(message)"""
    values = tuple(parse_number(raw) for raw in raw_values)
    if any(value is None for value in values):
        math_logger.debug(f"[MathUtils] Rejected non-numeric input: {raw_values}")
        raise ValidationError(
            message,
            ErrorCodes.VALIDATION_INVALID_NUMBER,
            context={"values": list(raw_values)}
        )
    return values


def to_json_number(value: float) -> Optional[Union[int, float]]:
    """转换为 JSON 数字：非有限值（inf/NaN）为 null，整数值输出为 int"""
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGER:
        return int(value)
    return value


class MathUtils:
    """几何与幂运算工具类"""

    @staticmethod
    def circle(r: float) -> Dict[str, float]:
        """圆的面积与周长，不校验符号"""
        return {
            "area": math.pi * r * r,
            "circumference": 2 * math.pi * r,
        }

    @staticmethod
    def rectangle(width: float, height: float) -> Dict[str, float]:
        """矩形的面积与周长"""
        return {
            "area": width * height,
            "perimeter": 2 * (width + height),
        }

    @staticmethod
    def power(base: float, exponent: float) -> float:
        """base 的 exponent 次幂；定义域外返回 NaN，溢出返回 inf"""
        try:
            return math.pow(base, exponent)
        except OverflowError:
            return math.inf
        except ValueError:
            # 0 的负数次幂趋于无穷，负数的非整数次幂无实数解
            if base == 0 and exponent < 0:
                return math.inf
            return math.nan

    @staticmethod
    def square_root(base: float) -> float:
        """平方根，负数返回 NaN"""
        if base < 0:
            return math.nan
        return math.sqrt(base)
