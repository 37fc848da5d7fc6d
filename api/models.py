"""
API data models for the quotebook service.
Pydantic models for request/response validation.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class NewQuoteRequest(BaseModel):
    """新增语录请求，字段缺失交由存储层统一校验"""
    category: Optional[str] = Field(None, description="分类名称")
    quote: Optional[str] = Field(None, description="语录内容")
    author: Optional[str] = Field(None, description="作者")


class QuoteResponse(BaseModel):
    """语录响应模型"""
    quote: str = Field(..., description="语录内容")
    author: str = Field(..., description="作者")


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str = Field(..., description="错误信息")


class GreetingResponse(BaseModel):
    """根路径问候响应"""
    ok: bool = Field(True, description="服务是否正常")
    msg: str = Field(..., description="问候语")
    name: str = Field(..., description="服务名称")


class CircleResponse(BaseModel):
    """圆计算结果，非有限值为 null，整数值输出为整数"""
    area: Optional[Union[int, float]] = Field(None, description="面积")
    circumference: Optional[Union[int, float]] = Field(None, description="周长")


class RectangleResponse(BaseModel):
    """矩形计算结果"""
    area: Optional[Union[int, float]] = Field(None, description="面积")
    perimeter: Optional[Union[int, float]] = Field(None, description="周长")


class PowerResponse(BaseModel):
    """幂运算结果，root 仅在 ?root=true 时返回"""
    result: Optional[Union[int, float]] = Field(None, description="幂运算结果")
    root: Optional[Union[int, float]] = Field(None, description="底数的平方根")
