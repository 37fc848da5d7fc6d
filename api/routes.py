"""
API routes for the quotebook service.
Defines the quotebook, math and system endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from quotebook import QuoteStore, format_category_listing
from utils import ServiceConfig
from utils.math_utils import MathUtils, require_numbers, to_json_number
from .models import (
    NewQuoteRequest,
    QuoteResponse,
    ErrorResponse,
    GreetingResponse,
    CircleResponse,
    RectangleResponse,
    PowerResponse,
)

ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid input"}}

quotebook_router = APIRouter(prefix="/quotebook", tags=["Quotebook"])
math_router = APIRouter(prefix="/math", tags=["Math"])
system_router = APIRouter(tags=["System"])


def get_quote_store(request: Request) -> QuoteStore:
    """从应用状态中取出启动时注入的语录存储"""
    return request.app.state.quote_store


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.service_config


# Quotebook
@quotebook_router.get("/categories", response_class=PlainTextResponse)
def list_categories(store: QuoteStore = Depends(get_quote_store)):
    """列出全部分类"""
    return format_category_listing(store.list_categories())


@quotebook_router.post("/quote/new", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
def add_quote(payload: NewQuoteRequest, store: QuoteStore = Depends(get_quote_store)):
    """新增语录"""
    store.add_quote(payload.category, payload.quote, payload.author)
    return "Success!"


@quotebook_router.get("/quote/{category}", response_model=QuoteResponse, responses=ERROR_RESPONSES)
def get_random_quote(category: str, store: QuoteStore = Depends(get_quote_store)):
    """从指定分类随机获取一条语录"""
    quote = store.random_quote(category)
    return QuoteResponse(quote=quote.quote, author=quote.author)


# Math
@math_router.get("/circle/{r}", response_model=CircleResponse, responses=ERROR_RESPONSES)
def circle(r: str):
    """圆的面积和周长"""
    (radius,) = require_numbers("Radius must be a number", r)
    result = MathUtils.circle(radius)
    return CircleResponse(
        area=to_json_number(result["area"]),
        circumference=to_json_number(result["circumference"]),
    )


@math_router.get("/rectangle/{width}/{height}", response_model=RectangleResponse, responses=ERROR_RESPONSES)
def rectangle(width: str, height: str):
    """矩形的面积和周长"""
    w, h = require_numbers("Width and height must be numbers", width, height)
    result = MathUtils.rectangle(w, h)
    return RectangleResponse(
        area=to_json_number(result["area"]),
        perimeter=to_json_number(result["perimeter"]),
    )


@math_router.get(
    "/power/{base}/{exponent}",
    response_model=PowerResponse,
    response_model_exclude_unset=True,
    responses=ERROR_RESPONSES,
)
def power(
    base: str,
    exponent: str,
    root: Optional[str] = Query(None, description="为 'true' 时同时返回底数的平方根"),
):
    """幂运算，可选返回平方根"""
    b, e = require_numbers("Base and exponent must be numbers", base, exponent)
    fields = {"result": to_json_number(MathUtils.power(b, e))}

    if root == "true":
        fields["root"] = to_json_number(MathUtils.square_root(b))

    return PowerResponse(**fields)


# System
@system_router.get("/", response_model=GreetingResponse)
def root(service: ServiceConfig = Depends(get_service_config)):
    """根路径"""
    return GreetingResponse(ok=True, msg=service.greeting, name=service.name)


@system_router.get("/health", response_class=PlainTextResponse)
def health_check():
    """健康检查端点"""
    return "healthy"


routers = [quotebook_router, math_router, system_router]
