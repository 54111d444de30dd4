"""Dependency injection for FastAPI endpoints"""

from functools import partial
from fastapi import Request

from rent_vs_buy.config import settings
from rent_vs_buy.presentation.renderer import ResultsRenderer
from rent_vs_buy.utils.formatting import format_currency


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_results_renderer() -> ResultsRenderer:
    """Provide a results renderer using the configured currency symbol"""
    return ResultsRenderer(partial(format_currency, symbol=settings.currency_symbol))
