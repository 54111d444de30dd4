"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from rent_vs_buy.config import settings
from rent_vs_buy.domain.models import ProjectionInput, Recommendation


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection (rates in percent)"""

    model_config = ConfigDict(allow_inf_nan=False)

    monthly_rent: float = Field(..., gt=0, description="Monthly rent")
    home_price: float = Field(..., gt=0, description="Purchase price of the home")
    down_payment_pct: float = Field(..., ge=0, le=100, description="Down payment as % of price")
    mortgage_rate: float = Field(..., ge=0, description="Annual mortgage interest rate %")
    amortization_years: int = Field(..., gt=0, le=settings.max_years, description="Mortgage term in years")
    property_tax_rate: float = Field(..., ge=0, description="Annual property tax % of price")
    appreciation_rate: float = Field(..., gt=-100, description="Annual home appreciation %")
    horizon_years: int = Field(..., gt=0, le=settings.max_years, description="Years to compare over")

    def to_domain(self) -> ProjectionInput:
        return ProjectionInput(**self.model_dump())


class BuyProjectionSchema(BaseModel):
    """Cost breakdown of buying"""

    net_cost: float
    down_payment: float
    total_mortgage_payments: float
    property_tax: float
    future_home_value: float
    principal_repaid: float
    mortgage_amount: float
    monthly_payment: float
    remaining_balance: float


class ChartBarSchema(BaseModel):
    """Single bar of the comparison chart"""

    label: str
    value: float
    height_pct: int
    value_label: str


class ChartSchema(BaseModel):
    """Two-bar comparison chart"""

    max_value: float
    bars: List[ChartBarSchema]


class ProjectionViewSchema(BaseModel):
    """Display-ready texts and chart"""

    rent_total_text: str
    buy_total_text: str
    recommendation_text: str
    chart: ChartSchema


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    total_rent_cost: float
    buy: BuyProjectionSchema
    recommendation: Recommendation
    warnings: List[str] = []
    view: ProjectionViewSchema
