"""Results renderer - turns a projection into display-ready values"""

from dataclasses import dataclass
from typing import Callable, Dict

from rent_vs_buy.domain.chart import build_chart_data
from rent_vs_buy.domain.models import ChartData, ProjectionResult, Recommendation
from rent_vs_buy.utils.formatting import format_currency

RECOMMENDATION_TEXT: Dict[Recommendation, str] = {
    Recommendation.RENT: "Better to Rent",
    Recommendation.BUY: "Better to Buy",
    Recommendation.EQUAL: "Costs are about the same",
}


@dataclass(frozen=True)
class ProjectionView:
    """Formatted totals, recommendation wording and chart for one projection"""

    rent_total_text: str
    buy_total_text: str
    recommendation_text: str
    chart: ChartData


class ResultsRenderer:
    """Render projection results using an injected currency formatter"""

    def __init__(self, currency_formatter: Callable[[float], str] = format_currency):
        self.currency_formatter = currency_formatter

    def render(self, result: ProjectionResult) -> ProjectionView:
        fmt = self.currency_formatter
        return ProjectionView(
            rent_total_text=f"Total Rent Cost: {fmt(result.total_rent_cost)}",
            buy_total_text=f"Total Buy Cost: {fmt(result.buy.net_cost)}",
            recommendation_text=f"Recommendation: {RECOMMENDATION_TEXT[result.recommendation]}",
            chart=build_chart_data(result.total_rent_cost, result.buy.net_cost, fmt),
        )
