"""POST /v1/projection - rent vs buy comparison endpoint"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from rent_vs_buy.api.v1.schemas import (
    BuyProjectionSchema,
    ChartBarSchema,
    ChartSchema,
    ProjectionRequest,
    ProjectionResponse,
    ProjectionViewSchema,
)
from rent_vs_buy.api.dependencies import get_request_id, get_results_renderer
from rent_vs_buy.config import settings
from rent_vs_buy.domain.projection import compute_projection
from rent_vs_buy.domain.exceptions import DegenerateResultError, InvalidInputError
from rent_vs_buy.presentation.renderer import ResultsRenderer
from rent_vs_buy.infrastructure.observability.metrics import record_projection, record_rejection
from rent_vs_buy.infrastructure.observability.logging import log_projection

router = APIRouter()


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    renderer: ResultsRenderer = Depends(get_results_renderer),
):
    """
    Compare the cost of renting against buying over the requested horizon.

    Flow:
    1. Validate and project rent and buy costs
    2. Render display texts and chart data
    3. Record metrics and log the outcome
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = compute_projection(request_body.to_domain(), settings.recommendation_tolerance)
    except InvalidInputError as e:
        record_rejection("invalid_input")
        logging.warning(f"Invalid input: {e}", extra={"request_id": request_id, "field": e.field})
        raise HTTPException(status_code=422, detail=str(e))
    except DegenerateResultError as e:
        record_rejection("degenerate_result")
        logging.warning(f"Degenerate result: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    for warning in result.warnings:
        logging.warning(warning, extra={"request_id": request_id, "step": "projection_warning"})

    view = renderer.render(result)

    duration_ms = (time.time() - start_time) * 1000
    record_projection(result.recommendation.value, request_body.horizon_years)
    log_projection(
        request_id,
        result.recommendation.value,
        result.total_rent_cost,
        result.buy.net_cost,
        request_body.horizon_years,
        len(result.warnings),
        duration_ms,
    )

    return ProjectionResponse(
        total_rent_cost=result.total_rent_cost,
        buy=BuyProjectionSchema(**asdict(result.buy)),
        recommendation=result.recommendation,
        warnings=list(result.warnings),
        view=ProjectionViewSchema(
            rent_total_text=view.rent_total_text,
            buy_total_text=view.buy_total_text,
            recommendation_text=view.recommendation_text,
            chart=ChartSchema(
                max_value=view.chart.max_value,
                bars=[ChartBarSchema(**asdict(bar)) for bar in view.chart.bars],
            ),
        ),
    )
