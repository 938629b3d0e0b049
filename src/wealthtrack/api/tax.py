"""Tax API: after-tax preview of a single profit event."""

from fastapi import APIRouter

from wealthtrack.analytics.tax_evaluator import evaluate_tax
from wealthtrack.api.schemas.tax import TaxEvaluateRequest
from wealthtrack.domain.models.tax import TaxResult

router = APIRouter(prefix="/api/tax", tags=["tax"])


@router.post("/evaluate", response_model=TaxResult)
async def evaluate(body: TaxEvaluateRequest) -> TaxResult:
    """Apply the configured flat rate to one gross profit; losses pass through untaxed."""
    return evaluate_tax(body.asset_type, body.profit_type, body.gross_profit, body.tax_settings)
