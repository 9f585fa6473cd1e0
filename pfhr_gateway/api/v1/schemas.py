"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, StrictInt
from typing import List, Literal, Optional

from pfhr_gateway.domain.models import PFHRInputs, PFHRResult


class ScoreRequest(BaseModel):
    """
    Request body for POST /v1/score.

    This is the validation boundary for the scorer: compute_pfhr trusts these
    constraints and only re-checks zero income itself.
    """

    monthly_income: StrictInt = Field(..., gt=0, description="Monthly income in cents")
    monthly_expenses: StrictInt = Field(..., ge=0, description="Monthly expenses in cents")
    emergency_fund: StrictInt = Field(..., ge=0, description="Emergency fund in cents")
    total_debt: StrictInt = Field(..., ge=0, description="Total outstanding debt in cents")
    monthly_debt_payments: StrictInt = Field(..., ge=0, description="Monthly debt payments in cents")
    portfolio_value: StrictInt = Field(..., ge=0, description="Investment portfolio value in cents")
    investment_experience: Literal["beginner", "intermediate", "advanced"]
    risk_tolerance: Literal["conservative", "moderate", "aggressive"]
    age: StrictInt = Field(..., ge=18, le=120, description="Age in years")

    def to_inputs(self) -> PFHRInputs:
        """Convert validated request into the domain input record"""
        return PFHRInputs(**self.model_dump())


class BreakdownSchema(BaseModel):
    """Five component scores, always returned together"""

    emergency_fund_score: float
    debt_score: float
    savings_rate_score: float
    investment_readiness_score: float
    financial_knowledge_score: float


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    score: float
    category: Literal["fragile", "developing", "healthy"]
    risk_level: Literal["low", "medium", "high"]
    breakdown: BreakdownSchema
    recommendations: List[str]
    submission_id: str

    @classmethod
    def from_result(cls, result: PFHRResult, category: str, submission_id: str) -> "ScoreResponse":
        return cls(
            score=result.score,
            category=category,
            risk_level=result.risk_level,
            breakdown=BreakdownSchema(**result.breakdown.as_dict()),
            recommendations=list(result.recommendations),
            submission_id=submission_id,
        )


class SubmissionResponse(BaseModel):
    """Response for GET /v1/submissions/{submission_id}"""

    submission_id: str
    user_id: Optional[str] = None
    score: float
    category: str
    risk_level: str
    breakdown: BreakdownSchema
    recommendations: List[str]
    status: str
    submitted_at: str


class HistoryItem(BaseModel):
    """Single submission in history"""

    submission_id: str
    score: float
    category: str
    risk_level: str
    submitted_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/score/history"""

    user_id: str
    submissions: List[HistoryItem]
