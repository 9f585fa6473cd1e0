"""Domain models - pure Python dataclasses representing PFHR inputs and results"""

from dataclasses import dataclass, asdict
from typing import Dict, Literal, Tuple

ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
RiskTolerance = Literal["conservative", "moderate", "aggressive"]
RiskLevel = Literal["low", "medium", "high"]
ScoreCategory = Literal["fragile", "developing", "healthy"]


@dataclass(frozen=True)
class PFHRInputs:
    """Financial inputs for scoring (all monetary values in cents)"""

    monthly_income: int
    monthly_expenses: int
    emergency_fund: int
    total_debt: int
    monthly_debt_payments: int
    portfolio_value: int
    investment_experience: ExperienceLevel
    risk_tolerance: RiskTolerance
    age: int


@dataclass(frozen=True)
class PFHRBreakdown:
    """Component scores, each in [0, 100]"""

    emergency_fund_score: float
    debt_score: float
    savings_rate_score: float
    investment_readiness_score: float
    financial_knowledge_score: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class PFHRResult:
    """Output of PFHR scoring"""

    score: float
    breakdown: PFHRBreakdown
    risk_level: RiskLevel
    recommendations: Tuple[str, ...]
