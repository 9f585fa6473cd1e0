"""PFHR scoring engine - Personal Financial Health & Readiness score"""

from pfhr_gateway.domain.models import (
    PFHRInputs,
    PFHRBreakdown,
    PFHRResult,
    RiskLevel,
    ScoreCategory,
)
from pfhr_gateway.domain.exceptions import InvalidIncomeError
from pfhr_gateway.domain.recommendations import generate_recommendations
from pfhr_gateway.domain.thresholds import (
    ALIGNED_PAIRS,
    ALIGNMENT_BONUS,
    COMPONENT_WEIGHTS,
    DEBT_RATIO_WEIGHT,
    DEBT_TO_INCOME_LIMIT,
    EMERGENCY_FUND_BONUS_CAP_RATIO,
    EMERGENCY_FUND_BONUS_RATE,
    EMERGENCY_FUND_TARGET_MONTHS,
    EXPERIENCE_BASE_SCORES,
    PAYMENT_BURDEN_LIMIT,
    PAYMENT_BURDEN_WEIGHT,
    SAVINGS_RATE_TARGET,
    target_portfolio_multiple,
)
from pfhr_gateway.utils.math_utils import clamp01, round_to


def calculate_emergency_fund_score(inputs: PFHRInputs) -> float:
    """
    Emergency fund adequacy (0-100) against a 6 month expense reserve.

    Zero expenses is a degenerate case: 100 with any fund, otherwise 50.
    Reserves above target earn a bonus up to 12 months, never exceeding 100.
    """
    target_amount = inputs.monthly_expenses * EMERGENCY_FUND_TARGET_MONTHS

    if target_amount == 0:
        return 100.0 if inputs.emergency_fund > 0 else 50.0

    ratio = inputs.emergency_fund / target_amount
    score = clamp01(ratio) * 100

    if ratio > 1:
        bonus_ratio = min(ratio, EMERGENCY_FUND_BONUS_CAP_RATIO)
        return min(100.0, score * (1 + (bonus_ratio - 1) * EMERGENCY_FUND_BONUS_RATE))

    return score


def calculate_debt_score(inputs: PFHRInputs) -> float:
    """
    Debt management score (0-100).

    - 60%: debt-to-income, 100 at 0% falling linearly to 0 at 36%
    - 40%: payment burden, 100 at 0% falling linearly to 0 at 20%
    """
    annual_income = inputs.monthly_income * 12
    annual_debt_payments = inputs.monthly_debt_payments * 12

    debt_to_income = inputs.total_debt / annual_income if annual_income > 0 else 0.0
    debt_ratio_score = max(0.0, 100 - (debt_to_income / DEBT_TO_INCOME_LIMIT) * 100)

    payment_burden = annual_debt_payments / annual_income if annual_income > 0 else 0.0
    payment_burden_score = max(0.0, 100 - (payment_burden / PAYMENT_BURDEN_LIMIT) * 100)

    return debt_ratio_score * DEBT_RATIO_WEIGHT + payment_burden_score * PAYMENT_BURDEN_WEIGHT


def calculate_savings_rate_score(inputs: PFHRInputs) -> float:
    """Savings rate of disposable (post debt payment) income; 20% or more scores 100"""
    disposable_income = inputs.monthly_income - inputs.monthly_debt_payments
    savings = disposable_income - inputs.monthly_expenses

    if disposable_income <= 0:
        return 0.0

    savings_rate = savings / disposable_income
    return clamp01(savings_rate / SAVINGS_RATE_TARGET) * 100


def calculate_investment_readiness_score(inputs: PFHRInputs) -> float:
    """Portfolio value relative to the age-banded target (0-100)"""
    annual_income = inputs.monthly_income * 12
    portfolio_ratio = inputs.portfolio_value / annual_income if annual_income > 0 else 0.0

    ratio = portfolio_ratio / target_portfolio_multiple(inputs.age)
    return clamp01(ratio) * 100


def calculate_financial_knowledge_score(inputs: PFHRInputs) -> float:
    """
    Financial knowledge from stated experience (beginner=40, intermediate=70, advanced=100).

    Only the exact pairs conservative+beginner, moderate+intermediate and
    aggressive+advanced earn the +10 alignment bonus (capped at 100).
    """
    score = EXPERIENCE_BASE_SCORES[inputs.investment_experience]

    if (inputs.investment_experience, inputs.risk_tolerance) in ALIGNED_PAIRS:
        score = min(100.0, score + ALIGNMENT_BONUS)

    return score


def calculate_breakdown(inputs: PFHRInputs) -> PFHRBreakdown:
    """Compute the five unrounded component scores"""
    return PFHRBreakdown(
        emergency_fund_score=calculate_emergency_fund_score(inputs),
        debt_score=calculate_debt_score(inputs),
        savings_rate_score=calculate_savings_rate_score(inputs),
        investment_readiness_score=calculate_investment_readiness_score(inputs),
        financial_knowledge_score=calculate_financial_knowledge_score(inputs),
    )


def calculate_weighted_score(breakdown: PFHRBreakdown) -> float:
    """
    Weighted composite of the component scores.

    Scoring weights:
    - 30%: Emergency fund
    - 30%: Debt management
    - 20%: Savings rate
    - 20%: Investment readiness
    - 10%: Financial knowledge
    """
    components = breakdown.as_dict()
    return sum(components[name] * weight for name, weight in COMPONENT_WEIGHTS.items())


def determine_risk_level(score: float, breakdown: PFHRBreakdown) -> RiskLevel:
    """
    Map score and critical components to a risk level.

    High risk is checked first:
    - high:   score < 50, or emergency fund < 30, or debt < 30
    - low:    score > 75 and emergency fund > 60 and debt > 60
    - medium: everything else
    """
    if score < 50 or breakdown.emergency_fund_score < 30 or breakdown.debt_score < 30:
        return "high"

    if score > 75 and breakdown.emergency_fund_score > 60 and breakdown.debt_score > 60:
        return "low"

    return "medium"


def determine_category(score: float) -> ScoreCategory:
    """
    Map a PFHR score to a display category.

    - 0 - 33:   fragile
    - 33 - 66:  developing
    - 66+:      healthy
    """
    if score <= 33:
        return "fragile"
    elif score <= 66:
        return "developing"
    else:
        return "healthy"


def compute_pfhr(inputs: PFHRInputs) -> PFHRResult:
    """
    Main entry point: score validated financial inputs.

    Inputs are expected to be validated upstream (see api.v1.schemas.ScoreRequest);
    the only check performed here is zero income, which would otherwise divide by zero.

    Raises:
        InvalidIncomeError: monthly_income is 0
    """
    if inputs.monthly_income == 0:
        raise InvalidIncomeError()

    breakdown = calculate_breakdown(inputs)
    score = round_to(calculate_weighted_score(breakdown), 2)

    risk_level = determine_risk_level(score, breakdown)
    recommendations = generate_recommendations(breakdown, inputs)

    return PFHRResult(
        score=score,
        breakdown=PFHRBreakdown(
            **{name: round_to(value, 2) for name, value in breakdown.as_dict().items()}
        ),
        risk_level=risk_level,
        recommendations=recommendations,
    )
