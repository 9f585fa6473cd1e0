"""Recommendation rules driven by the PFHR component breakdown"""

from typing import List, Tuple
from pfhr_gateway.domain.models import PFHRInputs, PFHRBreakdown
from pfhr_gateway.domain.thresholds import (
    DEBT_TO_INCOME_LIMIT_PCT,
    EMERGENCY_FUND_TARGET_MONTHS,
    RECOMMENDATION_THRESHOLDS,
    SAVINGS_RATE_TARGET,
    recommended_portfolio_multiple,
)
from pfhr_gateway.utils.math_utils import format_currency

FALLBACK_RECOMMENDATION = "Maintain current financial practices"


def generate_recommendations(breakdown: PFHRBreakdown, inputs: PFHRInputs) -> Tuple[str, ...]:
    """
    Generate ordered recommendations from the unrounded breakdown.

    Each component is gated by its own threshold and checked in a fixed order:
    emergency fund -> debt -> savings rate -> investment readiness -> knowledge.
    Messages embed live amounts so they read as targets, not templates.

    Example:
        monthly_expenses=300000, emergency_fund_score=20
        -> "Build emergency fund to 6 months of expenses (target: $18000.00)"
    """
    recommendations: List[str] = []
    annual_income = inputs.monthly_income * 12

    if breakdown.emergency_fund_score < RECOMMENDATION_THRESHOLDS["emergency_fund_score"]:
        target_amount = inputs.monthly_expenses * EMERGENCY_FUND_TARGET_MONTHS
        recommendations.append(
            f"Build emergency fund to {EMERGENCY_FUND_TARGET_MONTHS} months of expenses "
            f"(target: {format_currency(target_amount)})"
        )

    if breakdown.debt_score < RECOMMENDATION_THRESHOLDS["debt_score"]:
        debt_to_income_pct = (inputs.total_debt / annual_income) * 100 if annual_income > 0 else 0.0
        if debt_to_income_pct > DEBT_TO_INCOME_LIMIT_PCT:
            recommendations.append(
                f"Reduce debt-to-income ratio (currently {debt_to_income_pct:.1f}%, "
                f"target: <{DEBT_TO_INCOME_LIMIT_PCT:.0f}%)"
            )
        else:
            recommendations.append("Focus on paying down high-interest debt")

    if breakdown.savings_rate_score < RECOMMENDATION_THRESHOLDS["savings_rate_score"]:
        disposable_income = inputs.monthly_income - inputs.monthly_debt_payments
        current_savings = disposable_income - inputs.monthly_expenses
        target_savings = disposable_income * SAVINGS_RATE_TARGET
        recommendations.append(
            f"Increase savings rate to {SAVINGS_RATE_TARGET * 100:.0f}% "
            f"(target: {format_currency(target_savings)}/month, "
            f"currently: {format_currency(current_savings)}/month)"
        )

    if breakdown.investment_readiness_score < RECOMMENDATION_THRESHOLDS["investment_readiness_score"]:
        target_portfolio = annual_income * recommended_portfolio_multiple(inputs.age)
        recommendations.append(
            f"Build investment portfolio (target: {format_currency(target_portfolio)} for your age)"
        )

    if breakdown.financial_knowledge_score < RECOMMENDATION_THRESHOLDS["financial_knowledge_score"]:
        recommendations.append(
            "Consider financial education resources or working with a financial advisor"
        )

    if not recommendations:
        recommendations.append(FALLBACK_RECOMMENDATION)

    return tuple(recommendations)
