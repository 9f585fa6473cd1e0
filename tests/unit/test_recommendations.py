"""Unit tests for recommendation generation"""

import dataclasses
import pytest
from pfhr_gateway.domain.models import PFHRInputs, PFHRBreakdown
from pfhr_gateway.domain.recommendations import generate_recommendations, FALLBACK_RECOMMENDATION
from pfhr_gateway.domain.scoring import calculate_breakdown
from pfhr_gateway.domain.thresholds import recommended_portfolio_multiple


def test_recommendations_high_debt_all_gates(high_debt_inputs: PFHRInputs):
    """Test every gate fires in fixed order with live amounts"""
    recommendations = generate_recommendations(calculate_breakdown(high_debt_inputs), high_debt_inputs)

    assert recommendations == (
        "Build emergency fund to 6 months of expenses (target: $24000.00)",
        "Reduce debt-to-income ratio (currently 166.7%, target: <36%)",
        "Increase savings rate to 20% (target: $600.00/month, currently: $-1000.00/month)",
        "Build investment portfolio (target: $60000.00 for your age)",
        "Consider financial education resources or working with a financial advisor",
    )


def test_recommendations_generic_debt_message():
    """Test debt below 36% of income but heavy payments gets generic advice"""
    inputs = PFHRInputs(
        monthly_income=500000,
        monthly_expenses=200000,
        emergency_fund=1200000,  # exactly 6 months
        total_debt=1200000,  # 20% of annual income
        monthly_debt_payments=100000,  # 20% payment burden
        portfolio_value=20000000,
        investment_experience="advanced",
        risk_tolerance="aggressive",
        age=40,
    )

    assert generate_recommendations(calculate_breakdown(inputs), inputs) == (
        "Focus on paying down high-interest debt",
    )


def test_recommendations_fallback(high_net_worth_inputs: PFHRInputs):
    """Test no gate firing yields the single fallback recommendation"""
    recommendations = generate_recommendations(calculate_breakdown(high_net_worth_inputs), high_net_worth_inputs)

    assert recommendations == (FALLBACK_RECOMMENDATION,)
    assert FALLBACK_RECOMMENDATION == "Maintain current financial practices"


def test_recommendations_thresholds_are_strict(typical_inputs: PFHRInputs):
    """Test components exactly at their threshold do not trigger advice"""
    at_threshold = PFHRBreakdown(
        emergency_fund_score=50.0,
        debt_score=50.0,
        savings_rate_score=50.0,
        investment_readiness_score=50.0,
        financial_knowledge_score=60.0,
    )

    assert generate_recommendations(at_threshold, typical_inputs) == (FALLBACK_RECOMMENDATION,)


def test_recommendations_knowledge_gate_only(high_net_worth_inputs: PFHRInputs):
    """Test knowledge advice alone for a misaligned beginner"""
    inputs = dataclasses.replace(high_net_worth_inputs, investment_experience="beginner")

    assert generate_recommendations(calculate_breakdown(inputs), inputs) == (
        "Consider financial education resources or working with a financial advisor",
    )


def test_recommendations_senior_portfolio_target(typical_inputs: PFHRInputs):
    """Test advice caps the portfolio target at 6x income from age 50"""
    inputs = dataclasses.replace(typical_inputs, age=62)

    recommendations = generate_recommendations(calculate_breakdown(inputs), inputs)

    # 6x annual income of $60,000, even though readiness scoring uses 8x at 60+
    assert "Build investment portfolio (target: $360000.00 for your age)" in recommendations


@pytest.mark.parametrize(
    "age, multiple",
    [(18, 0.5), (29, 0.5), (30, 1.0), (34, 1.0), (35, 2.0), (39, 2.0), (40, 3.0), (49, 3.0), (50, 6.0), (59, 6.0), (60, 6.0), (120, 6.0)],
)
def test_recommended_portfolio_multiple_bands(age: int, multiple: float):
    assert recommended_portfolio_multiple(age) == multiple


@pytest.mark.parametrize(
    "total_debt, expected",
    [
        (2160000, "Focus on paying down high-interest debt"),  # exactly 36%
        (2166000, "Reduce debt-to-income ratio (currently 36.1%, target: <36%)"),
    ],
)
def test_recommendations_debt_ratio_boundary(typical_inputs: PFHRInputs, total_debt: int, expected: str):
    """Test the printed percentage is the one compared against 36%"""
    inputs = dataclasses.replace(typical_inputs, total_debt=total_debt, monthly_debt_payments=0)

    recommendations = generate_recommendations(calculate_breakdown(inputs), inputs)

    assert recommendations[0] == expected
