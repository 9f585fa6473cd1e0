"""Scoring policy constants shared by the scorer and the recommendation rules"""

# Emergency fund
EMERGENCY_FUND_TARGET_MONTHS = 6
EMERGENCY_FUND_BONUS_CAP_RATIO = 2.0  # 12 months
EMERGENCY_FUND_BONUS_RATE = 0.1

# Debt: linear falloff reaching 0 at these ratios
DEBT_TO_INCOME_LIMIT = 0.36
DEBT_TO_INCOME_LIMIT_PCT = 36.0
PAYMENT_BURDEN_LIMIT = 0.20
DEBT_RATIO_WEIGHT = 0.6
PAYMENT_BURDEN_WEIGHT = 0.4

SAVINGS_RATE_TARGET = 0.20

# (upper age bound exclusive, target multiple of annual income); 60+ falls through
PORTFOLIO_TARGET_BANDS = (
    (30, 0.5),
    (35, 1.0),
    (40, 2.0),
    (50, 3.0),
    (60, 6.0),
)
PORTFOLIO_TARGET_SENIOR = 8.0

# Recommended portfolio for advice; 50+ all share the 6x target
RECOMMENDATION_PORTFOLIO_BANDS = (
    (30, 0.5),
    (35, 1.0),
    (40, 2.0),
    (50, 3.0),
)
RECOMMENDATION_PORTFOLIO_SENIOR = 6.0

EXPERIENCE_BASE_SCORES = {
    "beginner": 40.0,
    "intermediate": 70.0,
    "advanced": 100.0,
}
ALIGNED_PAIRS = {
    ("beginner", "conservative"),
    ("intermediate", "moderate"),
    ("advanced", "aggressive"),
}
ALIGNMENT_BONUS = 10.0

COMPONENT_WEIGHTS = {
    "emergency_fund_score": 0.30,
    "debt_score": 0.30,
    "savings_rate_score": 0.20,
    "investment_readiness_score": 0.20,
    "financial_knowledge_score": 0.10,
}

# Recommendation gates: a component below its threshold triggers advice
RECOMMENDATION_THRESHOLDS = {
    "emergency_fund_score": 50.0,
    "debt_score": 50.0,
    "savings_rate_score": 50.0,
    "investment_readiness_score": 50.0,
    "financial_knowledge_score": 60.0,
}


def target_portfolio_multiple(age: int) -> float:
    """Age-appropriate portfolio target as a multiple of annual income"""
    for upper_age, multiple in PORTFOLIO_TARGET_BANDS:
        if age < upper_age:
            return multiple
    return PORTFOLIO_TARGET_SENIOR


def recommended_portfolio_multiple(age: int) -> float:
    """Portfolio target quoted in recommendations, as a multiple of annual income"""
    for upper_age, multiple in RECOMMENDATION_PORTFOLIO_BANDS:
        if age < upper_age:
            return multiple
    return RECOMMENDATION_PORTFOLIO_SENIOR
