"""Pytest fixtures for testing"""

import os

# Point the service at SQLite before settings are loaded
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from pfhr_gateway.api.main import create_app
from pfhr_gateway.infrastructure.database.models import Base
from pfhr_gateway.infrastructure.database.session import get_db
from pfhr_gateway.domain.models import PFHRInputs


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def typical_inputs() -> PFHRInputs:
    """Mid-career investor: 6 months reserve, moderate debt, some portfolio"""
    return PFHRInputs(
        monthly_income=500000,  # $5,000
        monthly_expenses=300000,  # $3,000
        emergency_fund=1800000,  # $18,000 (6 months)
        total_debt=1000000,  # $10,000
        monthly_debt_payments=50000,  # $500
        portfolio_value=5000000,  # $50,000
        investment_experience="intermediate",
        risk_tolerance="moderate",
        age=35,
    )


@pytest.fixture
def high_debt_inputs() -> PFHRInputs:
    """Overextended borrower: thin reserve, debt far above income"""
    return PFHRInputs(
        monthly_income=500000,
        monthly_expenses=400000,
        emergency_fund=100000,
        total_debt=10000000,  # $100,000
        monthly_debt_payments=200000,
        portfolio_value=0,
        investment_experience="beginner",
        risk_tolerance="conservative",
        age=30,
    )


@pytest.fixture
def high_net_worth_inputs() -> PFHRInputs:
    """Debt-free high earner with a large portfolio"""
    return PFHRInputs(
        monthly_income=10000000,  # $100,000
        monthly_expenses=5000000,
        emergency_fund=30000000,  # 6 months
        total_debt=0,
        monthly_debt_payments=0,
        portfolio_value=500000000,  # $5,000,000
        investment_experience="advanced",
        risk_tolerance="aggressive",
        age=45,
    )
