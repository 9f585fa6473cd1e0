"""SQLAlchemy ORM models for persisted score submissions"""

import uuid
from sqlalchemy import Column, DateTime, Float, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ScoreSubmission(Base):
    """PFHR assessment submitted by an investor"""

    __tablename__ = "score_submission"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=True, index=True)
    session_id = Column(Text, nullable=True)  # anonymous callers only
    responses = Column(JSON, nullable=False)  # validated inputs + breakdown
    pfhr_score = Column(Float, nullable=False)
    risk_level = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    recommendations = Column(JSON, nullable=False)
    status = Column(Text, nullable=False, default="pending")
    submitted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
