"""Data access layer for score submissions"""

import uuid
from dataclasses import asdict
from typing import List, Optional
from sqlalchemy.orm import Session
from pfhr_gateway.infrastructure.database.models import ScoreSubmission
from pfhr_gateway.domain.models import PFHRInputs, PFHRResult


class SubmissionRepository:
    """Repository for PFHR score submissions"""

    def __init__(self, db: Session):
        self.db = db

    def create_submission(
        self,
        inputs: PFHRInputs,
        result: PFHRResult,
        category: str,
        user_id: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> ScoreSubmission:
        """Persist a scored submission"""
        db_submission = ScoreSubmission(
            user_id=user_id,
            session_id=session_id,
            responses={
                **asdict(inputs),
                "breakdown": result.breakdown.as_dict(),
            },
            pfhr_score=result.score,
            risk_level=result.risk_level,
            category=category,
            recommendations=list(result.recommendations),
            status="pending",
        )
        self.db.add(db_submission)
        self.db.flush()  # Get ID without committing
        return db_submission

    def get_submission_by_id(self, submission_id: uuid.UUID) -> Optional[ScoreSubmission]:
        """Fetch a single submission"""
        return (
            self.db.query(ScoreSubmission)
            .filter(ScoreSubmission.id == submission_id)
            .first()
        )

    def get_submissions_by_user(self, user_id: str, limit: int = 10) -> List[ScoreSubmission]:
        """Fetch recent submissions for a user"""
        return (
            self.db.query(ScoreSubmission)
            .filter(ScoreSubmission.user_id == user_id)
            .order_by(ScoreSubmission.submitted_at.desc())
            .limit(limit)
            .all()
        )
