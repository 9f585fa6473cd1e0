"""GET /v1/score/history - Fetch a user's submission history"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pfhr_gateway.api.v1.schemas import HistoryResponse, HistoryItem
from pfhr_gateway.config import settings
from pfhr_gateway.infrastructure.database.session import get_db
from pfhr_gateway.infrastructure.database.repositories import SubmissionRepository

router = APIRouter()


@router.get("/score/history", response_model=HistoryResponse)
def get_score_history(
    user_id: str = Query(..., min_length=1, description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent PFHR submissions for a user, newest first.

    Anonymous submissions are keyed by session and never appear here.
    """
    submission_repo = SubmissionRepository(db)
    submissions = submission_repo.get_submissions_by_user(user_id, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            submission_id=str(s.id),
            score=s.pfhr_score,
            category=s.category,
            risk_level=s.risk_level,
            submitted_at=s.submitted_at.isoformat(),
        )
        for s in submissions
    ]

    return HistoryResponse(user_id=user_id, submissions=history_items)
