"""GET /v1/submissions/{submission_id} - Fetch a stored PFHR result"""

import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pfhr_gateway.api.v1.schemas import SubmissionResponse, BreakdownSchema
from pfhr_gateway.infrastructure.database.session import get_db
from pfhr_gateway.infrastructure.database.repositories import SubmissionRepository

router = APIRouter()


@router.get("/submissions/{submission_id}", response_model=SubmissionResponse)
def get_submission(submission_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a scored submission for the result page.

    Returns:
        Score, category, risk level, breakdown and recommendations
    """
    try:
        submission_uuid = uuid.UUID(submission_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid submission ID format")

    submission_repo = SubmissionRepository(db)
    submission = submission_repo.get_submission_by_id(submission_uuid)

    if not submission:
        raise HTTPException(status_code=404, detail="Submission not found")

    return SubmissionResponse(
        submission_id=str(submission.id),
        user_id=submission.user_id,
        score=submission.pfhr_score,
        category=submission.category,
        risk_level=submission.risk_level,
        breakdown=BreakdownSchema(**submission.responses["breakdown"]),
        recommendations=submission.recommendations,
        status=submission.status,
        submitted_at=submission.submitted_at.isoformat(),
    )
