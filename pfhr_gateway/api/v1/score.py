"""POST /v1/score - PFHR score calculation endpoint"""

import time
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from pfhr_gateway.api.v1.schemas import ScoreRequest, ScoreResponse
from pfhr_gateway.api.dependencies import get_request_id, get_user_id, new_session_id
from pfhr_gateway.infrastructure.database.session import get_db
from pfhr_gateway.infrastructure.database.repositories import SubmissionRepository
from pfhr_gateway.domain.scoring import compute_pfhr, determine_category
from pfhr_gateway.domain.exceptions import InvalidIncomeError
from pfhr_gateway.infrastructure.observability.metrics import record_score, invalid_income_counter
from pfhr_gateway.infrastructure.observability.logging import log_score

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
def calculate_score(
    request_body: ScoreRequest,
    request: Request,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_user_id),
):
    """
    Compute a PFHR score and store it as a pending submission.

    Flow:
    1. Validate inputs (ScoreRequest, 422 on failure)
    2. Compute score, breakdown, risk level and recommendations
    3. Derive display category
    4. Persist submission (anonymous callers get a session ID)
    5. Return result with submission ID
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        inputs = request_body.to_inputs()
        result = compute_pfhr(inputs)
        category = determine_category(result.score)

        session_id = None if user_id else new_session_id()

        submission_repo = SubmissionRepository(db)
        db_submission = submission_repo.create_submission(
            inputs=inputs,
            result=result,
            category=category,
            user_id=user_id,
            session_id=session_id,
        )
        submission_id = str(db_submission.id)

        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_score(result.score, result.risk_level, category)
        log_score(
            request_id,
            submission_id,
            result.score,
            result.risk_level,
            category,
            user_id is not None,
            duration_ms,
        )

        return ScoreResponse.from_result(result, category, submission_id)

    except InvalidIncomeError as e:
        invalid_income_counter.inc()
        db.rollback()
        logging.warning(f"PFHR calculation error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
