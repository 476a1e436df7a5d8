from fastapi import APIRouter, Request

from models.schemas import ScoreRequest, ScoreResponse
from rate_limiter import SCORE_LIMIT, limiter
from services import scoring

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
@limiter.limit(SCORE_LIMIT)
async def score_quiz(request: Request, payload: ScoreRequest):
    """Scores the submitted answers and breaks the result down by topic."""
    return scoring.score_quiz(payload.questions, payload.answers)
