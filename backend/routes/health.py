from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from config import Settings, get_settings
from models.schemas import HealthResponse

router = APIRouter()

FEATURES = ["large-pdf-support", "adaptive-questions", "topic-analysis"]


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)):
    """Static capability descriptor."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        max_file_size=f"{settings.max_upload_mb}MB",
        features=FEATURES,
    )
