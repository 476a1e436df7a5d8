import asyncio
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from models.schemas import ErrorResponse, QuizResponse
from rate_limiter import UPLOAD_LIMIT, limiter
from routes.deps import get_orchestrator
from services import file_service, pdf_service, quiz_service
from services.orchestrator import ChunkOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter()

TIMEOUT_ERROR = "Processing timeout - document may be too large or complex"
FILE_ERROR = "File processing error - please try uploading again"
PARSE_ERROR = "AI response parsing error - please try again"
GENERIC_ERROR = "Internal Server Error"


def error_message_for(exc: Exception) -> str:
    """Maps a failure to one of the fixed user-facing messages."""
    message = str(exc)
    if isinstance(exc, TimeoutError) or "timeout" in message:
        return TIMEOUT_ERROR
    if isinstance(exc, (FileNotFoundError, pdf_service.PdfExtractionError)) or "ENOENT" in message:
        return FILE_ERROR
    if isinstance(exc, json.JSONDecodeError) or "JSON" in message:
        return PARSE_ERROR
    return GENERIC_ERROR


def _error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post(
    "/upload",
    response_model=QuizResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(UPLOAD_LIMIT)
async def upload_pdf(
    request: Request,
    pdf: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    orchestrator: ChunkOrchestrator = Depends(get_orchestrator),
):
    """
    Accepts a PDF, extracts its text and generates a summary plus a quiz.
    The temp file is always deleted in the finally block.
    """
    if pdf is None:
        return _error_response(400, "No file uploaded")

    if pdf.size and pdf.size > settings.max_upload_bytes:
        return _error_response(413, f"File too large. Maximum size is {settings.max_upload_mb}MB.")

    logger.info("Received file: %s (%.2f MB)", pdf.filename, (pdf.size or 0) / 1024 / 1024)

    tmp_path: Optional[str] = None
    try:
        tmp_path = await file_service.save_temp_file(pdf, settings.upload_dir)
        # PDF parsing is CPU-bound; keep it off the event loop.
        document = await asyncio.to_thread(pdf_service.extract_document, tmp_path)
        return await quiz_service.generate_quiz(document, orchestrator, settings.max_chunk_size)
    except Exception as e:
        logger.error("Upload processing failed: %s", e)
        details = str(e) if settings.is_development else None
        return _error_response(500, error_message_for(e), details)
    finally:
        if tmp_path:
            file_service.delete_file(tmp_path)
