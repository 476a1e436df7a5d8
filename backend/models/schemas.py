from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # The frontend consumes camelCase keys.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExtractedDocument(BaseModel):
    text: str
    word_count: int
    page_count: int

    model_config = ConfigDict(frozen=True)


class ParseStatus(str, Enum):
    ok = "ok"
    no_json = "no_json"
    malformed = "malformed"


class ParsedResponse(BaseModel):
    """Best-effort reading of one raw Gemini reply."""

    status: ParseStatus
    summary: Optional[str] = None
    questions: list[dict[str, Any]] = Field(default_factory=list)
    error: Optional[str] = None


class ChunkOutcome(BaseModel):
    index: int
    succeeded: bool
    summary: Optional[str] = None
    questions: list[dict[str, Any]] = Field(default_factory=list)
    error: Optional[str] = None


class ProcessingInfo(_CamelModel):
    chunks_processed: int
    questions_generated: int
    topics_identified: int
    chunks_failed: int = 0


class QuizResponse(_CamelModel):
    summary: str
    questions: list[dict[str, Any]]
    topics: list[str]
    word_count: int
    page_count: int
    processing_info: ProcessingInfo


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(_CamelModel):
    status: str
    timestamp: str
    max_file_size: str
    features: list[str]


class Question(BaseModel):
    # Generated questions are not validated on receipt, so every field is optional here.
    model_config = ConfigDict(extra="allow")

    question: str = ""
    options: list[str] = Field(default_factory=list)
    answer: str = ""
    explanation: str = ""
    topic: Optional[str] = None
    difficulty: Optional[str] = None


class ScoreRequest(BaseModel):
    questions: list[Question] = Field(..., max_length=100)
    answers: list[str] = Field(default_factory=list, max_length=100)


class DetailedResult(_CamelModel):
    question: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    explanation: str
    topic: str


class TopicScore(_CamelModel):
    topic: str
    correct: int
    total: int
    percentage: int


class ScoreResponse(_CamelModel):
    score: int
    total: int
    percentage: int
    detailed_results: list[DetailedResult]
    topic_breakdown: list[TopicScore]
