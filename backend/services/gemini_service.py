import json
import logging
from typing import Any, Protocol

from google.generativeai.client import configure as genai_configure
from google.generativeai.generative_models import GenerativeModel
from google.generativeai.types import GenerationConfig

from config import GenerationSettings
from models.schemas import ParsedResponse, ParseStatus

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "General"


class TextGenerator(Protocol):
    """Anything that turns a prompt into raw model text."""

    def generate(self, prompt: str) -> str:
        ...


class GeminiClient:
    """
    Thin synchronous wrapper around the Gemini SDK.

    Built from an explicit GenerationSettings so nothing here reads the
    environment. Callers run generate() in a worker thread.
    """

    def __init__(self, settings: GenerationSettings) -> None:
        client_options = {"api_endpoint": settings.api_endpoint} if settings.api_endpoint else None
        genai_configure(api_key=settings.api_key, client_options=client_options)
        self._model = GenerativeModel(
            settings.model_name,
            generation_config=GenerationConfig(response_mime_type="application/json"),
        )
        self._timeout = settings.request_timeout

    def generate(self, prompt: str) -> str:
        response = self._model.generate_content(
            prompt,
            request_options={"timeout": self._timeout},
        )
        # Blocked candidates or MAX_TOKENS can leave response.text inaccessible.
        try:
            return response.text
        except ValueError:
            try:
                return response.candidates[0].content.parts[0].text
            except (IndexError, AttributeError):
                return ""


def topic_for_chunk(topics: list[str], chunk_index: int) -> str:
    if not topics:
        return DEFAULT_TOPIC
    return topics[chunk_index % len(topics)]


def build_chunk_prompt(chunk: str, question_count: int, topic: str) -> str:
    """Instruction asking for a summary plus question_count MCQs about one chunk."""
    return (
        "You are an expert educational content creator. Analyze the following text and generate:\n\n"
        "1. A comprehensive summary (2-3 paragraphs) focusing on key concepts and main ideas\n"
        f"2. {question_count} high-quality multiple-choice questions with:\n"
        "   - Clear, specific questions that test understanding\n"
        "   - 4 well-crafted options (A, B, C, D)\n"
        "   - Correct answer (as A, B, C, or D)\n"
        "   - Detailed explanation for the correct answer\n"
        "   - Topic classification for each question\n\n"
        "Make questions varied in difficulty and cover different aspects of the content.\n"
        "Include questions that test:\n"
        "- Factual recall\n"
        "- Conceptual understanding\n"
        "- Application of knowledge\n"
        "- Analysis and synthesis\n\n"
        "Respond in clean JSON format:\n"
        "{\n"
        '  "summary": "Comprehensive summary of key concepts and main ideas...",\n'
        '  "questions": [\n'
        "    {\n"
        '      "question": "Clear, specific question text...",\n'
        '      "options": ["A. First option", "B. Second option", "C. Third option", "D. Fourth option"],\n'
        '      "answer": "C",\n'
        '      "explanation": "Detailed explanation of why this answer is correct and others are wrong...",\n'
        f'      "topic": "{topic}",\n'
        '      "difficulty": "medium"\n'
        "    }\n"
        "  ]\n"
        "}\n\n"
        "Text to analyze:\n"
        f'"""{chunk}"""'
    )


def parse_generation(raw: str) -> ParsedResponse:
    """
    Reads the JSON object out of a raw model reply.

    Everything between the first '{' and the last '}' is decoded, so chatty
    text or markdown fences around the object are ignored. Fields are taken
    only when they have the expected type; question entries that are not
    objects are dropped.
    """
    first_brace = raw.find("{")
    last_brace = raw.rfind("}")
    if first_brace == -1 or last_brace < first_brace:
        return ParsedResponse(status=ParseStatus.no_json)

    try:
        data: Any = json.loads(raw[first_brace:last_brace + 1])
    except json.JSONDecodeError as e:
        return ParsedResponse(status=ParseStatus.malformed, error=f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        return ParsedResponse(status=ParseStatus.malformed, error="JSON payload is not an object")

    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        summary = None

    questions = data.get("questions")
    if not isinstance(questions, list):
        questions = []
    kept = [q for q in questions if isinstance(q, dict)]
    if len(kept) != len(questions):
        logger.warning("Dropped %d non-object question entries", len(questions) - len(kept))

    return ParsedResponse(status=ParseStatus.ok, summary=summary, questions=kept)
