import asyncio
import logging
from typing import Optional

from config import GenerationSettings
from models.schemas import ChunkOutcome, ParseStatus
from services.gemini_service import (
    GeminiClient,
    TextGenerator,
    build_chunk_prompt,
    parse_generation,
    topic_for_chunk,
)
from services.planner import questions_per_chunk

logger = logging.getLogger(__name__)


class ChunkOrchestrator:
    """
    Runs one generation call per chunk, strictly in order.

    A fixed pause of settings.inter_call_delay seconds separates consecutive
    calls to stay under the API rate limit. A failing chunk is logged and
    reported as a failed outcome; it never stops the remaining chunks.
    """

    def __init__(self, settings: GenerationSettings, generator: Optional[TextGenerator] = None) -> None:
        self.settings = settings
        self.generator = generator if generator is not None else GeminiClient(settings)

    async def run(self, chunks: list[str], planned_total: int, topics: list[str]) -> list[ChunkOutcome]:
        per_chunk = questions_per_chunk(planned_total, len(chunks))
        outcomes: list[ChunkOutcome] = []

        for index, chunk in enumerate(chunks):
            logger.info("Processing chunk %d/%d (%d questions)", index + 1, len(chunks), per_chunk)
            outcome = await self._process_chunk(index, chunk, per_chunk, topic_for_chunk(topics, index))
            outcomes.append(outcome)

            if index < len(chunks) - 1:
                await asyncio.sleep(self.settings.inter_call_delay)

        return outcomes

    async def _process_chunk(self, index: int, chunk: str, question_count: int, topic: str) -> ChunkOutcome:
        prompt = build_chunk_prompt(chunk, question_count, topic)
        try:
            raw = await asyncio.to_thread(self.generator.generate, prompt)
        except Exception as e:
            # Network errors, timeouts and quota errors all skip just this chunk.
            logger.error("Error processing chunk %d: %s", index + 1, e)
            return ChunkOutcome(index=index, succeeded=False, error=str(e) or type(e).__name__)

        parsed = parse_generation(raw or "")
        if parsed.status is ParseStatus.no_json:
            logger.warning("No valid JSON found in chunk %d response", index + 1)
            return ChunkOutcome(index=index, succeeded=False, error="No JSON object in response")
        if parsed.status is ParseStatus.malformed:
            logger.error("Error processing chunk %d: %s", index + 1, parsed.error)
            return ChunkOutcome(index=index, succeeded=False, error=parsed.error)

        return ChunkOutcome(
            index=index,
            succeeded=True,
            summary=parsed.summary,
            questions=parsed.questions,
        )
