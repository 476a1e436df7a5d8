import logging

from models.schemas import ExtractedDocument, QuizResponse
from services.aggregator import aggregate
from services.chunker import chunk_text
from services.orchestrator import ChunkOrchestrator
from services.planner import plan_question_count
from services.topics import extract_topics

logger = logging.getLogger(__name__)


async def generate_quiz(
    document: ExtractedDocument,
    orchestrator: ChunkOrchestrator,
    max_chunk_size: int,
) -> QuizResponse:
    """Topics and question plan come from the whole document; generation runs per chunk."""
    topics = extract_topics(document.text)
    logger.info("Identified topics: %s", topics)

    question_count = plan_question_count(document.word_count, document.page_count, len(topics))
    logger.info("Generating %d questions", question_count)

    chunks = chunk_text(document.text, max_chunk_size)
    logger.info("Processing %d text chunks", len(chunks))

    outcomes = await orchestrator.run(chunks, question_count, topics)

    return aggregate(
        outcomes,
        planned_count=question_count,
        topics=topics,
        word_count=document.word_count,
        page_count=document.page_count,
    )
