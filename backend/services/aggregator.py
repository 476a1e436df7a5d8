import logging

from models.schemas import ChunkOutcome, ProcessingInfo, QuizResponse

logger = logging.getLogger(__name__)

SUMMARY_PLACEHOLDER = "Summary could not be generated."
MULTI_PART_INTRO = "This document covers multiple key areas:"
MIN_EXPECTED_QUESTIONS = 5


def merge_summaries(summaries: list[str]) -> str:
    if not summaries:
        return SUMMARY_PLACEHOLDER
    if len(summaries) == 1:
        return summaries[0]
    return MULTI_PART_INTRO + "\n\n" + "\n\n".join(summaries)


def aggregate(
    outcomes: list[ChunkOutcome],
    planned_count: int,
    topics: list[str],
    word_count: int,
    page_count: int,
) -> QuizResponse:
    """
    Folds per-chunk outcomes into the final quiz payload.

    Questions keep chunk order and are cut to planned_count; a short list is
    only logged. The result depends on nothing but the arguments.
    """
    ordered = sorted(outcomes, key=lambda o: o.index)
    summaries = [o.summary for o in ordered if o.summary]
    questions = [q for o in ordered for q in o.questions]

    final_questions = questions[:planned_count]
    if len(final_questions) < min(planned_count, MIN_EXPECTED_QUESTIONS):
        logger.warning("Only generated %d questions, expected %d", len(final_questions), planned_count)

    logger.info("Generated %d questions across %d topics", len(final_questions), len(topics))

    return QuizResponse(
        summary=merge_summaries(summaries),
        questions=final_questions,
        topics=list(topics),
        word_count=word_count,
        page_count=page_count,
        processing_info=ProcessingInfo(
            chunks_processed=len(outcomes),
            questions_generated=len(final_questions),
            topics_identified=len(topics),
            chunks_failed=sum(1 for o in outcomes if not o.succeeded),
        ),
    )
