import math

from models.schemas import DetailedResult, Question, ScoreResponse, TopicScore

DEFAULT_TOPIC = "General"


def option_text(option: str) -> str:
    """Drops the two-character 'A.' style label from an option."""
    return option[2:].strip()


def correct_option_text(question: Question) -> str:
    """
    Display text of the option labelled by question.answer.

    An option matches when, trimmed and upper-cased, it starts with the
    answer letter followed by '.'. Returns '' when nothing matches.
    """
    prefix = question.answer.strip().upper() + "."
    for option in question.options:
        if option.strip().upper().startswith(prefix):
            return option_text(option)
    return ""


def _percentage(correct: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up, matching what the browser displays.
    return math.floor(correct * 100 / total + 0.5)


def score_quiz(questions: list[Question], answers: list[str]) -> ScoreResponse:
    """
    Scores answers against questions by position.

    An answer counts only when it equals the correct option's display text
    exactly. Missing answers are treated as blank.
    """
    results: list[DetailedResult] = []
    for index, question in enumerate(questions):
        user_answer = answers[index] if index < len(answers) else ""
        correct_text = correct_option_text(question)
        results.append(
            DetailedResult(
                question=question.question,
                user_answer=user_answer,
                correct_answer=correct_text,
                is_correct=bool(correct_text) and user_answer == correct_text,
                explanation=question.explanation,
                topic=question.topic or DEFAULT_TOPIC,
            )
        )

    correct = sum(1 for r in results if r.is_correct)
    return ScoreResponse(
        score=correct,
        total=len(results),
        percentage=_percentage(correct, len(results)),
        detailed_results=results,
        topic_breakdown=topic_breakdown(results),
    )


def topic_breakdown(results: list[DetailedResult]) -> list[TopicScore]:
    tallies: dict[str, list[int]] = {}
    for result in results:
        tally = tallies.setdefault(result.topic, [0, 0])
        tally[1] += 1
        if result.is_correct:
            tally[0] += 1

    return [
        TopicScore(topic=topic, correct=correct, total=total, percentage=_percentage(correct, total))
        for topic, (correct, total) in tallies.items()
    ]
