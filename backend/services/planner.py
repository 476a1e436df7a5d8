import math

BASE_QUESTIONS = 5
MAX_QUESTIONS = 25
MAX_TOPIC_BONUS = 5

# (threshold, bonus) pairs. Every threshold that is exceeded adds its bonus.
WORD_COUNT_STEPS = [(5000, 3), (10000, 3), (20000, 4)]
PAGE_COUNT_STEPS = [(10, 2), (25, 3), (50, 5)]


def plan_question_count(word_count: int, page_count: int, topic_count: int) -> int:
    """Target number of quiz questions for a whole document, in [5, 25]."""
    total = BASE_QUESTIONS
    total += sum(bonus for threshold, bonus in WORD_COUNT_STEPS if word_count > threshold)
    total += sum(bonus for threshold, bonus in PAGE_COUNT_STEPS if page_count > threshold)
    total += min(max(topic_count, 0), MAX_TOPIC_BONUS)
    return min(total, MAX_QUESTIONS)


def questions_per_chunk(planned_total: int, chunk_count: int) -> int:
    if chunk_count <= 0:
        return 0
    return math.ceil(planned_total / chunk_count)
