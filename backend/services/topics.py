import re

MAX_TOPICS = 8
MAX_HEADINGS = 10

# Canonical section names searched for anywhere in the text (case-insensitive).
COMMON_TOPICS = [
    "introduction", "conclusion", "methodology", "results", "discussion",
    "background", "literature review", "analysis", "implementation", "evaluation",
    "recommendations", "future work", "summary", "abstract", "references",
]

# A heading is a whole line: capital letter, then 3-30 letters or blanks.
_HEADING_LINE = re.compile(r"[A-Z][A-Za-z \t]{3,30}")


def _capitalise(term: str) -> str:
    return term[:1].upper() + term[1:]


def find_headings(text: str) -> list[str]:
    return [line for line in text.splitlines() if _HEADING_LINE.fullmatch(line)]


def extract_topics(text: str) -> list[str]:
    """
    Returns up to MAX_TOPICS labels for the document.

    Vocabulary matches come first, in vocabulary order, followed by the first
    MAX_HEADINGS heading-like lines. Duplicates are collapsed and the combined
    list is cut to MAX_TOPICS without re-ranking.
    """
    topics: dict[str, None] = {}

    text_lower = text.lower()
    for term in COMMON_TOPICS:
        if term in text_lower:
            topics[_capitalise(term)] = None

    for heading in find_headings(text)[:MAX_HEADINGS]:
        if len(heading) < 50:
            topics[heading.strip()] = None

    return list(topics)[:MAX_TOPICS]
