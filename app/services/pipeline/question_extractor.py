"""
Turns free-form LLM output into a bounded list of speakable interview questions.

Models answer in many shapes: a clean JSON array, an array buried in prose or
code fences, numbered or bulleted lists, or plain sentences mixed with
reasoning text. Extraction runs an ordered tuple of independent strategies and
the first one that yields at least one valid question wins. Every candidate
passes the same validity filter (length, a question mark, no denylisted
substring) before the list is truncated to the requested count.

Nothing in this module raises on malformed model output; an empty list means
the caller should fall back to templated questions.
"""
import json
import logging
import re
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_QUESTION_COUNT = 5
MIN_QUESTION_LENGTH = 10

DEFAULT_DENYLIST = frozenset({
    "<think>",
    "</think>",
    "okay",
    "let me",
    "first",
    "second",
    "third",
    "behavioral questions",
    "technical questions",
    "example response",
    "generate",
    "instructions",
})

Strategy = Callable[[str], List[Any]]

# Compile regex patterns once at module level
_CODE_FENCE_PATTERN = re.compile(r'```(?:json)?')
_ARRAY_OPEN_PATTERN = re.compile(r'\[\s*["\']')
_ARRAY_CLOSE_PATTERN = re.compile(r'["\']\s*,?\s*\]')
_WHITESPACE_PATTERN = re.compile(r'\s+')

_QUOTED_PATTERN = re.compile(r'["“][^"“”\n]+?\?\s*["”]|(?<!\w)\'[^\'\n]+?\?\'(?!\w)')
_NUMBERED_PATTERN = re.compile(r'^[ \t]*\d+\.[ \t]+.+\?[ \t]*$', re.MULTILINE)
_DASH_PATTERN = re.compile(r'^[ \t]*-[ \t]+.+\?[ \t]*$', re.MULTILINE)
_ASTERISK_PATTERN = re.compile(r'^[ \t]*\*+[ \t]+.+\?[ \t]*$', re.MULTILINE)
_SENTENCE_PATTERN = re.compile(r'[A-Z][^.!?\n]*\?')

_LEADING_MARKUP = re.compile(r'^[\d.\-*"\'“”‘’\s]+')
_TRAILING_QUOTES = re.compile(r'["\'“”‘’\s]+$')
_LIST_MARKER = re.compile(r'^(?:\d+[.)]|[-*])\s+')


def coerce_count(value: Any, default: int = DEFAULT_QUESTION_COUNT) -> int:
    """
    Coerce a caller-supplied question count to a positive integer.

    Accepts ints, integral floats and numeric strings. Anything else,
    including booleans and values <= 0, becomes `default`.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    if isinstance(value, int) and value > 0:
        return value
    return default


def normalize_denylist(entries: Iterable[str]) -> frozenset:
    """Lowercase and dedupe denylist entries, dropping blanks."""
    return frozenset(entry.strip().lower() for entry in entries if entry and entry.strip())


def is_denied(candidate: str, denylist: Iterable[str] = DEFAULT_DENYLIST) -> bool:
    lowered = candidate.lower()
    return any(banned in lowered for banned in denylist)


def is_valid_question(candidate: Any, denylist: Iterable[str] = DEFAULT_DENYLIST) -> bool:
    """A candidate is kept when it is a non-empty string over 10 chars with a '?' and no denylisted text."""
    if not isinstance(candidate, str):
        return False
    stripped = candidate.strip()
    if len(stripped) <= MIN_QUESTION_LENGTH:
        return False
    if "?" not in stripped:
        return False
    return not is_denied(stripped, denylist)


def normalize_question(candidate: str) -> str:
    """Collapse a candidate onto a single line and drop a leading list marker."""
    text = _WHITESPACE_PATTERN.sub(' ', candidate).strip()
    return _LIST_MARKER.sub('', text)


def filter_questions(candidates: Sequence[Any], denylist: Iterable[str] = DEFAULT_DENYLIST) -> List[str]:
    normalized = (normalize_question(c) if isinstance(c, str) else c for c in candidates)
    return [candidate for candidate in normalized if is_valid_question(candidate, denylist)]


def clean_scraped_question(text: str) -> str:
    """Strip leading list markup and trailing quotes from a scraped match."""
    text = _LEADING_MARKUP.sub('', text)
    text = _TRAILING_QUOTES.sub('', text)
    return text.strip()


def _loads_list(text: str) -> Optional[List[Any]]:
    try:
        decoded = json.loads(text)
    except (ValueError, RecursionError):
        # Deeply nested arrays exhaust the decoder's recursion limit
        return None
    return decoded if isinstance(decoded, list) else None


# --- Strategies ---

def parse_json_array(text: str) -> List[Any]:
    """Strategy 1: the whole reply is a JSON array (markdown fences tolerated)."""
    stripped = _CODE_FENCE_PATTERN.sub('', text).strip()
    return _loads_list(stripped) or []


def _find_embedded_array(text: str) -> Optional[str]:
    """
    Return the span from the first `["` (or `['`) to the nearest quote-then-`]` after it.

    If the first opening has no closing after it, no later opening has one
    either, so the text is scanned once.
    """
    opening = _ARRAY_OPEN_PATTERN.search(text)
    if not opening:
        return None
    closing = _ARRAY_CLOSE_PATTERN.search(text, opening.end())
    if not closing:
        return None
    return text[opening.start():closing.end()]


def extract_embedded_array(text: str) -> List[Any]:
    """Strategy 2: the first bracketed list of quoted strings inside surrounding prose."""
    fragment = _find_embedded_array(text)
    if fragment is None:
        return []
    parsed = _loads_list(fragment)
    if parsed is None:
        # Raw newlines inside strings are invalid JSON; collapse and retry once
        parsed = _loads_list(_WHITESPACE_PATTERN.sub(' ', fragment))
    return parsed or []


def _pattern_scraper(pattern: re.Pattern, name: str) -> Strategy:
    def scrape(text: str) -> List[str]:
        text = text.replace('\r\n', '\n')
        cleaned = (clean_scraped_question(match.group(0)) for match in pattern.finditer(text))
        return [question for question in cleaned if len(question) > MIN_QUESTION_LENGTH]

    scrape.__name__ = name
    scrape.__doc__ = f"Scrape questions matching {pattern.pattern!r}."
    return scrape


scrape_quoted_questions = _pattern_scraper(_QUOTED_PATTERN, "scrape_quoted_questions")
scrape_numbered_questions = _pattern_scraper(_NUMBERED_PATTERN, "scrape_numbered_questions")
scrape_dash_questions = _pattern_scraper(_DASH_PATTERN, "scrape_dash_questions")
scrape_asterisk_questions = _pattern_scraper(_ASTERISK_PATTERN, "scrape_asterisk_questions")
scrape_sentence_questions = _pattern_scraper(_SENTENCE_PATTERN, "scrape_sentence_questions")

EXTRACTION_STRATEGIES: Tuple[Strategy, ...] = (
    parse_json_array,
    extract_embedded_array,
    scrape_quoted_questions,
    scrape_numbered_questions,
    scrape_dash_questions,
    scrape_asterisk_questions,
    scrape_sentence_questions,
)

# A parsed array is final: its candidates are filtered but never supplemented by scraping
STRUCTURED_STRATEGIES = frozenset({parse_json_array, extract_embedded_array})


def extract_questions(
    raw_text: Any,
    requested_count: Any = DEFAULT_QUESTION_COUNT,
    denylist: Iterable[str] = DEFAULT_DENYLIST,
    strategies: Sequence[Strategy] = EXTRACTION_STRATEGIES,
) -> List[str]:
    """
    Extract up to `requested_count` valid questions from raw model output.

    Strategies are tried in order; the first whose candidates survive the
    validity filter wins. A JSON array that parses ends the search even when
    none of its items survive. Filtering happens before truncation.

    Args:
        raw_text: The model's full reply.
        requested_count: Maximum number of questions; invalid values become 5.
        denylist: Lowercase substrings that disqualify a candidate.
        strategies: Ordered extraction strategies.

    Returns:
        The extracted questions in order of appearance, or [] when nothing usable was found.
    """
    count = coerce_count(requested_count)
    if not isinstance(raw_text, str) or not raw_text.strip():
        return []

    denylist = frozenset(denylist)
    for strategy in strategies:
        candidates = strategy(raw_text)
        if not candidates:
            continue
        questions = filter_questions(candidates, denylist)
        if questions or strategy in STRUCTURED_STRATEGIES:
            logger.debug(
                f"{strategy.__name__} kept {len(questions)}/{len(candidates)} candidate(s)"
            )
            return questions[:count]
        logger.debug(f"{strategy.__name__} produced {len(candidates)} candidate(s), none valid")

    return []
