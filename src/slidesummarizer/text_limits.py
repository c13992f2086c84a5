"""
Text limit utilities

Pure functions that cut a string down to a character limit at the safest
boundary available: after a sentence, then at a word, then a hard cut.
"""

import math
import numbers
import re
from typing import Tuple

from .exceptions import InvalidArgumentError

SENTENCE_END = re.compile(r"[.!?]")

# a sentence cut must leave at least this many characters (or 40% of the limit)
MIN_SENTENCE_LENGTH = 20


def validate_limit(limit) -> int:
    """Reject limits that are not non-negative whole numbers"""
    if isinstance(limit, bool) or not isinstance(limit, numbers.Real):
        raise InvalidArgumentError(f"limit must be a number, got {type(limit).__name__}")
    if not math.isfinite(limit):
        raise InvalidArgumentError(f"limit must be finite, got {limit}")
    if limit < 0 or int(limit) != limit:
        raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit}")
    return int(limit)


def validate_count(count) -> int:
    """Reject slide counts that are not non-negative whole numbers"""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise InvalidArgumentError(f"slide count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"slide count must not be negative, got {count}")
    return int(count)


def distribute_overflow(text: str, limit: int) -> Tuple[str, str]:
    """
    Split text into the part that fits the limit and the part that does not.

    Returns ``(keep, overflow)``. ``keep`` is never longer than ``limit``.
    The cut goes after the last sentence end in the window, or at the last
    space, as long as that point is past the minimum sentence length;
    otherwise the text is cut at exactly ``limit`` characters.
    """
    limit = validate_limit(limit)
    trimmed = text.strip()
    if len(trimmed) <= limit:
        return trimmed, ""

    window = trimmed[:limit]
    min_length = max(MIN_SENTENCE_LENGTH, math.floor(limit * 0.4))

    punctuation_index = -1
    for match in SENTENCE_END.finditer(window):
        punctuation_index = match.start()

    if punctuation_index >= min_length:
        boundary = punctuation_index + 1
        keep = window[:boundary].strip()
        if keep:
            return keep, trimmed[boundary:].strip()

    last_space = window.rfind(" ")
    boundary = last_space if last_space >= min_length else limit
    return window[:boundary].strip(), trimmed[boundary:].strip()


def clamp_to_limit(text: str, limit: int) -> str:
    """Trim text and cut it to the limit at a sentence or word boundary"""
    limit = validate_limit(limit)
    value = text.strip()
    if len(value) <= limit:
        return value
    # a single character is the smallest output we ever produce
    if limit <= 1:
        return value[:1]
    keep, _ = distribute_overflow(value, limit)
    return keep
