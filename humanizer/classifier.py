"""
Text size classification.

Buckets input text by word count and derives the time and token budgets used
for the model call.
"""

import math
from enum import Enum

from humanizer.config import (
    LENGTH_THRESHOLDS,
    MAX_INPUT_WORDS,
    MAX_OUTPUT_TOKENS,
    TIMEOUTS,
    TOKEN_MULTIPLIER,
)


class SizeCategory(str, Enum):
    SHORT = "SHORT"
    MEDIUM = "MEDIUM"
    LONG = "LONG"
    VERY_LONG = "VERY_LONG"


def word_count(text):
    """
    Count words in text, splitting on runs of whitespace.

    Args:
        text (str): Input text

    Returns:
        int: Number of non-empty tokens (0 for empty or non-string input)
    """
    if not text or not isinstance(text, str):
        return 0
    return len(text.split())


def categorize(text):
    """
    Get the size category of text based on its word count.

    Args:
        text (str): Input text

    Returns:
        SizeCategory: SHORT (< 100 words), MEDIUM (< 500), LONG (< 2000)
            or VERY_LONG

    Example:
        >>> categorize("Just a few words")
        <SizeCategory.SHORT: 'SHORT'>
    """
    count = word_count(text)

    if count < LENGTH_THRESHOLDS["SHORT"]:
        return SizeCategory.SHORT
    if count < LENGTH_THRESHOLDS["MEDIUM"]:
        return SizeCategory.MEDIUM
    if count < LENGTH_THRESHOLDS["LONG"]:
        return SizeCategory.LONG
    return SizeCategory.VERY_LONG


def timeout_for(category):
    """
    Get the model call timeout for a size category.

    Unknown categories get the longest allowance (the VERY_LONG timeout).

    Args:
        category (SizeCategory | str): Size category

    Returns:
        int: Timeout in seconds
    """
    return TIMEOUTS.get(category, TIMEOUTS["VERY_LONG"])


def max_output_tokens(input_char_length):
    """
    Calculate the generation budget for an input of the given length.

    Args:
        input_char_length (int): Length of the input in characters

    Returns:
        int: ceil(length * 1.3), capped at 2500

    Example:
        >>> max_output_tokens(1000)
        1300
        >>> max_output_tokens(3000)
        2500
    """
    calculated = math.ceil(input_char_length * TOKEN_MULTIPLIER)
    return min(calculated, MAX_OUTPUT_TOKENS)


def validate(text):
    """
    Validate input text before any processing.

    Args:
        text (str): Input text

    Returns:
        tuple: (valid, error)
            - valid: True when the text can be rewritten
            - error: Human-readable reason when invalid, otherwise None
    """
    if not text or not isinstance(text, str):
        return False, "Input must be valid text"

    if not text.strip():
        return False, "Cannot process empty text"

    if word_count(text) > MAX_INPUT_WORDS:
        return False, f"Text too long. Max {MAX_INPUT_WORDS} words"

    return True, None


def describe(text):
    """Word and character count summary, e.g. "12 words • 80 chars"."""
    text = text if isinstance(text, str) else ""
    return f"{word_count(text)} words • {len(text)} chars"
