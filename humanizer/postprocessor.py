import re


# Applied in order; longer phrases come before their prefixes
REPLACEMENTS = [
    ("it is important to note that", "note that"),
    ("it is important to note", "importantly"),
    ("it is worth noting that", "notably"),
    ("in conclusion", "finally"),
    ("to summarize", "in short"),
    ("furthermore", "also"),
    ("moreover", "beyond that"),
    ("in addition", "plus"),
    ("due to the fact that", "because"),
    ("in the event that", "if"),
]

_COMPILED = [
    (re.compile(rf"\b{re.escape(formal)}\b", re.IGNORECASE), casual)
    for formal, casual in REPLACEMENTS
]
_WHITESPACE = re.compile(r"\s+")


def process(text):
    """
    Clean up model output.

    Swaps stock formal phrases for casual ones (case-insensitive, whole
    phrases only), collapses runs of whitespace and trims the result.
    Non-string input is returned as-is.

    Example:
        >>> process("It is important to note that  sales grew. ")
        'note that sales grew.'
    """
    if not isinstance(text, str):
        return text

    result = text
    for pattern, casual in _COMPILED:
        result = pattern.sub(casual, result)

    return _WHITESPACE.sub(" ", result).strip()
