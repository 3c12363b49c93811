"""
PII detectors used by PIIMasker.

A detector answers one question: where in this text are the spans of a given
kind (EMAIL, PHONE or NAME)? PIIMasker decides the order of the passes and
does the substitution, so detectors can be swapped without changing how
masking behaves.
"""

import re

from presidio_analyzer import AnalyzerEngine


KINDS = ("EMAIL", "PHONE", "NAME")

# Capitalized sentence starters never treated as the first word of a name
SKIP_WORDS = frozenset([
    "The", "This", "That", "These", "Those",
    "When", "Where", "What", "Who", "Why", "How",
])


class PatternDetector:
    """
    Regex heuristic detector (the default).

    Detects:
    - Email addresses: local part of word characters, dots and hyphens,
      '@', domain, '.', top-level segment
    - Phone numbers: optional +1 country code, optional parenthesized area
      code, 3-3-4 digits with space, dot or hyphen separators
    - Names: two or three consecutive capitalized words, unless the first
      word is a common sentence starter (see SKIP_WORDS)
    """

    PATTERNS = {
        "EMAIL": re.compile(r"[\w.-]+@[\w.-]+\.\w+"),
        "PHONE": re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),
        "NAME": re.compile(r"(?<!\S)[A-Z][a-z]+(?:\s[A-Z][a-z]+){1,2}(?=\s|[,.!?]|$)"),
    }

    def __init__(self, skip_words=SKIP_WORDS):
        self.skip_words = frozenset(skip_words)

    def find(self, kind, text):
        """
        Find spans of the given kind.

        Args:
            kind (str): One of EMAIL, PHONE, NAME
            text (str): Text to scan

        Returns:
            list: Non-overlapping (start, end) tuples in text order
        """
        spans = []
        for match in self.PATTERNS[kind].finditer(text):
            if kind == "NAME" and match.group().split()[0] in self.skip_words:
                continue
            spans.append(match.span())
        return spans


class PresidioDetector:
    """
    NER-backed detector using presidio's AnalyzerEngine.

    Catches names the capitalization heuristic misses, at the cost of loading
    a spaCy model. The engine is created on first use unless one is passed in.
    """

    ENTITIES = {
        "EMAIL": "EMAIL_ADDRESS",
        "PHONE": "PHONE_NUMBER",
        "NAME": "PERSON",
    }

    def __init__(self, analyzer=None, language="en", score_threshold=0.35):
        """
        Initialize the detector.

        Args:
            analyzer (AnalyzerEngine): Engine to use (default: built lazily)
            language (str): Language code passed to the analyzer
            score_threshold (float): Minimum confidence for a result to count
        """
        self._analyzer = analyzer
        self.language = language
        self.score_threshold = score_threshold

    @property
    def analyzer(self):
        if self._analyzer is None:
            self._analyzer = AnalyzerEngine()
        return self._analyzer

    def find(self, kind, text):
        if not text:
            return []

        results = self.analyzer.analyze(
            text=text,
            entities=[self.ENTITIES[kind]],
            language=self.language,
            score_threshold=self.score_threshold,
        )

        # Presidio may report overlapping candidates; keep the earliest, then longest
        ordered = sorted(results, key=lambda r: (r.start, -(r.end - r.start)))
        spans = []
        last_end = -1
        for result in ordered:
            if result.start < last_end:
                continue
            spans.append((result.start, result.end))
            last_end = result.end
        return spans
