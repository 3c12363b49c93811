import logging
import re

from humanizer.detectors import KINDS, PatternDetector


logger = logging.getLogger(__name__)

# Matches tokens produced by PIIMasker, e.g. [EMAIL_0], [NAME_12]
TOKEN_PATTERN = re.compile(r"\[(?:EMAIL|PHONE|NAME)_(?P<seq>\d+)\]")


class PIIMasker:
    """
    Reversibly replaces PII-looking spans with opaque tokens.

    Tokens look like [KIND_<n>] where n increments across all passes of one
    masking call, starting past any token already present in the
    input. The token -> original table is cleared at the start of every
    mask() call, so nothing from a previous rewrite can leak into unmask().

    Example:
        >>> masker = PIIMasker()
        >>> masker.mask("Mail jane@example.com today")
        'Mail [EMAIL_0] today'
        >>> masker.unmask("I mailed [EMAIL_0].")
        'I mailed jane@example.com.'
    """

    def __init__(self, detector=None):
        """
        Initialize the masker.

        Args:
            detector: Object with find(kind, text) -> [(start, end), ...]
                (default: PatternDetector)
        """
        self.detector = detector or PatternDetector()
        self._table = {}
        self._counter = 0

    def reset(self):
        """Discard all recorded tokens and restart numbering."""
        self._table.clear()
        self._counter = 0

    def mask(self, text, enabled=True):
        """
        Mask PII in text.

        Passes run in a fixed order (emails, phones, names), each scanning the
        output of the previous one. Spans overlapping an existing token are
        never replaced.

        Args:
            text (str): Input text
            enabled (bool): When False the text is returned unchanged and the
                table is left alone

        Returns:
            str: Text with PII replaced by tokens
        """
        if not enabled:
            return text

        self.reset()
        # Literal tokens already in the input must never be reissued
        self._counter = max((int(m.group("seq")) + 1 for m in TOKEN_PATTERN.finditer(text)), default=0)

        masked = text
        for kind in KINDS:
            masked = self._mask_kind(kind, masked)

        logger.debug("Masked %d span(s)", len(self._table))
        return masked

    def unmask(self, text):
        """
        Replace every recorded token in text with its original value.

        Tokens the model dropped are skipped silently.

        Args:
            text (str): Text containing tokens

        Returns:
            str: Text with originals restored
        """
        if not text or not isinstance(text, str):
            return text

        result = text
        for token, original in self._table.items():
            result = result.replace(token, original)
        return result

    @property
    def mappings(self):
        """Copy of the token -> original table."""
        return dict(self._table)

    @property
    def size(self):
        return len(self._table)

    def _mask_kind(self, kind, text):
        protected = [m.span() for m in TOKEN_PATTERN.finditer(text)]
        spans = [
            (start, end) for start, end in self.detector.find(kind, text)
            if not any(start < p_end and end > p_start for p_start, p_end in protected)
        ]
        if not spans:
            return text

        # Number tokens left to right, then splice right to left so offsets stay valid
        tokens = [self._create_token(text[start:end], kind) for start, end in spans]
        result = text
        for (start, end), token in reversed(list(zip(spans, tokens))):
            result = result[:start] + token + result[end:]
        return result

    def _create_token(self, original, kind):
        token = f"[{kind}_{self._counter}]"
        self._counter += 1
        self._table[token] = original
        return token
