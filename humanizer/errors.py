"""
Error taxonomy for a rewrite.

Every failure is terminal for the current rewrite and is rendered to the user
as a single status message (``str(error)``).
"""


class RewriteError(Exception):
    """Base class for all rewrite failures."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(RewriteError):
    """Input is empty, not text, or too long. No model call is attempted."""


class PipelineBusyError(RewriteError):
    """A rewrite is already in flight on this pipeline."""

    def __init__(self, message="A rewrite is already in progress"):
        super().__init__(message)


class TransportError(RewriteError):
    """The local model server could not be reached."""

    def __init__(self, base_url):
        super().__init__(
            f"Cannot connect to the local model server. Ensure it's running on {base_url}."
        )
        self.base_url = base_url


class ModelTimeoutError(RewriteError):
    """The model call exceeded its category-derived time budget."""

    def __init__(self, message="Request timeout. Text too long or model server slow. Try shorter text."):
        super().__init__(message)


class UpstreamError(RewriteError):
    """The model server answered with a non-success status."""

    def __init__(self, status_code, detail):
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class EmptyResponseError(RewriteError):
    """The model returned no usable content."""

    def __init__(self, message="Empty response from LLM"):
        super().__init__(message)
