"""
Rewrite orchestration.

RewritePipeline takes one RewriteRequest through validation, optional
masking, prompt building, the model call, post-processing and optional
unmasking, and hands back a RewriteResult. It knows nothing about how the
request was collected or how the result is shown.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from humanizer import classifier, postprocessor, prompt_builder
from humanizer.config import STORAGE_KEYS
from humanizer.errors import ModelTimeoutError, PipelineBusyError, RewriteError, ValidationError
from humanizer.masker import PIIMasker


logger = logging.getLogger(__name__)


class PipelineState(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    MASKING = "masking"
    PROMPT_BUILDING = "prompt_building"
    AWAITING_MODEL = "awaiting_model"
    POST_PROCESSING = "post_processing"
    UNMASKING = "unmasking"
    DONE = "done"
    ERROR = "error"


@dataclass(frozen=True)
class RewriteRequest:
    """Everything needed for one rewrite."""

    text: str
    perspective: str = "maintain"
    tone: str = "neutral"
    style: str = "conversational"
    mask_before: bool = False
    mask_after: bool = False

    @classmethod
    def from_preferences(cls, preferences):
        """
        Build a request from saved user preferences.

        Args:
            preferences (dict): Mapping keyed by the names in
                config.STORAGE_KEYS (inputText, perspective, tone, style,
                maskPII, maskBefore). Missing entries take the defaults.

        Returns:
            RewriteRequest: The request
        """
        defaults = cls(text="")
        return cls(
            text=preferences.get(STORAGE_KEYS["INPUT_TEXT"], ""),
            perspective=preferences.get(STORAGE_KEYS["PERSPECTIVE"]) or defaults.perspective,
            tone=preferences.get(STORAGE_KEYS["TONE"]) or defaults.tone,
            style=preferences.get(STORAGE_KEYS["STYLE"]) or defaults.style,
            mask_before=bool(preferences.get(STORAGE_KEYS["MASK_BEFORE"], False)),
            mask_after=bool(preferences.get(STORAGE_KEYS["MASK_PII"], False)),
        )


@dataclass
class RewriteResult:
    """Outcome of one pipeline run: final text on success, an error otherwise."""

    text: str = None
    error: RewriteError = None
    category: classifier.SizeCategory = None
    masked_text: str = None

    @property
    def ok(self):
        return self.error is None

    @property
    def status_message(self):
        if self.ok:
            return "Text humanized successfully!"
        return f"Error: {self.error}"


class RewritePipeline:
    """
    Runs one rewrite at a time against an injected model client.

    The model client only needs an async
    ``complete(system_prompt, user_prompt, max_tokens, timeout) -> str``.
    A second run() while one is awaiting the model is rejected, not queued.

    Example:
        >>> pipeline = RewritePipeline(LLMClient())
        >>> result = await pipeline.run(RewriteRequest(text="Call Jane Doe at 555-123-4567",
        ...                                            mask_before=True, mask_after=True))
        >>> result.status_message
        'Text humanized successfully!'
    """

    def __init__(self, model_client, masker=None):
        self.model_client = model_client
        self.masker = masker or PIIMasker()
        self.state = PipelineState.IDLE
        self._in_flight = False

    @property
    def in_flight(self):
        return self._in_flight

    async def run(self, request):
        """
        Rewrite the request's text.

        Never raises for rewrite failures: every error is returned inside the
        RewriteResult so the caller can show a single status message.

        Args:
            request (RewriteRequest): The rewrite parameters

        Returns:
            RewriteResult: Final text, or the error that ended the run
        """
        if self._in_flight:
            logger.warning("Rejected rewrite: another rewrite is in flight")
            return RewriteResult(error=PipelineBusyError())

        self._in_flight = True
        try:
            return await self._run(request)
        except RewriteError as e:
            logger.info("Rewrite failed in state %s: %s", self.state.value, e)
            self.state = PipelineState.ERROR
            return RewriteResult(error=e)
        except Exception as e:
            logger.exception("Unexpected error during rewrite")
            self.state = PipelineState.ERROR
            return RewriteResult(error=RewriteError(str(e) or type(e).__name__))
        finally:
            self._in_flight = False

    async def _run(self, request):
        self.state = PipelineState.VALIDATING
        valid, error = classifier.validate(request.text)
        if not valid:
            raise ValidationError(error)

        # Step 1: Mask PII before the text leaves the process
        if request.mask_before:
            self.state = PipelineState.MASKING
            text = self.masker.mask(request.text, True)
        else:
            self.masker.reset()
            text = request.text

        # Step 2: Build prompt; the category always comes from the unmasked text
        self.state = PipelineState.PROMPT_BUILDING
        category = classifier.categorize(request.text)
        prompt = prompt_builder.build(
            text, request.perspective, request.tone, request.style, category
        )
        timeout = classifier.timeout_for(category)
        max_tokens = classifier.max_output_tokens(len(prompt.user))

        # Step 3: Call the model
        self.state = PipelineState.AWAITING_MODEL
        logger.info(
            "Rewriting %s text (%d words, timeout=%ss, max_tokens=%d, masked=%s)",
            category.value, classifier.word_count(request.text), timeout, max_tokens,
            request.mask_before,
        )
        try:
            raw = await asyncio.wait_for(
                self.model_client.complete(
                    prompt.system, prompt.user, max_tokens=max_tokens, timeout=timeout
                ),
                timeout,
            )
        except asyncio.TimeoutError as e:
            raise ModelTimeoutError() from e

        # Step 4: Post-process
        self.state = PipelineState.POST_PROCESSING
        output = postprocessor.process(raw)

        # Step 5: Restore PII (masked tokens stay visible if the user opted out)
        if request.mask_before and request.mask_after:
            self.state = PipelineState.UNMASKING
            output = self.masker.unmask(output)

        self.state = PipelineState.DONE
        return RewriteResult(
            text=output,
            category=category,
            masked_text=text if request.mask_before else None,
        )
