import logging

import openai
from openai import AsyncOpenAI

from humanizer.config import DEFAULT_API_KEY, DEFAULT_BASE_URL, DEFAULT_MODEL, LLM_PARAMS
from humanizer.errors import EmptyResponseError, ModelTimeoutError, TransportError, UpstreamError


logger = logging.getLogger(__name__)


class LLMClient:
    """
    A thin wrapper around a local OpenAI-compatible chat-completion server.

    Sends one non-streaming completion per call and translates transport
    failures into RewriteError subclasses. Retries are disabled: a failed
    call is reported, never repeated.
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, model=DEFAULT_MODEL, api_key=DEFAULT_API_KEY):
        """
        Initialize the LLM client.

        Args:
            base_url (str): Server URL including the /v1 prefix
                (default: "http://localhost:1234/v1")
            model (str): Model identifier loaded on the server
            api_key (str): API key (ignored by most local servers)
        """
        self.client = AsyncOpenAI(base_url=base_url, api_key=api_key, max_retries=0)
        self.base_url = base_url
        self.model = model

    async def complete(self, system_prompt, user_prompt, max_tokens, timeout=None):
        """
        Send prompts to the model server and return the generated text.

        Args:
            system_prompt (str): System message that sets behavior
            user_prompt (str): User message with the text to rewrite
            max_tokens (int): Generation budget
            timeout (float): Seconds before the request is abandoned

        Returns:
            str: The completion text, stripped of surrounding whitespace

        Raises:
            ModelTimeoutError: The server did not answer in time
            TransportError: The server could not be reached
            UpstreamError: The server answered with a non-success status
            EmptyResponseError: The response carried no content

        Example:
            >>> client = LLMClient()
            >>> await client.complete(
            ...     system_prompt="You are a clarity expert.",
            ...     user_prompt="Original text:\\nhello",
            ...     max_tokens=64,
            ...     timeout=30,
            ... )
            'Hello!'
        """
        logger.debug(
            "Requesting completion from %s (model=%s, max_tokens=%d, timeout=%s)",
            self.base_url, self.model, max_tokens, timeout,
        )

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=LLM_PARAMS["temperature"],
                max_tokens=max_tokens,
                top_p=LLM_PARAMS["top_p"],
                frequency_penalty=LLM_PARAMS["frequency_penalty"],
                presence_penalty=LLM_PARAMS["presence_penalty"],
                stream=False,
                # Not part of the OpenAI schema; local servers read it from the body
                extra_body={"repeat_penalty": LLM_PARAMS["repeat_penalty"]},
                timeout=timeout,
            )

        # APITimeoutError subclasses APIConnectionError, so it goes first
        except openai.APITimeoutError as e:
            raise ModelTimeoutError() from e
        except openai.APIConnectionError as e:
            raise TransportError(self.base_url) from e
        except openai.APIStatusError as e:
            detail = e.response.text or e.response.reason_phrase
            raise UpstreamError(e.status_code, detail) from e

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None

        if not content or not content.strip():
            raise EmptyResponseError()

        return content.strip()

    async def close(self):
        await self.client.close()
