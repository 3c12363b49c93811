import asyncio

import pandas as pd

from humanizer import classifier
from humanizer.config import Settings
from humanizer.llm_client import LLMClient
from humanizer.masker import PIIMasker
from humanizer.pipeline import RewritePipeline, RewriteRequest


class RewriteProcessor:
    """
    Synchronous entry point to the rewrite pipeline.

    Handles:
    1. Building RewriteRequests from plain arguments or saved preferences
    2. Running them through RewritePipeline on a private event loop
    3. Flattening each RewriteResult into a plain dict
    4. Batch rewriting rows of a CSV file

    Callers (a UI, scripts, batch jobs) never see exceptions for rewrite
    failures; they get an 'error' string instead.
    """

    def __init__(self, settings=None, detector=None, model_client=None):
        """
        Initialize the processor.

        Args:
            settings (Settings): Model server settings (default: from env/.env)
            detector: PII detector for masking (default: PatternDetector)
            model_client: Async model client (default: LLMClient from settings)
        """
        self.settings = settings or Settings.from_env()
        self.llm_client = model_client or LLMClient(
            base_url=self.settings.base_url,
            model=self.settings.model,
            api_key=self.settings.api_key,
        )
        self.masker = PIIMasker(detector)
        self.pipeline = RewritePipeline(self.llm_client, self.masker)
        self._loop = asyncio.new_event_loop()

    def process_request(self, text, perspective="maintain", tone="neutral",
                        style="conversational", mask_before=False, mask_after=False):
        """
        Rewrite a single piece of text.

        Args:
            text (str): Text to rewrite
            perspective (str): "maintain" or a perspective like "first-person"
            tone (str): Tone preference
            style (str): Style preference
            mask_before (bool): Mask PII before sending text to the model
            mask_after (bool): Restore masked PII in the model's output

        Returns:
            dict: Result containing:
                - original_text: Text as given
                - masked_text: Text sent to the model (None when not masked)
                - mappings: Token -> original PII for this request
                - category: Size category name (None on early failure)
                - final_response: Rewritten text (None on failure)
                - status: Human-readable status message
                - error: Error message if processing failed (None on success)

        Example:
            >>> processor = RewriteProcessor()
            >>> result = processor.process_request(
            ...     "Email john@example.com about the launch.",
            ...     mask_before=True, mask_after=True,
            ... )
            >>> print(result['final_response'])
        """
        request = RewriteRequest(
            text=text,
            perspective=perspective,
            tone=tone,
            style=style,
            mask_before=mask_before,
            mask_after=mask_after,
        )
        return self.process(request)

    def process_preferences(self, preferences):
        """Rewrite using a saved-preferences mapping (see RewriteRequest.from_preferences)."""
        return self.process(RewriteRequest.from_preferences(preferences))

    def process(self, request):
        """Run one RewriteRequest and flatten the outcome into a dict."""
        result = self._loop.run_until_complete(self.pipeline.run(request))

        return {
            'original_text': request.text,
            'masked_text': result.masked_text,
            'mappings': self.masker.mappings if result.masked_text is not None else {},
            'category': result.category.value if result.category else None,
            'final_response': result.text,
            'status': result.status_message,
            'error': None if result.ok else str(result.error),
        }

    def process_csv(self, csv_path):
        """
        Rewrite every row of a CSV file.

        CSV Format:
            text,perspective,tone,style,mask_before,mask_after
            "Email john@example.com today",maintain,friendly,casual,true,true

        Only the 'text' column is required; missing option columns take the
        same defaults as process_request().

        Args:
            csv_path (str): Path to CSV file containing texts

        Returns:
            list: List of result dictionaries (one per row)

        Example:
            >>> processor = RewriteProcessor()
            >>> results = processor.process_csv("data/texts.csv")
            >>> print(f"Rewrote {len(results)} texts")
        """
        try:
            # Load CSV file
            df = pd.read_csv(csv_path)

            # Verify required columns exist
            if 'text' not in df.columns:
                raise ValueError(
                    f"CSV must contain a 'text' column. "
                    f"Found: {list(df.columns)}"
                )

            results = []

            # Process each row, one at a time
            for idx, row in df.iterrows():
                request_num = idx + 1

                print(f"\n{'='*80}")
                print(f"REQUEST {request_num}/{len(df)}")
                print(f"{'='*80}")

                result = self.process(self._row_to_request(row))
                results.append(result)

                # Display results
                if result['error']:
                    print(f"\n[ERROR]: {result['error']}")
                else:
                    self._display_result(result)

            # Summary
            print(f"\n{'='*80}")
            print(f"SUMMARY")
            print(f"{'='*80}")
            successful = sum(1 for r in results if r['error'] is None)
            failed = len(results) - successful
            print(f"Total requests: {len(results)}")
            print(f"Successful: {successful}")
            print(f"Failed: {failed}")

            return results

        except Exception as e:
            print(f"\n[ERROR] Failed to process CSV: {str(e)}")
            raise

    def save_results(self, results, csv_path):
        """
        Write results from process_csv() to a CSV file.

        The 'mappings' column is dropped so restored PII is not written to
        disk next to its masked form.
        """
        df = pd.DataFrame(results)
        df = df.drop(columns=['mappings'], errors='ignore')
        df.to_csv(csv_path, index=False)

    def close(self):
        """Close the model client and the private event loop."""
        if self._loop.is_closed():
            return
        close = getattr(self.llm_client, "close", None)
        if close is not None:
            self._loop.run_until_complete(close())
        self._loop.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _row_to_request(self, row):
        text = str(row['text']) if pd.notna(row['text']) else ""
        defaults = RewriteRequest(text=text)

        def option(name):
            value = row.get(name)
            if value is None or pd.isna(value) or str(value).strip() == "":
                return getattr(defaults, name)
            return str(value)

        return RewriteRequest(
            text=text,
            perspective=option('perspective'),
            tone=option('tone'),
            style=option('style'),
            mask_before=_as_bool(row.get('mask_before')),
            mask_after=_as_bool(row.get('mask_after')),
        )

    def _display_result(self, result):
        """
        Display formatted output for a single request result.

        Args:
            result (dict): Result dictionary from process()
        """
        original = result['original_text']
        print(f"\n[ORIGINAL TEXT] ({classifier.describe(original)}, {result['category']}):")
        print(f"{original[:100]}{'...' if len(original) > 100 else ''}")

        if result['mappings']:
            print(f"\n[PII MASKED]:")
            for token, value in result['mappings'].items():
                print(f"  {token} -> {value}")

            masked = result['masked_text']
            print(f"\n[MASKED TEXT - sent to LLM]:")
            print(f"{masked[:100]}{'...' if len(masked) > 100 else ''}")
        else:
            print(f"\n[INFO] No PII masked")

        print(f"\n[FINAL RESPONSE] ({classifier.describe(result['final_response'])}):")
        print(f"{result['final_response']}")


def _as_bool(value):
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    if pd.isna(value):
        return False
    return bool(value)
