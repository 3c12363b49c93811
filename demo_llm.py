"""
Demo script showing the full rewrite pipeline against a local model server.

This demonstrates:
1. Calling the local model directly
2. Rewriting text with PII masked before it reaches the model
3. Keeping tokens in the output when restoration is turned off
"""

import asyncio
import logging

from humanizer.config import Settings
from humanizer.llm_client import LLMClient
from humanizer.processor import RewriteProcessor


def demo_basic_llm(settings):
    """Demo the model client without the pipeline."""
    print("=" * 80)
    print("DEMO 1: Basic LLM Client")
    print("=" * 80)

    client = LLMClient(base_url=settings.base_url, model=settings.model, api_key=settings.api_key)

    system_prompt = "You are a helpful assistant. Be concise."
    user_prompt = "Say hello and confirm you're working!"

    print(f"\nServer: {settings.base_url} (model: {settings.model})")
    print(f"System Prompt: {system_prompt}")
    print(f"User Prompt: {user_prompt}")
    print("\nCalling local model...")

    async def call():
        try:
            return await client.complete(system_prompt, user_prompt, max_tokens=64, timeout=30)
        finally:
            await client.close()

    try:
        response = asyncio.run(call())
        print(f"\nLLM Response: {response}")
        print("\n✓ Basic LLM client working!")
    except Exception as e:
        print(f"\n✗ Error: {e}")


def demo_masked_rewrite(processor):
    """Demo full pipeline: mask -> rewrite -> restore."""
    print("\n" + "=" * 80)
    print("DEMO 2: Masked Rewrite")
    print("=" * 80)

    text = (
        "It is important to note that you should contact John Smith at john@example.com or "
        "555-123-4567 about the project. Furthermore, the deadline moved."
    )

    print("\n--- ORIGINAL (with PII) ---")
    print(text)

    result = processor.process_request(
        text, tone="friendly", style="conversational", mask_before=True, mask_after=True
    )

    if result['error']:
        print(f"\n✗ {result['status']}")
        return

    print("\n--- MASKED (sent to LLM) ---")
    print(result['masked_text'])
    print(f"\nMappings stored: {result['mappings']}")

    print("\n--- FINAL (restored) ---")
    print(result['final_response'])
    print(f"\n✓ {result['status']}")


def demo_tokens_kept(processor):
    """Demo masking without restoration."""
    print("\n" + "=" * 80)
    print("DEMO 3: Mask Without Restore")
    print("=" * 80)

    text = "Please forward the invoice to billing@company.com and call (555) 987-6543."
    result = processor.process_request(text, mask_before=True, mask_after=False)

    print(f"\nOriginal: {text}")
    if result['error']:
        print(f"\n✗ {result['status']}")
    else:
        print(f"Output:   {result['final_response']}")
        print("\n✓ Tokens stay in the output when restoration is off")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 80)
    print("HUMANIZER + LOCAL LLM DEMO")
    print("=" * 80)

    settings = Settings.from_env()
    demo_basic_llm(settings)

    with RewriteProcessor(settings=settings) as processor:
        demo_masked_rewrite(processor)
        demo_tokens_kept(processor)

    print("\n" + "=" * 80)
    print("ALL DEMOS COMPLETED!")
    print("=" * 80 + "\n")
