"""
Humanizer

Rewrites text through a locally hosted chat-completion model, optionally
masking PII (emails, phone numbers, names) before the text leaves the process
and restoring it in the model's output.
"""

from .classifier import SizeCategory
from .masker import PIIMasker
from .detectors import PatternDetector, PresidioDetector
from .llm_client import LLMClient
from .pipeline import RewritePipeline, RewriteRequest, RewriteResult
from .processor import RewriteProcessor

__all__ = [
    'SizeCategory',
    'PIIMasker',
    'PatternDetector',
    'PresidioDetector',
    'LLMClient',
    'RewritePipeline',
    'RewriteRequest',
    'RewriteResult',
    'RewriteProcessor',
]
