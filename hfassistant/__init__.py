"""
hfassistant - OCR cleanup and data assistance on top of the Hugging Face Inference API.

This package formats prompts for a hosted vision-language model and wraps every
call in a uniform success/data/error envelope, with local heuristics when the
model cannot be reached or returns unusable output.

Modules:
    analysis: Fallback data-quality analysis and pattern detection
    cli: Command-line interface
    encoding: File to base64 / data URL helpers
    prompts: Prompt templates and generation settings
    service: InferenceService with the four public operations
    text_clean: Post-processing of generated text
    types: AIResponse envelope and record types
"""

from hfassistant.service import InferenceService
from hfassistant.types import AIResponse, GenerationParams, Record

__version__ = "0.1.0"

__all__ = [
    "AIResponse",
    "GenerationParams",
    "InferenceService",
    "Record",
]
