"""Providers module for hosted inference backends."""

from hfassistant.providers.base import InferenceBackend, TextGenerationModel, VisualQuestionAnsweringModel
from hfassistant.providers.huggingface import HuggingFaceClient, InferenceAPIError

__all__ = [
    "HuggingFaceClient",
    "InferenceAPIError",
    "InferenceBackend",
    "TextGenerationModel",
    "VisualQuestionAnsweringModel",
]
