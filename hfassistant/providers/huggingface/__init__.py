"""Hugging Face Inference API provider."""

from hfassistant.providers.huggingface.client import HuggingFaceClient, InferenceAPIError

__all__ = ["HuggingFaceClient", "InferenceAPIError"]
