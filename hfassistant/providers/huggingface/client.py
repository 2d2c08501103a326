"""Hugging Face Inference API HTTP client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api-inference.huggingface.co"


class InferenceAPIError(RuntimeError):
    """The inference API answered with an error payload."""


def _default_host() -> str:
    """Get default inference host from environment or use the public API."""
    return os.environ.get("HF_INFERENCE_HOST", DEFAULT_HOST).rstrip("/")


def _default_api_key() -> str | None:
    return os.environ.get("HUGGINGFACE_API_KEY") or os.environ.get("HF_TOKEN") or None


def _first_result(res: Any) -> dict[str, Any]:
    """
    Normalize an inference response to a single dict.

    The hosted API returns a list for most tasks:
    - text generation: [{"generated_text": "..."}]
    - visual QA: [{"answer": "...", "score": 0.9}, ...] (best first)
    """
    if isinstance(res, list):
        res = res[0] if res else {}
    if not isinstance(res, dict):
        raise InferenceAPIError(f"unexpected response type: {type(res).__name__}")
    if res.get("error"):
        raise InferenceAPIError(str(res["error"]))
    return res


@dataclass
class HuggingFaceClient:
    """HTTP client for the Hugging Face Inference API."""

    host: str = ""
    api_key: str | None = field(default=None, repr=False)
    timeout_sec: int = 120

    def __post_init__(self) -> None:
        """Initialize host and credential from environment if not provided."""
        if not self.host:
            self.host = _default_host()
        self.host = self.host.rstrip("/")
        if self.api_key is None:
            self.api_key = _default_api_key()
        if not self.api_key:
            logger.warning("[HuggingFaceClient] No API key configured; requests are sent unauthenticated")

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        r = requests.post(
            f"{self.host}/models/{model}",
            json=payload,
            headers=self._headers(),
            timeout=self.timeout_sec,
        )
        r.raise_for_status()
        return _first_result(r.json())

    def text_generation(self, *, model: str, inputs: str, parameters: dict[str, Any]) -> dict[str, Any]:
        """Generate text; the result dict may lack `generated_text`."""
        return self._post(model, {"inputs": inputs, "parameters": parameters})

    def visual_question_answering(self, *, model: str, question: str, image: str) -> dict[str, Any]:
        """Ask a question about a base64-encoded image; the result may lack `answer`."""
        return self._post(model, {"inputs": {"question": question, "image": image}})
