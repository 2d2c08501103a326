"""Base protocols for the hosted inference backend."""

from __future__ import annotations

from typing import Any, Protocol


class TextGenerationModel(Protocol):
    """
    Text generation contract:
    {model, inputs, parameters} -> {"generated_text": str} (field may be missing)
    """

    def text_generation(self, *, model: str, inputs: str, parameters: dict[str, Any]) -> dict[str, Any]: ...


class VisualQuestionAnsweringModel(Protocol):
    """
    Visual QA contract:
    {model, inputs: {question, image(base64)}} -> {"answer": str} (field may be missing)
    """

    def visual_question_answering(self, *, model: str, question: str, image: str) -> dict[str, Any]: ...


class InferenceBackend(TextGenerationModel, VisualQuestionAnsweringModel, Protocol):
    """Backend offering both endpoints, as consumed by InferenceService."""
