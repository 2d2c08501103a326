from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from hfassistant.service import InferenceService


@dataclass
class FakeBackend:
    """In-memory stand-in for the inference API."""

    generated_text: str | None = ""
    answer: str | None = ""
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def text_generation(self, *, model: str, inputs: str, parameters: dict[str, Any]) -> dict[str, Any]:
        self.calls.append({"endpoint": "text_generation", "model": model, "inputs": inputs, "parameters": parameters})
        if self.error is not None:
            raise self.error
        return {} if self.generated_text is None else {"generated_text": self.generated_text}

    def visual_question_answering(self, *, model: str, question: str, image: str) -> dict[str, Any]:
        self.calls.append({"endpoint": "visual_question_answering", "model": model, "question": question, "image": image})
        if self.error is not None:
            raise self.error
        return {} if self.answer is None else {"answer": self.answer}


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def service(backend: FakeBackend) -> InferenceService:
    return InferenceService(client=backend, model="test/model")


@pytest.fixture
def contacts() -> list[dict[str, Any]]:
    return [
        {"name": "Alice Smith", "email": "alice@example.com", "joined": "2024-01-15", "notes": "likes widgets"},
        {"name": "Bob Jones", "email": "bob@example.org", "joined": "2023-11-02", "notes": "blue widget buyer"},
        {"name": "Carol White", "email": "", "joined": "2022-06-30", "notes": None},
        {"name": "Dan Brown", "email": "dan@example.net", "joined": "2021-03-09", "notes": "lorem ipsum"},
    ]
