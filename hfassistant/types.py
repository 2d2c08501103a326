from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict

CellValue = Union[str, int, float, bool, None]
Record = Mapping[str, CellValue]


class AIResponse(BaseModel):
    """
    Uniform result envelope returned by every service operation.

    A failed response still carries a usable fallback in `data`.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, data: Any) -> "AIResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, data: Any) -> "AIResponse":
        return cls(success=False, error=error, data=data)


@dataclass(frozen=True)
class GenerationParams:
    """Sampling parameters for a text-generation request."""

    max_new_tokens: int
    temperature: float
    top_p: float
    return_full_text: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
