"""InferenceService: prompt formatting and hosted-model calls for OCR and data assistance."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Sequence

from hfassistant.analysis import generate_fallback_analysis, resolve_analysis
from hfassistant.encoding import FileInput, file_to_base64
from hfassistant.prompts import (
    CHAT_EMPTY_REPLY,
    CHAT_ERROR_REPLY,
    CHAT_PARAMS,
    DATA_ANALYSIS_PARAMS,
    DEFAULT_MODEL,
    IMAGE_OCR_PROMPT,
    OCR_ENHANCE_PARAMS,
    build_chat_prompt,
    build_data_analysis_prompt,
    build_ocr_enhancement_prompt,
    create_data_summary,
)
from hfassistant.providers.base import InferenceBackend
from hfassistant.providers.huggingface.client import HuggingFaceClient
from hfassistant.text_clean import clean_generated_text
from hfassistant.types import AIResponse, Record

logger = logging.getLogger(__name__)


@dataclass
class InferenceService:
    """
    Front door to the hosted model for OCR cleanup, data analysis, chat and
    image OCR.

    Every public method returns an AIResponse and never raises: remote
    failures are logged and turned into `success=False` with a usable
    fallback in `data`. The service keeps no per-call state, so one instance
    can be shared across threads.

    Model name can be configured via HF_MODEL environment variable.

    Usage:
        service = InferenceService()
        res = service.enhance_ocr_text("Inv0ice N0. 123")
        print(res.data)
    """

    client: InferenceBackend | None = None
    model: str = ""  # Will be loaded from env or defaults to Qwen2.5-VL

    def __post_init__(self) -> None:
        if not self.model:
            self.model = os.environ.get("HF_MODEL", DEFAULT_MODEL)
        if self.client is None:
            self.client = HuggingFaceClient()

    @classmethod
    def from_env(cls, *, host: str = "", timeout_sec: int = 120, model: str = "") -> "InferenceService":
        return cls(client=HuggingFaceClient(host=host, timeout_sec=timeout_sec), model=model)

    def enhance_ocr_text(self, extracted_text: str, image_context: str | None = None) -> AIResponse:
        """Ask the model to correct raw OCR output; falls back to the input text."""
        try:
            prompt = build_ocr_enhancement_prompt(extracted_text, image_context)
            res = self.client.text_generation(
                model=self.model,
                inputs=prompt,
                parameters=OCR_ENHANCE_PARAMS.to_dict(),
            )
            return AIResponse.ok(clean_generated_text(res.get("generated_text")) or extracted_text)
        except Exception as e:
            logger.error(f"[InferenceService] OCR enhancement error: {e}")
            return AIResponse.fail("Failed to enhance OCR text", extracted_text)

    def clean_and_structure_data(self, data: Sequence[Record], filename: str, file_type: str) -> AIResponse:
        """
        Request a data-quality report for a table.

        Model output that is not valid JSON is replaced by the local
        heuristic analysis and still counts as success. Only a failed remote
        call yields `success=False`.
        """
        try:
            prompt = build_data_analysis_prompt(data, filename, file_type)
            res = self.client.text_generation(
                model=self.model,
                inputs=prompt,
                parameters=DATA_ANALYSIS_PARAMS.to_dict(),
            )
            analysis = resolve_analysis(res.get("generated_text"), data)
            if analysis.source == "fallback":
                logger.warning(
                    f"[InferenceService] Model output for {filename!r} is not valid JSON; "
                    f"using fallback analysis. Output: {analysis.raw_output[:200]!r}"
                )
            return AIResponse.ok(analysis.data)
        except Exception as e:
            logger.error(f"[InferenceService] Data cleaning error: {e}")
            return AIResponse.fail("Failed to analyze data", generate_fallback_analysis(data))

    def generate_chat_response(self, user_message: str, data_context: Sequence[Record], filename: str) -> AIResponse:
        """Answer a question about the dataset."""
        try:
            prompt = build_chat_prompt(user_message, create_data_summary(data_context, filename))
            res = self.client.text_generation(
                model=self.model,
                inputs=prompt,
                parameters=CHAT_PARAMS.to_dict(),
            )
            return AIResponse.ok(clean_generated_text(res.get("generated_text")) or CHAT_EMPTY_REPLY)
        except Exception as e:
            logger.error(f"[InferenceService] Chat error: {e}")
            return AIResponse.fail("Failed to generate response", CHAT_ERROR_REPLY)

    def analyze_image_for_ocr(self, image_file: FileInput) -> AIResponse:
        """Extract visible text from an image via visual question answering."""
        try:
            image_b64 = file_to_base64(image_file)
            res = self.client.visual_question_answering(
                model=self.model,
                question=IMAGE_OCR_PROMPT,
                image=image_b64,
            )
            return AIResponse.ok(res.get("answer") or "")
        except Exception as e:
            logger.error(f"[InferenceService] Image analysis error: {e}")
            return AIResponse.fail("Failed to analyze image", "")
