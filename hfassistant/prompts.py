"""Prompt templates and generation settings for each service operation."""

from __future__ import annotations

import json
from typing import Sequence

from hfassistant.types import GenerationParams, Record

DEFAULT_MODEL = "Qwen/Qwen2.5-VL-7B-Instruct"

OCR_ENHANCE_PARAMS = GenerationParams(max_new_tokens=2000, temperature=0.3, top_p=0.9)
DATA_ANALYSIS_PARAMS = GenerationParams(max_new_tokens=1500, temperature=0.2, top_p=0.8)
CHAT_PARAMS = GenerationParams(max_new_tokens=1000, temperature=0.7, top_p=0.9)

ANALYSIS_SAMPLE_ROWS = 10
SUMMARY_SAMPLE_ROWS = 3

NO_DATA_SUMMARY = "No data available"
CHAT_EMPTY_REPLY = "I'm here to help analyze your data. Could you please rephrase your question?"
CHAT_ERROR_REPLY = "I'm experiencing some technical difficulties. Please try again."

IMAGE_OCR_PROMPT = (
    "Analyze this image and extract all visible text with high accuracy. Pay special attention to:\n"
    "1. Tables and structured data\n"
    "2. Forms and labels\n"
    "3. Handwritten text\n"
    "4. Numbers and dates\n"
    "5. Email addresses and phone numbers\n"
    "\n"
    "Provide the extracted text in a clean, organized format."
)

_ANALYSIS_JSON_SHAPE = """{
  "quality_issues": ["issue1", "issue2"],
  "cleaning_recommendations": ["step1", "step2"],
  "column_analysis": {
    "column_name": {
      "type": "text|number|date|email|phone",
      "issues": ["issue1"],
      "suggestions": ["suggestion1"]
    }
  },
  "patterns_detected": {
    "emails": ["column_names"],
    "phones": ["column_names"],
    "dates": ["column_names"],
    "addresses": ["column_names"]
  }
}"""


def _to_json(rows: Sequence[Record]) -> str:
    return json.dumps(list(rows), ensure_ascii=False, indent=2, default=str)


def build_ocr_enhancement_prompt(extracted_text: str, image_context: str | None = None) -> str:
    context_line = f"Image Context: {image_context}" if image_context else ""
    return (
        "You are an advanced OCR enhancement AI. Your task is to improve the accuracy and "
        "readability of extracted text from images.\n"
        "\n"
        "Original OCR Text:\n"
        f"{extracted_text}\n"
        "\n"
        f"{context_line}\n"
        "\n"
        "Please:\n"
        "1. Correct obvious OCR errors (common character misrecognitions like 0/O, 1/I/l, etc.)\n"
        "2. Fix spacing and formatting issues\n"
        "3. Complete truncated words based on context\n"
        "4. Organize the text into logical structure (tables, lists, paragraphs)\n"
        "5. Preserve all original information while improving readability\n"
        "\n"
        "Return only the enhanced text without explanations."
    )


def build_data_analysis_prompt(data: Sequence[Record], filename: str, file_type: str) -> str:
    """
    Build the data-cleaning prompt.

    Only the first ten rows are embedded to stay within the model's context
    budget; the total row count is still reported.
    """
    preview = _to_json(data[:ANALYSIS_SAMPLE_ROWS])
    return (
        "You are an expert data cleaning and structuring AI. Analyze this dataset and provide "
        "cleaning recommendations.\n"
        "\n"
        "Dataset Info:\n"
        f"- Filename: {filename}\n"
        f"- Type: {file_type}\n"
        f"- Total Rows: {len(data)}\n"
        f"- Sample Data (first {ANALYSIS_SAMPLE_ROWS} rows):\n"
        f"{preview}\n"
        "\n"
        "Please analyze and provide:\n"
        "1. Data quality issues identified\n"
        "2. Recommended cleaning steps\n"
        "3. Suggested column standardizations\n"
        "4. Pattern detection (emails, phones, dates, addresses)\n"
        "5. Data type recommendations for each column\n"
        "\n"
        "Format your response as JSON with this structure:\n"
        f"{_ANALYSIS_JSON_SHAPE}\n"
        "\n"
        "Return only valid JSON without explanations."
    )


def create_data_summary(data: Sequence[Record], filename: str) -> str:
    """Short dataset description embedded in chat prompts."""
    if not data:
        return NO_DATA_SUMMARY

    columns = list(data[0].keys()) if data[0] else []
    return (
        f"Dataset: {filename}\n"
        f"Rows: {len(data)}\n"
        f"Columns: {', '.join(columns)}\n"
        f"Sample Data: {_to_json(data[:SUMMARY_SAMPLE_ROWS])}"
    )


def build_chat_prompt(user_message: str, data_summary: str) -> str:
    return (
        "You are DataMind AI, an expert data analytics assistant. You help users understand "
        "and analyze their data.\n"
        "\n"
        "Current Dataset Context:\n"
        f"{data_summary}\n"
        "\n"
        f"User Question: {user_message}\n"
        "\n"
        "Please provide a helpful, insightful response about the user's data. Include:\n"
        "1. Direct answer to their question\n"
        "2. Relevant insights from their dataset\n"
        "3. Actionable recommendations\n"
        "4. Specific examples from their data when relevant\n"
        "\n"
        "Keep responses conversational but informative. Use emojis sparingly for visual appeal."
    )
