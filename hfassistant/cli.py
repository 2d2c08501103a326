"""
hfassistant CLI - OCR cleanup, data analysis and dataset chat via the Hugging Face Inference API.

Usage:
    hfassistant enhance-ocr scan.txt --context "invoice"
    hfassistant analyze-data customers.csv
    hfassistant chat customers.csv "Which columns have missing values?"
    hfassistant ocr-image receipt.png
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd
import typer
from dotenv import load_dotenv
from rich.console import Console

from hfassistant.service import InferenceService
from hfassistant.types import AIResponse, Record

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option("", help="Inference API host (default: HF_INFERENCE_HOST or the public API)"),
    model: str = typer.Option("", help="Model id (default: HF_MODEL or Qwen/Qwen2.5-VL-7B-Instruct)"),
    timeout_sec: int = typer.Option(120, help="HTTP timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show service logs"),
) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.ERROR, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"host": host, "model": model, "timeout_sec": timeout_sec}


def _service(ctx: typer.Context) -> InferenceService:
    return InferenceService.from_env(**(ctx.obj or {}))


def load_records(path: Path) -> tuple[list[Record], str]:
    """Load a CSV or JSON table into records; returns (records, file_type)."""
    suffix = path.suffix.lower().lstrip(".")
    if suffix == "json":
        obj = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(obj, dict):
            obj = [obj]
        if not isinstance(obj, list) or not all(isinstance(r, dict) for r in obj):
            raise typer.BadParameter(f"{path} must contain a JSON object or an array of objects")
        return obj, "json"
    if suffix in ("csv", "tsv", "txt"):
        try:
            df = pd.read_csv(path, sep="\t" if suffix == "tsv" else ",")
        except pd.errors.EmptyDataError:
            raise typer.BadParameter(f"{path} is empty")
        df = df.astype(object).where(df.notna(), None)
        return df.to_dict(orient="records"), suffix
    raise typer.BadParameter(f"unsupported data file type: {path.suffix or '(none)'}")


def _emit(res: AIResponse) -> None:
    if isinstance(res.data, (dict, list)):
        console.print_json(json.dumps(res.data, ensure_ascii=False, default=str))
    else:
        console.print(res.data, markup=False)
    if not res.success:
        console.print(f"[red]ERROR[/red] {res.error}")
        raise typer.Exit(code=1)


@app.command("enhance-ocr")
def enhance_ocr(
    ctx: typer.Context,
    text_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw OCR text file"),
    context: str = typer.Option("", "--context", help="Optional description of the source image"),
) -> None:
    """Correct and restructure raw OCR text."""
    text = text_file.read_text(encoding="utf-8")
    _emit(_service(ctx).enhance_ocr_text(text, context or None))


@app.command("analyze-data")
def analyze_data(
    ctx: typer.Context,
    data_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV/TSV/JSON table"),
) -> None:
    """Produce a data-quality report for a table."""
    records, file_type = load_records(data_file)
    console.print(f"Loaded {len(records)} rows from {data_file.name}")
    _emit(_service(ctx).clean_and_structure_data(records, data_file.name, file_type))


@app.command("chat")
def chat(
    ctx: typer.Context,
    data_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="CSV/TSV/JSON table"),
    message: str = typer.Argument(..., help="Question about the dataset"),
) -> None:
    """Ask a question about a dataset."""
    records, _ = load_records(data_file)
    _emit(_service(ctx).generate_chat_response(message, records, data_file.name))


@app.command("ocr-image")
def ocr_image(
    ctx: typer.Context,
    image_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Image to read"),
) -> None:
    """Extract visible text from an image."""
    _emit(_service(ctx).analyze_image_for_ocr(image_file))


if __name__ == "__main__":
    app()
