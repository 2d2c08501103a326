from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from hfassistant import cli
from hfassistant.service import InferenceService

from conftest import FakeBackend

runner = CliRunner()


@pytest.fixture
def fake(monkeypatch) -> FakeBackend:
    backend = FakeBackend()
    monkeypatch.setattr(cli, "_service", lambda ctx: InferenceService(client=backend, model="test/model"))
    return backend


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text("name,email,age\nAlice,alice@example.com,31\nBob,,\n", encoding="utf-8")
    return path


def test_load_records_csv_maps_missing_to_none(csv_file: Path) -> None:
    records, file_type = cli.load_records(csv_file)
    assert file_type == "csv"
    assert records[0] == {"name": "Alice", "email": "alice@example.com", "age": 31}
    assert records[1] == {"name": "Bob", "email": None, "age": None}


def test_load_records_json(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text(json.dumps([{"a": 1}, {"a": None}]), encoding="utf-8")
    assert cli.load_records(path) == ([{"a": 1}, {"a": None}], "json")


def test_load_records_rejects_unknown_type(tmp_path: Path) -> None:
    path = tmp_path / "rows.parquet"
    path.write_bytes(b"")
    with pytest.raises(typer.BadParameter):
        cli.load_records(path)


def test_analyze_data_prints_report(fake: FakeBackend, csv_file: Path) -> None:
    fake.generated_text = json.dumps({"quality_issues": ["Bob has no email"]})
    result = runner.invoke(cli.app, ["analyze-data", str(csv_file)])
    assert result.exit_code == 0, result.output
    assert "Loaded 2 rows from people.csv" in result.output
    assert "Bob has no email" in result.output
    assert "- Type: csv" in fake.calls[0]["inputs"]


def test_failed_call_exits_non_zero(fake: FakeBackend, csv_file: Path) -> None:
    fake.error = ConnectionError("down")
    result = runner.invoke(cli.app, ["chat", str(csv_file), "Who is missing an email?"])
    assert result.exit_code == 1
    assert "Failed to generate response" in result.output


def test_enhance_ocr_reads_text_file(fake: FakeBackend, tmp_path: Path) -> None:
    text_file = tmp_path / "scan.txt"
    text_file.write_text("He1lo W0rld", encoding="utf-8")
    fake.generated_text = "Hello World"

    result = runner.invoke(cli.app, ["enhance-ocr", str(text_file), "--context", "greeting card"])
    assert result.exit_code == 0, result.output
    assert "Hello World" in result.output
    assert "Image Context: greeting card" in fake.calls[0]["inputs"]


def test_ocr_image(fake: FakeBackend, tmp_path: Path) -> None:
    image = tmp_path / "receipt.png"
    image.write_bytes(b"\x89PNG fake")
    fake.answer = "TOTAL 12.50"

    result = runner.invoke(cli.app, ["ocr-image", str(image)])
    assert result.exit_code == 0, result.output
    assert "TOTAL 12.50" in result.output


def test_load_records_rejects_empty_csv(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(typer.BadParameter, match="is empty"):
        cli.load_records(path)


def test_analyze_empty_csv_reports_usage_error(fake: FakeBackend, tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    result = runner.invoke(cli.app, ["analyze-data", str(path)])
    assert result.exit_code == 2
    assert "Traceback" not in result.output
    assert fake.calls == []
