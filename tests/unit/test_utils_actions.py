"""Contains unit tests for the GitHub Actions runner helpers."""

from pathlib import Path

import pytest

from add_to_project.utils.actions import error_annotation, set_output, warning_annotation


def test_set_output_appends_to_output_file(tmp_path: Path) -> None:
    """Test that outputs are appended to the runner's output file."""
    output_path = tmp_path / "output"
    output_path.write_text("existing=value\n")

    set_output("itemId", "PVTI_1", output_path)

    assert output_path.read_text() == "existing=value\nitemId=PVTI_1\n"


def test_set_output_without_output_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that outputs are echoed when there is no output file."""
    set_output("deletedItemId", "PVTI_2", None)

    assert capsys.readouterr().out == "deletedItemId=PVTI_2\n"


def test_warning_annotation(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that warnings are written as workflow commands with escaped newlines."""
    warning_annotation("Could not find item\n100% sure")

    assert capsys.readouterr().out == "::warning::Could not find item%0A100%25 sure\n"


def test_error_annotation(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that errors are written to stderr as workflow commands."""
    error_annotation("Invalid project URL")

    assert capsys.readouterr().err == "::error::Invalid project URL\n"
