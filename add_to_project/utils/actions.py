"""Helpers for talking to the GitHub Actions runner."""

from pathlib import Path

import typer


def set_output(name: str, value: str, output_path: Path | None) -> None:
    """Write a step output to the runner's output file, or echo it when running locally."""
    if output_path is None:
        typer.echo(f"{name}={value}")
        return
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}={value}\n")


def _escape_annotation(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def warning_annotation(message: str) -> None:
    """Surface a warning in the workflow run summary."""
    typer.echo(f"::warning::{_escape_annotation(message)}")


def error_annotation(message: str) -> None:
    """Surface an error in the workflow run summary."""
    typer.echo(f"::error::{_escape_annotation(message)}", err=True)
