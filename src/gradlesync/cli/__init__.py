"""Command-line interface for gradlesync."""

from __future__ import annotations

from gradlesync.cli.app import main as main
from gradlesync.cli.commands import format_edits as format_edits
from gradlesync.cli.commands import format_model_summary as format_model_summary
from gradlesync.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "format_edits", "format_model_summary", "main"]
