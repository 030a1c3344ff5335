"""Formatting utilities for killallgit.

- output: output-mode selection, machine-readable listings and human text
"""

from .output import (
    OutputMode,
    select_output_mode,
    format_json_array,
    format_plain_listing,
    format_bullet_items,
    format_outcome,
    format_summary_lines,
    format_confirmation_prompt,
)

__all__ = [
    "OutputMode",
    "select_output_mode",
    "format_json_array",
    "format_plain_listing",
    "format_bullet_items",
    "format_outcome",
    "format_summary_lines",
    "format_confirmation_prompt",
]
