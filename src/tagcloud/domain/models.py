from __future__ import annotations

"""
Tag Cloud Domain Data Models.

Defines the ranked entry type flowing between the ranker and the renderer,
and the result object used to communicate a complete run between the
pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RankedEntry:
    """
    A selected word together with its occurrence count.

    Attributes:
        word: Lowercased word text.
        count: Number of occurrences across the whole input (>= 1).
    """
    word: str
    count: int


@dataclass(frozen=True)
class CloudResult:
    """
    Unified result object of a complete tag cloud run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Machine-readable failure category ('' on success).
        input_path: Normalized input file path.
        output_path: Normalized destination of the HTML document.
        word_count: Requested number of words (N).
        font_min: Font size applied to the least frequent selected word.
        font_max: Font size applied to the most frequent selected word.
        entries: Selected words in presentation (alphabetical) order.
        html_lines: Rendered document lines.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    error_kind: str

    input_path: str
    output_path: str

    word_count: int
    font_min: int
    font_max: int

    entries: List[RankedEntry] = field(default_factory=list)
    html_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        input_path: str = "",
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> CloudResult:
    """
    Create a failed run result instance.

    Args:
        error: Detailed error description.
        error_kind: Failure category (e.g. 'empty_input', 'missing_input').
        cfg: The configuration used during the failed run.
        input_path: The resolved input file.
        output_path: The resolved output file.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CloudResult: An immutable error result object.
    """
    return CloudResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        input_path=input_path,
        output_path=output_path,
        word_count=_as_int(cfg.get("word_count")),
        font_min=_as_int(cfg.get("font_min")),
        font_max=_as_int(cfg.get("font_max")),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        input_path: str,
        output_path: str,
        entries: List[RankedEntry],
        html_lines: List[str],
        summary_extra: Optional[Dict[str, Any]] = None
) -> CloudResult:
    """
    Create a successful run result instance.

    Args:
        cfg: Final validated configuration.
        input_path: Normalized input file.
        output_path: Normalized output file.
        entries: Selected entries in presentation order.
        html_lines: Rendered document.
        summary_extra: Final execution metrics.

    Returns:
        CloudResult: An immutable success result object.
    """
    return CloudResult(
        ok=True,
        error="",
        error_kind="",
        input_path=input_path,
        output_path=output_path,
        word_count=int(cfg["word_count"]),
        font_min=int(cfg["font_min"]),
        font_max=int(cfg["font_max"]),
        entries=list(entries),
        html_lines=list(html_lines),
        summary=summary_extra or {},
    )


def _as_int(value: Any) -> int:
    """Best-effort integer view of a possibly unvalidated config value."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    return 0
