from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the whole tag cloud run:
1. Validates configuration and paths.
2. Checks for overwrite conflicts.
3. Reads the input and rejects empty sources.
4. Counts word frequencies and ranks the top N words.
5. Renders the HTML document.
6. Writes the document to its destination (skipped in dry runs).
"""

import logging
import os
from typing import Any, Dict, Optional

from tagcloud.core.pipeline.components.reader import read_lines
from tagcloud.core.pipeline.components.writer import write_document
from tagcloud.core.pipeline.validator import validate_config
from tagcloud.core.processing.counter import count_words, total_occurrences
from tagcloud.core.processing.ranker import rank
from tagcloud.core.rendering.cloud import count_bounds, render_cloud
from tagcloud.domain.errors import EmptyInputError, InvalidConfigurationError
from tagcloud.domain.models import (
    CloudResult,
    create_error_result,
    create_success_result,
)
from tagcloud.infra.fs import (
    derive_output_path,
    is_readable_file,
    is_same_file,
    normalize_path,
    output_exists,
)

logger = logging.getLogger(__name__)

# Failure categories reported through CloudResult.error_kind
KIND_INVALID_CONFIGURATION = "invalid_configuration"
KIND_MISSING_INPUT = "missing_input"
KIND_EMPTY_INPUT = "empty_input"
KIND_OUTPUT_EXISTS = "output_exists"
KIND_IO_ERROR = "io_error"


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
) -> CloudResult:
    """
    Execute the full tag cloud pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, replace an existing output document.
        dry_run: If True, compute everything but do not write to disk.

    Returns:
        CloudResult: Object containing status, selection and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    try:
        cfg, warnings = validate_config(config, strict=False)
    except InvalidConfigurationError as e:
        logger.error(str(e))
        return create_error_result(str(e), KIND_INVALID_CONFIGURATION, config or {})

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_label = cfg["input_path"]
    if not input_label:
        msg = "No input file specified."
        logger.error(msg)
        return create_error_result(msg, KIND_MISSING_INPUT, cfg)

    input_path = normalize_path(input_label, os.getcwd())
    if not is_readable_file(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        return create_error_result(msg, KIND_MISSING_INPUT, cfg, input_path)

    output_path = normalize_path(cfg["output_path"], derive_output_path(input_path))
    if is_same_file(input_path, output_path):
        msg = f"Output file would overwrite the input file: {output_path}"
        logger.error(msg)
        return create_error_result(msg, KIND_INVALID_CONFIGURATION, cfg, input_path, output_path)

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    existed_before = output_exists(output_path)
    if existed_before and not overwrite and not dry_run:
        msg = "Output file already exists and overwrite=False. Aborting."
        logger.warning(f"{msg} File: {output_path}")
        return create_error_result(msg, KIND_OUTPUT_EXISTS, cfg, input_path, output_path)

    # -------------------------------------------------------------------------
    # 3) Input Acquisition
    # -------------------------------------------------------------------------
    try:
        lines = read_lines(input_path)
        if not lines:
            raise EmptyInputError(input_path)
    except EmptyInputError as e:
        logger.warning(str(e))
        return create_error_result(str(e), KIND_EMPTY_INPUT, cfg, input_path, output_path)
    except OSError as e:
        msg = f"Failed to read {input_path}: {e}"
        logger.error(msg)
        return create_error_result(msg, KIND_IO_ERROR, cfg, input_path, output_path)

    # -------------------------------------------------------------------------
    # 4) Counting & Ranking
    # -------------------------------------------------------------------------
    terms = count_words(lines, frozenset(cfg["separators"]))
    entries = rank(terms, cfg["word_count"])
    logger.info(f"Selected {len(entries)} of {len(terms)} distinct words.")

    # -------------------------------------------------------------------------
    # 5) Rendering
    # -------------------------------------------------------------------------
    html_lines = render_cloud(
        entries,
        cfg["word_count"],
        input_label,
        fmin=cfg["font_min"],
        fmax=cfg["font_max"],
        stylesheets=cfg["stylesheets"],
    )

    # -------------------------------------------------------------------------
    # 6) Deployment
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: Skipping document write.")
    else:
        try:
            write_document(output_path, html_lines)
        except OSError as e:
            msg = f"Failed to write {output_path}: {e}"
            logger.error(msg)
            return create_error_result(msg, KIND_IO_ERROR, cfg, input_path, output_path)

    min_count, max_count = count_bounds(entries) if entries else (0, 0)
    summary = {
        "lines_read": len(lines),
        "total_words": total_occurrences(terms),
        "distinct_words": len(terms),
        "selected_words": len(entries),
        "min_count": min_count,
        "max_count": max_count,
        "output_existed": existed_before,
        "dry_run": dry_run,
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(cfg, input_path, output_path, entries, html_lines, summary)
