from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, persistent storage, CLI
overrides and interactive answers), pipeline execution, and result
rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional

from tagcloud.core.pipeline.engine import (
    KIND_EMPTY_INPUT,
    KIND_INVALID_CONFIGURATION,
    KIND_MISSING_INPUT,
    run_pipeline,
)
from tagcloud.core.pipeline.validator import validate_config
from tagcloud.domain.config import get_default_config, load_config, save_config
from tagcloud.domain.errors import InvalidConfigurationError
from tagcloud.domain.models import CloudResult
from tagcloud.infra.logging import LoggingConfig, configure_logging, get_logger
from tagcloud.interface.cli import args as cli_args
from tagcloud.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# Config keys accepted from CLI overrides
_MERGE_KEYS = (
    "input_path", "output_path", "word_count",
    "font_min", "font_max", "stylesheets",
)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        input_fn: Callable[[str], str] = input,
) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        input_fn: Line reader used by --interactive prompts.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Map and merge command-line overrides
    overrides = cli_args.args_to_overrides(args)
    if args.interactive:
        try:
            overrides = cli_args.prompt_missing(overrides, input_fn)
        except EOFError:
            msg = i18n.t("cli.errors.no_answer")
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return EXIT_USAGE
        except KeyboardInterrupt:
            msg = i18n.t("cli.status.interrupted")
            logger.warning(msg)
            print(msg, file=sys.stderr)
            return EXIT_INTERRUPTED
    raw_conf = _merge_config(base_conf, overrides)

    # 5. Schema validation and normalization (before any text is read)
    try:
        clean_conf, warnings = validate_config(raw_conf, strict=False)
    except InvalidConfigurationError as e:
        msg = i18n.t("cli.errors.config", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        save_config(clean_conf)
        print(i18n.t("cli.status.saved"))

    # 6. Pipeline execution phase
    logger.info(f"Targeting input file: {clean_conf['input_path']}")
    try:
        result = run_pipeline(
            clean_conf,
            overwrite=bool(args.overwrite),
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return _exit_code(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known override keys into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject (None means not provided).

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _MERGE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _exit_code(result: CloudResult) -> int:
    """Map a pipeline result to a process exit code."""
    if result.ok:
        return EXIT_OK
    if result.error_kind in (KIND_INVALID_CONFIGURATION, KIND_MISSING_INPUT):
        return EXIT_USAGE
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: CloudResult) -> None:
    """
    Format and print the execution result.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        if result.error_kind == KIND_EMPTY_INPUT:
            print(i18n.t("cli.errors.empty_input", path=result.input_path), file=sys.stderr)
        elif result.error_kind == KIND_MISSING_INPUT and result.input_path:
            print(f"ERROR: {i18n.t('cli.errors.path_not_exist', path=result.input_path)}", file=sys.stderr)
        else:
            print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary

    if summary.get("dry_run"):
        print(i18n.t("cli.status.dry_run"))
    else:
        print(i18n.t("cli.status.success"))
        print(i18n.t("cli.status.output_file", path=result.output_path))

    print(i18n.t(
        "cli.status.selected",
        selected=summary.get("selected_words", 0),
        distinct=summary.get("distinct_words", 0),
        total=summary.get("total_words", 0),
    ))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
