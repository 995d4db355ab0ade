from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides. Numeric parameters are kept as
raw strings here; the validator owns their parsing and error reporting.
"""

import argparse
from typing import Any, Callable, Dict, List, Optional

from tagcloud.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tagcloud CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tagcloud",
        description=i18n.t("app.description"),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        help=i18n.t("cli.args.input"),
        default=None,
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        help=i18n.t("cli.args.output"),
        default=None,
    )

    # --- Selection & Rendering ---
    p.add_argument(
        "-n", "--count",
        dest="word_count",
        help=i18n.t("cli.args.count"),
        default=None,
    )
    p.add_argument(
        "--font-min",
        dest="font_min",
        help=i18n.t("cli.args.font_min"),
        default=None,
    )
    p.add_argument(
        "--font-max",
        dest="font_max",
        help=i18n.t("cli.args.font_max"),
        default=None,
    )
    p.add_argument(
        "--stylesheet",
        dest="stylesheets",
        action="append",
        default=None,
        help=i18n.t("cli.args.stylesheet"),
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument("--overwrite", action="store_true", help=i18n.t("cli.args.overwrite"))
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("--interactive", action="store_true", help=i18n.t("cli.args.interactive"))

    # --- Configuration and Diagnostic Tools ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None = not given).
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["output_path"] = args.output_path
    overrides["word_count"] = args.word_count
    overrides["font_min"] = args.font_min
    overrides["font_max"] = args.font_max

    if args.stylesheets:
        sheets: List[str] = []
        for value in args.stylesheets:
            sheets.extend(_split_csv(value) or [])
        overrides["stylesheets"] = sheets

    return overrides


def prompt_missing(
        overrides: Dict[str, Any],
        input_fn: Callable[[str], str] = input,
) -> Dict[str, Any]:
    """
    Ask for the run parameters that were not given on the command line.

    Prompts in the fixed order input file, output file, word count.

    Args:
        overrides: Overrides produced by args_to_overrides().
        input_fn: Line reader used for prompting.

    Returns:
        Dict[str, Any]: A copy of the overrides with the answers filled in.
    """
    out = dict(overrides)
    for key, prompt_key in (
            ("input_path", "cli.prompts.input"),
            ("output_path", "cli.prompts.output"),
            ("word_count", "cli.prompts.count"),
    ):
        if out.get(key) is None:
            out[key] = input_fn(i18n.t(prompt_key)).strip()
    return out

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of sanitized strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
