from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema before any text is read.
Loose values (CLI strings, CSV lists) are coerced with a warning; values
the run cannot proceed with (word count, font bounds) are rejected with
InvalidConfigurationError.
"""

import logging
from typing import Any, Dict, List, Tuple

from tagcloud.domain.config import get_default_config
from tagcloud.domain.constants import SEPARATOR_CHARS
from tagcloud.domain.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        InvalidConfigurationError: If the word count or font bounds are unusable.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in ("input_path", "output_path"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["stylesheets"] = _as_list_str(
        merged.get("stylesheets"), defaults["stylesheets"], "stylesheets", warnings, strict
    )
    merged["separators"] = _as_separators(merged.get("separators"), warnings, strict)

    # 3. Run Parameters (never coerced to a fallback)
    merged["word_count"] = _as_int(merged.get("word_count"), "word_count", minimum=0)
    merged["font_min"] = _as_int(merged.get("font_min"), "font_min", minimum=1)
    merged["font_max"] = _as_int(merged.get("font_max"), "font_max", minimum=1)

    if merged["font_min"] > merged["font_max"]:
        raise InvalidConfigurationError(
            "font_min",
            f"{merged['font_min']} exceeds font_max {merged['font_max']}."
        )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_int(value: Any, field: str, *, minimum: int) -> int:
    """Accept integers or integer strings no lower than 'minimum'."""
    if isinstance(value, bool):
        raise InvalidConfigurationError(field, "expected an integer, received bool.")

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        # Plain ASCII decimal only; int() would also take '1_0' and non-ASCII digits
        text = value.strip()
        digits = text[1:] if text[:1] in ("+", "-") else text
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidConfigurationError(field, f"'{value}' is not an integer.")
        number = int(text)
    else:
        raise InvalidConfigurationError(
            field, f"expected an integer, received {type(value).__name__}."
        )

    if number < minimum:
        raise InvalidConfigurationError(field, f"must be >= {minimum}, received {number}.")
    return number


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_separators(value: Any, warnings: List[str], strict: bool) -> str:
    """Separators are kept verbatim; whitespace is significant here."""
    if isinstance(value, str) and value:
        return value

    msg = "Invalid field 'separators': expected a non-empty str."
    if strict:
        raise TypeError(msg)
    if value is not None:
        warnings.append(f"{msg} Using fallback.")
    return SEPARATOR_CHARS
