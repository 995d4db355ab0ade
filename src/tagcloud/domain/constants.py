from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants: the word
separator alphabet, font scaling bounds, default stylesheet references
and configuration versioning.
"""

from typing import FrozenSet, List

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_WORD_COUNT = 100
OUTPUT_EXTENSION = ".html"

# -----------------------------------------------------------------------------
# TOKENIZATION
# -----------------------------------------------------------------------------

# Whitespace and punctuation that delimit words (digits are word characters)
SEPARATOR_CHARS = " \t, \n\r,.<>/?;:\"'{}[]_-+=~`!@#$%^&*()|"
SEPARATORS: FrozenSet[str] = frozenset(SEPARATOR_CHARS)

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

# Font size of the least frequent selected word
FONT_MIN = 11
# Font size of the most frequent selected word
FONT_MAX = 48

DEFAULT_STYLESHEETS: List[str] = [
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
]
