from __future__ import annotations

"""
Resilient File Reading Component.

Streams input text line by line. Undecodable byte sequences are replaced
with placeholder characters so a stray binary fragment does not abort the
whole run.
"""

from typing import Iterator, List

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Args:
        file_path: Path to the target file.

    Yields:
        str: Lines from the file, line terminators included.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line


def read_lines(file_path: str) -> List[str]:
    """Read the whole file into memory, closing the handle on every path."""
    return list(stream_file_content(file_path))
