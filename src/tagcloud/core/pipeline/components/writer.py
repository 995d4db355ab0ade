from __future__ import annotations

"""
Output Persistence Component.

Writes the rendered document through a temporary file in the destination
directory and moves it into place once complete, so an interrupted or
failed write never leaves a partial document behind.
"""

import logging
import os
import tempfile
from typing import Iterable

from tagcloud.infra.fs import safe_mkdir

logger = logging.getLogger(__name__)


def write_document(output_path: str, lines: Iterable[str]) -> int:
    """
    Atomically write document lines to 'output_path'.

    Args:
        output_path: Final destination of the document.
        lines: Document lines without trailing newlines.

    Returns:
        int: Number of lines written.

    Raises:
        OSError: If the destination directory is not writable.
    """
    directory = os.path.dirname(os.path.abspath(output_path))
    ok, err = safe_mkdir(directory)
    if not ok:
        raise OSError(f"Cannot create output directory {directory}: {err}")

    fd, temp_path = tempfile.mkstemp(prefix=".tagcloud-", suffix=".tmp", dir=directory)
    written = 0
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as out:
            for line in lines:
                out.write(f"{line}\n")
                written += 1
        os.replace(temp_path, output_path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

    logger.debug(f"Wrote {written} lines to {output_path}")
    return written
