from __future__ import annotations

"""
Domain Error Types.

Failures that are validated once at the pipeline boundary. The core
components (tokenizer, counter, ranker, renderer) assume already-checked
inputs and do not raise these themselves, with the exception of the
ranker guarding against a negative selection size.
"""


class InvalidConfigurationError(ValueError):
    """Raised when a run parameter (word count, font bounds) is unusable."""

    def __init__(self, field: str, message: str):
        super().__init__(f"Invalid field '{field}': {message}")
        self.field = field


class EmptyInputError(ValueError):
    """Raised when the input source yields no lines at all."""

    def __init__(self, source: str):
        super().__init__(f"Input is empty or unreadable: {source}")
        self.source = source
