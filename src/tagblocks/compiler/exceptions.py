"""Errors raised by the component tag compiler."""

from typing import Optional


class TagSyntaxError(Exception):
    """Base error for component tag sources."""

    def __init__(
        self,
        message: str,
        file_path: str = "",
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        location = self.file_path or "<template>"
        if self.line is not None:
            location = f"{location}:{self.line}"
            if self.column is not None:
                location = f"{location}:{self.column}"
        return f"{location}: {self.message}"


class TagPairingError(TagSyntaxError):
    """Opening and closing tags do not pair up (strict mode only)."""
