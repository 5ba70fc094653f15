"""Failure and configuration error types."""

from __future__ import annotations

from typing import Any, Iterable


class ConfigurationError(TypeError):
    """Raised when test code itself is malformed (never a test failure)."""


class MarkerConfigurationError(ConfigurationError):
    """Raised when a routine carries more than one marker of the same kind."""


class UnitTestFailure(AssertionError):
    """Signals that a test check failed.

    Carries the message lines, the file and line of the failing check and an
    optional cause. All attributes are read-only.
    """

    def __init__(
        self,
        msg_lines: Iterable[str],
        file: str,
        line: int,
        cause: BaseException | None = None,
    ) -> None:
        lines = tuple(msg_lines)
        super().__init__("\n".join(lines))
        self._msg_lines = lines
        self._file = file
        self._line = line
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def msg_lines(self) -> tuple[str, ...]:
        return self._msg_lines

    @property
    def file(self) -> str:
        return self._file

    @property
    def line(self) -> int:
        return self._line

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def message(self) -> str:
        return "\n".join(self._msg_lines)

    def output_prefix(self) -> str:
        return f"    {self._file}:{self._line} - "

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": list(self._msg_lines),
            "file": self._file,
            "line": self._line,
            "cause": repr(self._cause) if self._cause is not None else None,
        }

    def __str__(self) -> str:
        prefix = self.output_prefix()
        return "\n".join(prefix + line for line in self._msg_lines)

    def __reduce__(self):
        return (
            self.__class__,
            (self._msg_lines, self._file, self._line, self._cause),
        )
