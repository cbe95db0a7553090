"""Errors raised while reading a scene description."""

from __future__ import annotations


class ParseError(Exception):
    """A scene file that cannot be used; ``message`` says why."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message