"""Filesystem path matchers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from expect.matcher import Match, outcome


def exist() -> PathMatcher:
    """Match if the subject path exists."""
    return PathMatcher("exist")


def be_a_file() -> PathMatcher:
    """Match if the subject path is a regular file (symlinks followed)."""
    return PathMatcher("be a file")


def be_a_directory() -> PathMatcher:
    """Match if the subject path is a directory (symlinks followed)."""
    return PathMatcher("be a directory")


_CHECKS = {
    "exist": Path.exists,
    "be a file": Path.is_file,
    "be a directory": Path.is_dir,
}


@dataclass(frozen=True)
class PathMatcher:
    verb_phrase: str

    def __post_init__(self) -> None:
        if self.verb_phrase not in _CHECKS:
            raise ValueError(f"Unknown path check: '{self.verb_phrase}'")

    def match(self, actual: Any) -> Match:
        if not isinstance(actual, (str, os.PathLike)):
            raise TypeError(
                f"path matchers need a str or os.PathLike subject, "
                f"got {type(actual).__name__}"
            )
        holds = _CHECKS[self.verb_phrase](Path(actual))
        return outcome(holds, actual, self.verb_phrase)
