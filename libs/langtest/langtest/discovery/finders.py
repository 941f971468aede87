"""Finders: where a group of test files lives on disk."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from langtest.parser.splitter import PER_DIRECTORY_FILE


class TestFinder(ABC):
    """An ordered, re-iterable collection of test file paths."""

    __test__ = False

    @abstractmethod
    def __iter__(self) -> Iterator[Path]:
        ...


@dataclass(frozen=True)
class TxtsInDir(TestFinder):
    """Every ``.txt`` file directly inside ``directory``."""

    directory: Path

    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(p for p in Path(self.directory).iterdir() if p.suffix == ".txt" and p.is_file()))


@dataclass(frozen=True)
class TestsDotTxt(TestFinder):
    """Every file named ``tests.txt`` anywhere below ``root``; one suite per directory."""

    root: Path

    def __iter__(self) -> Iterator[Path]:
        found = []
        for dirpath, _dirnames, filenames in os.walk(self.root):
            if PER_DIRECTORY_FILE in filenames:
                found.append(Path(dirpath) / PER_DIRECTORY_FILE)
        return iter(sorted(found))


FINDERS: dict[str, type[TestFinder]] = {
    "txts_in_dir": TxtsInDir,
    "tests_dot_txt": TestsDotTxt,
}


def make_finder(kind: str, path: str | os.PathLike[str]) -> TestFinder:
    """Build the finder registered under *kind* for *path*."""
    try:
        cls = FINDERS[kind]
    except KeyError:
        raise ValueError(f"unknown finder {kind!r}; expected one of {sorted(FINDERS)}") from None
    return cls(Path(path))
