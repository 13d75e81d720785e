"""Reading map files line by line and checking their names."""

from __future__ import annotations

import os
from typing import Iterator, List, TextIO, Union

from treasurehunt.errors import ERROPEN, MapError

PathLike = Union[str, "os.PathLike[str]"]


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield each line of ``stream`` with its newline; the last may lack one."""
    for line in stream:
        if line:
            yield line


def _open(path: PathLike) -> TextIO:
    try:
        return open(path, "r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise MapError(ERROPEN) from exc


def count_lines(path: PathLike) -> int:
    """Number of lines in the file at ``path``.

    Raises MapError when the file cannot be opened.
    """
    with _open(path) as stream:
        return sum(1 for _ in iter_lines(stream))


def load_map(path: PathLike) -> List[str]:
    """Read the map at ``path`` as a list of rows without line terminators.

    Raises MapError when the file cannot be opened.
    """
    with _open(path) as stream:
        return [line[:-1] if line.endswith("\n") else line for line in iter_lines(stream)]


def check_extension(path: PathLike) -> bool:
    """True when ``path`` names a readable, non-directory map file.

    The name is rejected only when none of its last four characters sit
    where ``.ber`` would put them.
    """
    if os.path.isdir(path):
        return False
    try:
        with open(path, "rb"):
            pass
    except OSError:
        return False
    name = os.fspath(path)
    suffix = name[-4:].rjust(4, "\0")
    return any(have == want for have, want in zip(suffix, ".ber"))