"""
Plain-text writers for calculated.dat.

Files are written to a temporary sibling and moved into place, so a target
is either fully rewritten or left untouched.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Sequence, Union

PathLike = Union[str, Path]


def format_value(x: float, digits: int) -> str:
    s = f"{float(x):.{digits}f}"
    # avoid "-0.000" for values that round to zero
    if float(s) == 0.0:
        s = s.lstrip("-")
    return s


def _target_mode(path: Path) -> int:
    """Mode of the existing target, else what open() would give under the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: PathLike, text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _target_mode(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        # mkstemp creates 0600
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
    return path


def write_values(path: PathLike, values: Iterable[float], digits: int) -> Path:
    """One value per line with a fixed number of decimals."""
    return write_text_atomic(path, "".join(format_value(v, digits) + "\n" for v in values))


def write_blocks(path: PathLike, blocks: Sequence[Iterable[float]], digits: int) -> Path:
    """One line per block, values separated by single spaces."""
    lines = [" ".join(format_value(v, digits) for v in block) for block in blocks]
    return write_text_atomic(path, "".join(line + "\n" for line in lines))
