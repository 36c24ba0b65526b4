from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Tuple

from packages.engine import WORD_LENGTH

# Packaged reference list (one lowercase word per line)
DEFAULT_ANSWERS_PATH = Path(__file__).resolve().parent / "data" / "answers_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


@lru_cache(maxsize=None)
def _load(path: str) -> Tuple[str, ...]:
    out = []
    for ln in read_lines(path):
        w = ln.strip().lower()
        if len(w) == WORD_LENGTH and w.isalpha():
            out.append(w)
    return tuple(out)


def load_answers(path: Path | str | None = None) -> Tuple[str, ...]:
    """
    Return the reference answer list, in file order.

    The result is an immutable tuple shared process-wide (cached per path);
    recommenders take their own mutable working view of it.
    """
    p = Path(path) if path is not None else DEFAULT_ANSWERS_PATH
    return _load(str(p.resolve()))
