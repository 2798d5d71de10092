"""Small helpers: file-name parsing and a shared random generator."""

from __future__ import annotations

import os
import random

_SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}

_generator = random.Random()


def get_file_name(path: str | os.PathLike[str]) -> str:
    """Return the last path component without its extension, or "" if there is none."""
    text = os.fspath(path)
    cut = max(text.rfind(sep) for sep in _SEPARATORS)
    name = text[cut + 1:]
    if name in ("", ".", ".."):
        return name
    dot = name.rfind(".")
    return name[:dot] if dot > 0 else name


def seed(value: int | float | str | bytes | None) -> None:
    """Seed the shared generator so that later draws repeat."""
    _generator.seed(value)


def get_int(minimum: int, maximum: int) -> int:
    """Return a random integer in the closed range ``[minimum, maximum]``."""
    return _generator.randint(minimum, maximum)


def get_float(minimum: float, maximum: float) -> float:
    """Return a random float between ``minimum`` and ``maximum``."""
    if minimum > maximum:
        raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
    return _generator.uniform(minimum, maximum)