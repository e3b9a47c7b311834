from __future__ import annotations

import random


_ASCII = "abcdefghijklmnopqrstuvwxyz0123456789 ,.-_"
_WIDE = "áéíóúñçßøåλπжя€✓"


def _part(r: random.Random, *, max_pos: int) -> str:
    start = r.randint(1, max_pos)
    if r.random() < 0.5:
        return _pad(r, start)
    end = r.randint(start + 1, max_pos + 1)
    return f"{_pad(r, start)}-{_pad(r, end)}"


def _pad(r: random.Random, n: int) -> str:
    # Leading zeros are legal and must not change the parsed value.
    if r.random() < 0.1:
        return "0" * r.randint(1, 3) + str(n)
    return str(n)


def generate_specs(*, seed: int, count: int, max_pos: int = 40) -> list[str]:
    """Generate valid position lists, with repeats and overlaps, deterministically."""
    r = random.Random(seed)
    return [",".join(_part(r, max_pos=max_pos) for _ in range(r.randint(1, 6))) for _ in range(count)]


def generate_lines(*, seed: int, count: int, max_len: int = 30, wide: bool = True) -> list[str]:
    """Generate single lines of text; with ``wide`` some characters are multi-byte."""
    r = random.Random(seed)
    alphabet = _ASCII + (_WIDE if wide else "")
    return ["".join(r.choice(alphabet) for _ in range(r.randint(0, max_len))) for _ in range(count)]
