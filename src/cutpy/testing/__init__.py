from __future__ import annotations

from .corpus import generate_lines, generate_specs

__all__ = ["generate_lines", "generate_specs"]
