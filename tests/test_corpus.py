from __future__ import annotations

from cutpy import extract_bytes, extract_chars, format_positions, parse_positions
from cutpy.testing import generate_lines, generate_specs


def test_generated_specs_parse_and_reformat() -> None:
    specs = generate_specs(seed=1, count=500)
    assert specs == generate_specs(seed=1, count=500)
    for spec in specs:
        ranges = parse_positions(spec)
        assert len(ranges) == spec.count(",") + 1
        assert parse_positions(format_positions(ranges)) == ranges


def test_chars_and_bytes_agree_on_ascii() -> None:
    specs = generate_specs(seed=7, count=100)
    lines = generate_lines(seed=7, count=100, wide=False)
    for spec, line in zip(specs, lines):
        ranges = parse_positions(spec)
        assert extract_chars(line, ranges) == extract_bytes(line, ranges)


def test_chars_follow_list_order() -> None:
    lines = generate_lines(seed=3, count=200)
    for spec, line in zip(generate_specs(seed=3, count=200), lines):
        ranges = parse_positions(spec)
        expected = "".join(line[i] for r in ranges for i in r.indices() if i < len(line))
        assert extract_chars(line, ranges) == expected
