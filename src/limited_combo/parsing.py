"""Availability map parsing for command-line and file input."""
from __future__ import annotations

import re
from pathlib import Path

from .types import InvalidConfiguration


def normalize_name(name: str) -> str:
    name = name.strip()
    name = name.replace("\u2019", "'")
    name = name.replace("\u2010", "-")
    name = name.replace("\u2011", "-")
    name = name.replace("\u2013", "-")
    name = re.sub(r"\s+", " ", name)
    return name


def _add(counts: dict[str, int], name: str, count: int) -> None:
    name = normalize_name(name)
    if not name:
        raise InvalidConfiguration("Empty atom name in availability list")
    counts[name] = counts.get(name, 0) + count


def _parse_entry(entry: str) -> tuple[str, int]:
    """One entry: ``2x Name``, ``2 Name``, ``Name: 2``, ``Name=2`` or ``Name``."""
    match = re.match(r"^(\d+)\s*[xX]?\s+(.+)$", entry)
    if match:
        name, count = match.group(2), int(match.group(1))
    else:
        match = re.match(r"^(.+?)\s*[:=]\s*(-?\d+)$", entry)
        if match:
            name, count = match.group(1), int(match.group(2))
        else:
            name, count = entry, 1

    if re.search(r"[:=]", name):
        raise InvalidConfiguration(f"Malformed availability entry: {entry!r}")
    return name, count


def _parse_line(counts: dict[str, int], line: str) -> None:
    for raw_entry in line.split(","):
        entry = raw_entry.strip()
        if entry:
            _add(counts, *_parse_entry(entry))


def parse_pairs(text: str) -> dict[str, int]:
    """Parse ``A:2,B:1`` (or ``A=2``) pairs; a bare name counts once."""
    counts: dict[str, int] = {}
    _parse_line(counts, text)
    return counts


def parse_plain_text(text: str) -> dict[str, int]:
    """Parse line-oriented text; each line may hold several comma-separated entries."""
    counts: dict[str, int] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("#") or line.startswith("//"):
            continue
        _parse_line(counts, line)
    return counts


def parse_counts(text: str) -> dict[str, int]:
    """Parse an availability map from comma pairs, lines, or a mix of both."""
    return parse_plain_text(text)


def load_counts(path: Path) -> dict[str, int]:
    return parse_plain_text(Path(path).read_text(encoding="utf-8"))
