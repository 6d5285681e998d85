"""Marker-delimited region replacement and section lookup for markdown docs."""

from __future__ import annotations

import re
from typing import Optional, Sequence

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)


def find_section_header(contents: str, header: str) -> Optional[str]:
    pattern = re.compile(rf"^#+ {re.escape(header)}[ \t]*\r?$", re.MULTILINE)
    match = pattern.search(contents)
    return match.group(0).rstrip("\r") if match else None


def splice(document: str, start: int, end: int, content: str) -> str:
    return f"{document[:start]}{content}{document[end:]}"


def find_marker_region(document: str, begin: str, end: str) -> Optional[tuple[int, int]]:
    start_index = document.find(begin)
    if start_index == -1:
        return None
    end_index = document.find(end, start_index + len(begin))
    if end_index == -1:
        return None
    return start_index, end_index + len(end)


def replace_marker_region(document: str, begin: str, end: str, content: str) -> str:
    """Replace everything between ``begin`` and ``end`` with ``content``.

    Bytes outside the markers are left untouched. A document without both
    markers is returned as-is.
    """
    region = find_marker_region(document, begin, end)
    if region is None:
        return document
    return splice(document, region[0], region[1], f"{begin}\n\n{content}\n\n{end}")


def replace_or_create_header(contents: str, header_lines: Sequence[str], marker: str) -> str:
    frontmatter = ""
    body = contents
    match = _FRONTMATTER_RE.match(contents)
    if match:
        frontmatter = contents[: match.end()]
        body = contents[match.end() :]

    lines = body.split("\n")
    marker_index = next(
        (index for index, line in enumerate(lines) if line.rstrip("\r") == marker), None
    )
    if marker_index is not None:
        rest = lines[marker_index + 1 :]
    else:
        title_index = None
        for index, line in enumerate(lines):
            if line.startswith("```"):
                break
            if line.startswith("# "):
                title_index = index
                break
        rest = lines if title_index is None else lines[:title_index] + lines[title_index + 1 :]
        if rest and rest[0].strip():
            rest = ["", *rest]

    return frontmatter + "\n".join(header_lines) + "\n" + "\n".join(rest)
