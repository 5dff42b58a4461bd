"""Document segmentation.

Turns the raw documentation text into an ordered list of sections.
Every content line lands in exactly one section, and the result always
contains at least the synthetic leading section.
"""

import logging
import re

from ..errors import EmptyDocument, NoSectionsProduced
from .document import DocumentationIndex, Section

logger = logging.getLogger(__name__)

HEADER_MARKER = "# "

# Collects content that appears before the first header
START_SECTION_ID = "start-of-svelte-documentation"
START_SECTION_HEADER = "# Start of Svelte documentation"

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_LEADING_RESIDUE = re.compile(r"^[#\s-]+")


def slugify(header: str) -> str:
    """Derive a section id from header text.

    Lowercases, collapses every run of characters outside ``[a-z0-9]``
    into a single ``-`` and strips the leading marker residue, so
    ``"# Routing"`` becomes ``"routing"``.
    """
    slug = _NON_ALNUM_RUN.sub("-", header.lower())
    return _LEADING_RESIDUE.sub("", slug) or "section"


def is_header(line: str) -> bool:
    return line.strip().startswith(HEADER_MARKER)


def _unique_id(slug: str, seen: dict[str, int]) -> str:
    # First occurrence keeps the bare slug, later ones get -2, -3, ...
    count = seen.get(slug, 0) + 1
    seen[slug] = count
    if count == 1:
        return slug
    candidate = f"{slug}-{count}"
    while candidate in seen:
        count += 1
        candidate = f"{slug}-{count}"
    seen[slug] = count
    seen[candidate] = 1
    return candidate


def segment(raw_text: str) -> list[Section]:
    """Split raw documentation text into sections.

    Args:
        raw_text: The fetched document

    Returns:
        Sections in the order their headers appear in the source

    Raises:
        EmptyDocument: If the text is empty or contains only whitespace
        NoSectionsProduced: If no section was produced
    """
    if not raw_text:
        raise EmptyDocument()

    lines = [line.strip() for line in raw_text.split("\n") if line.strip()]
    if not lines:
        raise EmptyDocument("No content lines found in documentation")

    sections: list[Section] = []
    seen_ids: dict[str, int] = {START_SECTION_ID: 1}
    current = Section(id=START_SECTION_ID, header=START_SECTION_HEADER)

    for line in lines:
        if line == START_SECTION_HEADER:
            continue
        if is_header(line):
            sections.append(current)
            current = Section(id=_unique_id(slugify(line), seen_ids), header=line)
        else:
            current.content.append(line)

    sections.append(current)

    if not sections:
        raise NoSectionsProduced()

    logger.debug(f"Segmented {len(lines)} lines into {len(sections)} sections")
    return sections


def build_index(raw_text: str, source_url: str = "") -> DocumentationIndex:
    """Segment raw text and wrap the result in a lookup index."""
    return DocumentationIndex(
        sections=segment(raw_text),
        source_url=source_url,
        total_chars=len(raw_text),
    )
