"""Document data structures for the documentation engine.

This module contains the core data structures for representing
the segmented documentation and its lookup index.
"""

from dataclasses import dataclass, field


@dataclass
class Section:
    """A documentation section.

    A contiguous span of the source document from one header line
    (inclusive) to the next header line (exclusive).

    Attributes:
        id: Slug derived from the header text, unique within a document
        header: Trimmed header line, including its leading ``# `` marker
        content: Trimmed, non-empty content lines in source order
    """

    id: str
    header: str
    content: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Content lines joined with newlines."""
        return "\n".join(self.content)


@dataclass
class DocumentationIndex:
    """Index of the loaded documentation.

    Built once per successful fetch and never mutated afterwards; a
    refresh publishes a new index instead.

    Attributes:
        sections: Sections in document order
        source_url: Where the raw text came from (empty for local text)
        total_chars: Character count of the raw text
    """

    sections: list[Section] = field(default_factory=list)
    source_url: str = ""
    total_chars: int = 0
    _by_id: dict[str, Section] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for section in self.sections:
            self._by_id.setdefault(section.id, section)

    def get(self, section_id: str) -> Section | None:
        """Look up a section by id."""
        return self._by_id.get(section_id)

    @property
    def total_lines(self) -> int:
        return sum(len(section.content) for section in self.sections)

    def __len__(self) -> int:
        return len(self.sections)
