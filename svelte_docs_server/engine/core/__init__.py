"""Engine core module.

This module contains the document data structures and the segmenter
that builds them from raw text.
"""

from .document import DocumentationIndex, Section
from .segmenter import (
    START_SECTION_HEADER,
    START_SECTION_ID,
    build_index,
    is_header,
    segment,
    slugify,
)

__all__ = [
    # Document structures
    "Section",
    "DocumentationIndex",
    # Segmentation
    "segment",
    "slugify",
    "is_header",
    "build_index",
    "START_SECTION_ID",
    "START_SECTION_HEADER",
]
