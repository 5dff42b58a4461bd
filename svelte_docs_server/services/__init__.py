"""Services: documentation fetching and the published index store."""

from .documentation import DocumentationStore
from .fetcher import fetch_documentation

__all__ = ["DocumentationStore", "fetch_documentation"]
