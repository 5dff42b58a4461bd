"""Base infrastructure for tool and resource handlers.

Each handler receives a HandlerContext holding the published
documentation index and returns a pydantic result model.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

if TYPE_CHECKING:
    from ..core.document import DocumentationIndex


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    The index is read-only for handlers; a refresh builds a new
    context around the newly published index.
    """

    # Published documentation (never mutated)
    index: "DocumentationIndex"

    # URI scheme for section resources, e.g. "svelte"
    resource_scheme: str = "svelte"

    # Default number of search hits
    search_limit: int = 3


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, Any],
]
