"""Error taxonomy for the documentation server.

Each error carries the JSON-RPC error code the MCP dispatcher reports
to the client. An invalid query and an empty search result are not
errors: they are search outcomes (see ``SearchStatus``).
"""

# ============ JSON-RPC CODES ============

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class DocsServerError(Exception):
    """Base class for caller-visible server errors."""

    code: int = INTERNAL_ERROR


# ============ PROTOCOL ============


class ParseError(DocsServerError):
    code = PARSE_ERROR

    def __init__(self, message: str = "Parse error"):
        super().__init__(message)


class InvalidRequest(DocsServerError):
    """The message is not a JSON-RPC request object."""

    code = INVALID_REQUEST

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class InvalidParams(DocsServerError):
    code = INVALID_PARAMS


class MethodNotFound(DocsServerError):
    code = METHOD_NOT_FOUND

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method not found: {method}")


# ============ SEGMENTATION ============


class EmptyDocument(DocsServerError):
    """Segmentation received empty (or whitespace-only) text."""

    def __init__(self, message: str = "Received empty content from documentation URL"):
        super().__init__(message)


class NoSectionsProduced(DocsServerError):
    """Segmentation finished without producing a single section."""

    def __init__(self, message: str = "No documentation sections were loaded"):
        super().__init__(message)


# ============ RESOURCE LOOKUP ============


class InvalidResourceUri(DocsServerError):
    code = INVALID_REQUEST

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Invalid URI format: {uri}")


class SectionNotFound(DocsServerError):
    code = INVALID_REQUEST

    def __init__(self, section_id: str):
        self.section_id = section_id
        super().__init__(f"Documentation section {section_id} not found")


class SectionContentEmpty(DocsServerError):
    """A ``/content`` read addressed a section that has no content lines."""

    code = INVALID_REQUEST

    def __init__(self, section_id: str, header: str):
        self.section_id = section_id
        self.header = header
        super().__init__(f"Section {section_id} has no content. Header: {header}")


# ============ DOCUMENT LOADING ============


class FetchExhausted(DocsServerError):
    """Every fetch attempt failed."""

    def __init__(self, attempts: int, last_error: Exception | None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Failed to fetch documentation after {attempts} attempt(s): {last_error}"
        )


class DocumentationNotLoaded(DocsServerError):
    def __init__(self, message: str = "No documentation loaded"):
        super().__init__(message)


# ============ TOOLS ============


class UnknownTool(DocsServerError):
    code = METHOD_NOT_FOUND

    def __init__(self, name: str | None):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
