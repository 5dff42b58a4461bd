"""Command line entry point.

Usage:
    svelte-docs-server                  # stdio transport
    svelte-docs-server --transport http --port 8000
"""

import argparse
import asyncio
import logging
import sys

from .config import settings
from .engine.errors import DocsServerError
from .mcp.stdio import serve_stdio
from .services import DocumentationStore

logger = logging.getLogger("svelte_docs_server")


def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the stdio protocol."""
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run_stdio(store: DocumentationStore) -> None:
    # Documentation must be published before any request is read
    await store.load()
    await serve_stdio(store)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="svelte-docs-server", description="Svelte documentation MCP server")
    parser.add_argument("--transport", choices=["stdio", "http"], default=settings.transport)
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.transport == "http":
        import uvicorn

        uvicorn.run("svelte_docs_server.server:app", host=args.host, port=args.port, reload=settings.debug)
        return 0

    try:
        asyncio.run(run_stdio(DocumentationStore(settings)))
    except DocsServerError as e:
        logger.error(f"[MCP Error] Server startup failed: {e}")
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
