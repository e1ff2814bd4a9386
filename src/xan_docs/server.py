"""xan docs MCP Server - xan expression language documentation exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from xan_docs import __version__
from xan_docs.tools import browse_functions, render_help

mcp = FastMCP(
    "xan docs MCP Server",
    instructions=(
        "xan expression language documentation server. "
        "Provides tools for rendering the cheatsheet and the function, "
        "aggregation and scraping references as Markdown or terminal text, "
        "and for looking up single functions by name."
    ),
)

logger = logging.getLogger("xan-docs.server")

# Register documentation tools
render_help.register(mcp)
browse_functions.register(mcp)


def main():
    """Entry point for the xan docs MCP server."""
    parser = argparse.ArgumentParser(
        prog="xan-docs",
        description="xan docs MCP Server - xan expression language documentation over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"xan-docs {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for xan-docs loggers (default: WARNING)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info("Starting xan docs MCP server over %s", args.transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
