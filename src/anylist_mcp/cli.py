from __future__ import annotations

import argparse
import logging

from .bootstrap import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MCP server for AnyList meal planning and shopping lists.")
    parser.add_argument("--log-level", default=None, help="Override ANYLIST_MCP_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server.")
    serve_parser.add_argument("--transport", choices=("stdio", "http"), default="stdio")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8765)

    subparsers.add_parser("setup", help="Configure AnyList credentials interactively.")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)

    if args.command == "serve":
        from .services.mcp import run_mcp_server

        run_mcp_server(transport=args.transport, host=args.host, port=args.port)
    elif args.command == "setup":
        from .services.setup import run_setup

        logger.debug("Starting interactive setup")
        run_setup()
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
