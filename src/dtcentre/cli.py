"""Command-line entry point.

    dtcentre serve            # HTTP server on HOST:PORT
    dtcentre mcp --transport sse
"""

from __future__ import annotations

import argparse
import logging

from dtcentre.core.config import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DTcentre query gateway")
    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", help="Bind address (default: $HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, help="Bind port (default: $PORT or 3000)")

    mcp = subparsers.add_parser("mcp", help="Run the MCP tool server")
    mcp.add_argument("--transport", choices=["stdio", "sse"], default="stdio")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "mcp":
        from dtcentre.api.app import build_service
        from dtcentre.api.tools import create_mcp_server

        server = create_mcp_server(build_service(settings), settings)
        logger.info(f"MCP DTcentre tools starting ({args.transport})")
        server.run(transport=args.transport)
        return 0

    import uvicorn

    from dtcentre.api.app import create_app

    host = getattr(args, "host", None) or settings.host
    port = getattr(args, "port", None) or settings.port

    logger.info(f"MCP DTcentre running on port {port}")
    uvicorn.run(create_app(settings), host=host, port=port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
