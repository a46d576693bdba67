"""
CLI entry point for the online store.

Usage:
    # Serve every API in one process
    python -m onlinestore.cli serve

    # Serve one API on its own default port
    python -m onlinestore.cli serve --service catalog

    # Override host and port
    python -m onlinestore.cli serve --service orders --host 127.0.0.1 --port 9000
"""

import argparse
import logging

from onlinestore.core.config import ALL_SERVICES

logger = logging.getLogger(__name__)

ALL = "all"
DEFAULT_PORTS = {
    "catalog": 5001,
    "customers": 5002,
    "orders": 5003,
    "payments": 5004,
    ALL: 8000,
}


def services_for(choice: str) -> list[str]:
    """Return the bounded contexts to mount for a --service choice."""
    return list(ALL_SERVICES) if choice == ALL else [choice]


def cmd_serve(args: argparse.Namespace) -> None:
    """Start a uvicorn server for the selected service(s)."""
    import uvicorn

    from onlinestore.main import create_app

    port = args.port or DEFAULT_PORTS[args.service]
    app = create_app(services=services_for(args.service))
    logger.info("Serving %s at http://%s:%d", args.service, args.host, port)
    uvicorn.run(app, host=args.host, port=port, reload=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="OnlineStoreMVP CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--service",
        choices=[*ALL_SERVICES, ALL],
        default=ALL,
        help="Service to mount (default: all)",
    )
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port (default: per-service port, 8000 for all)",
    )
    serve_parser.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
