"""
Application entry points for the user roster service.

Usage:
    # Run FastAPI server (production - uses Granian)
    python main.py api

    # Run FastAPI server (development - uses Uvicorn with hot-reload)
    python main.py api --dev

    # Apply database migrations
    python main.py migrate
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent


def run_api_granian() -> int:
    """Run the FastAPI application with Granian (production)."""
    try:
        from granian import Granian
        from granian.constants import Interfaces

        from src.config import get_settings

        settings = get_settings()

        host = os.getenv("SERVER__HOST", "0.0.0.0")
        port = int(os.getenv("SERVER__PORT", "8000"))
        workers = int(os.getenv("SERVER__WORKERS", "4"))

        print(f"Starting Granian server on {host}:{port} with {workers} workers...")

        server = Granian(
            target="src.api.main:app",
            address=host,
            port=port,
            workers=workers,
            interface=Interfaces.ASGI,
            log_level="debug" if settings.app.debug else "info",
        )
        server.serve()
        return 0
    except ImportError as exc:
        print(f"Error: {exc}. Install with: pip install '.[api]'", file=sys.stderr)
        return 1


def run_api_uvicorn() -> int:
    """Run the FastAPI application with Uvicorn (development, with hot-reload)."""
    try:
        import uvicorn

        from src.config import get_settings

        settings = get_settings()

        host = os.getenv("SERVER__HOST", "127.0.0.1")
        port = int(os.getenv("SERVER__PORT", "8000"))

        print(f"Starting Uvicorn dev server on {host}:{port} with hot-reload...")

        uvicorn.run(
            "src.api.main:app",
            host=host,
            port=port,
            reload=True,
            log_level="debug" if settings.app.debug else "info",
        )
        return 0
    except ImportError as exc:
        print(f"Error: {exc}. Install with: pip install '.[dev]'", file=sys.stderr)
        return 1


def run_migrations(revision: str) -> int:
    """Upgrade the database schema to ``revision`` with Alembic."""
    from alembic import command
    from alembic.config import Config

    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(config, revision)
    return 0


def main() -> int:
    """Main entry point with subcommand routing."""
    parser = argparse.ArgumentParser(
        description="User Roster Service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    api_parser = subparsers.add_parser("api", help="Run FastAPI server")
    api_parser.add_argument(
        "--dev",
        action="store_true",
        help="Use Uvicorn with hot-reload (development mode)",
    )

    migrate_parser = subparsers.add_parser("migrate", help="Apply database migrations")
    migrate_parser.add_argument(
        "revision",
        nargs="?",
        default="head",
        help="Target revision (default: head)",
    )

    args = parser.parse_args()

    if args.command == "api":
        if args.dev:
            return run_api_uvicorn()
        return run_api_granian()
    elif args.command == "migrate":
        return run_migrations(args.revision)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
