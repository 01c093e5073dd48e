"""CLI entrypoint for the blueprint visualizer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import cast

import uvicorn
from pydantic import ValidationError

from blueprint_visualizer import __version__
from blueprint_visualizer.blueprint import BlueprintError, load_blueprint, validate_blueprint
from blueprint_visualizer.config import VisualizerSettings
from blueprint_visualizer.diagram.errors import TranslationError
from blueprint_visualizer.diagram.functions import FUNCTION_KINDS
from blueprint_visualizer.diagram.renderer import markdown_block
from blueprint_visualizer.diagram.translate import translate
from blueprint_visualizer.logging import configure_logging
from blueprint_visualizer.server.app import create_app
from blueprint_visualizer.server.config import ServerSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_BLUEPRINT = 3
EXIT_TRANSLATION = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprint-visualizer",
        description="Render blueprint workflows as Mermaid sequence diagrams",
    )
    parser.add_argument(
        "--version", action="version", version=f"blueprint-visualizer {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Print the sequence diagram for a blueprint")
    render.add_argument("path", help="Blueprint YAML file, or '-' to read stdin")
    render.add_argument(
        "--markdown",
        action="store_true",
        help="Wrap the diagram in a ```mermaid fence",
    )

    subparsers.add_parser("functions", help="List the blueprint functions that can be rendered")

    serve = subparsers.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default=None, help="Bind address (default: VISUALIZER_HOST)")
    serve.add_argument(
        "--port", type=int, default=None, help="Bind port (default: VISUALIZER_PORT)"
    )

    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ServerSettings() if args.command == "serve" else VisualizerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return EXIT_CONFIG

    configure_logging(settings.log_level)

    try:
        if args.command == "render":
            blueprint = load_blueprint(_read_source(args.path))
            validate_blueprint(blueprint)
            diagram = translate(blueprint, labels=settings.labels())
            sys.stdout.write(markdown_block(diagram) if args.markdown else diagram)
            return EXIT_OK

        if args.command == "functions":
            for name in FUNCTION_KINDS:
                print(name)
            return EXIT_OK

        if args.command == "serve":
            server_settings = cast(ServerSettings, settings)
            host = args.host if args.host is not None else server_settings.host
            port = args.port if args.port is not None else server_settings.port
            logger.info("Server starting", extra={"host": host, "port": port})
            # log_config=None keeps the JSON logging configured above.
            uvicorn.run(create_app(server_settings), host=host, port=port, log_config=None)
            return EXIT_OK

        logger.error("Unknown command", extra={"command": args.command})
        return EXIT_CONFIG

    except OSError as e:
        logger.warning("Blueprint could not be read", extra={"error": str(e)})
        print(f"Cannot read blueprint: {e}", file=sys.stderr)
        return EXIT_FAILED

    except BlueprintError as e:
        logger.warning("Invalid blueprint", extra={"error": str(e)})
        print(f"Invalid blueprint: {e}", file=sys.stderr)
        return EXIT_BLUEPRINT

    except TranslationError as e:
        logger.warning("Blueprint could not be translated", extra={"error": str(e)})
        print(f"Cannot render blueprint: {e}", file=sys.stderr)
        return EXIT_TRANSLATION

    except Exception:
        logger.exception("Command failed")
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
