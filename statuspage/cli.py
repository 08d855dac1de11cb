"""
CLI entry point for the status page service.

Usage:
    # Serve status pages over HTTP
    python -m statuspage serve --port 3000

    # Render one page to stdout
    python -m statuspage render --code 503 --lang en

    # Render a static page for another web server
    python -m statuspage render --code 404 --output static/404.html
"""

import argparse
import logging
import sys
from pathlib import Path

from statuspage.core.config import settings
from statuspage.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    import uvicorn

    logger.info("Status page service at http://%s:%d", args.host, args.port)
    logger.info("Example: http://localhost:%d/?code=404", args.port)
    uvicorn.run("statuspage.main:app", host=args.host, port=args.port, reload=False)


def cmd_render(args: argparse.Namespace) -> None:
    """Render a single status page to stdout or a file."""
    from statuspage.application.pages.dtos import RenderPageQuery
    from statuspage.domain.pages.language import resolve_language
    from statuspage.interfaces.pages.dependencies import (
        get_render_status_page_use_case,
    )

    language = resolve_language(args.lang, None)
    rendered = get_render_status_page_use_case().execute(
        RenderPageQuery(
            code=args.code,
            lang=language.value,
            contact_email=settings.contact_email,
            footer=settings.footer_text,
        )
    )

    if args.output is None:
        sys.stdout.write(rendered.html)
        return

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered.html, encoding="utf-8")
    logger.info("Wrote %s page (%s) to %s", args.code, rendered.language, output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="StatusPage CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(func=cmd_serve)

    render_parser = subparsers.add_parser("render", help="Render one status page")
    render_parser.add_argument("--code", type=int, required=True)
    render_parser.add_argument("--lang", choices=["en", "zh"], default=None)
    render_parser.add_argument("--output", default=None, help="File to write (default: stdout)")
    render_parser.set_defaults(func=cmd_render)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
