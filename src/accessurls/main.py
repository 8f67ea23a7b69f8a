"""CLI entrypoint for the access URL tool."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from accessurls import __version__
from accessurls.config import get_settings
from accessurls.view import print_result, run_access_urls


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show the public access URLs of an application's Services and Ingresses.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--namespace",
        "-n",
        default=None,
        help="Kubernetes namespace of the application (default: from env or 'default')",
    )
    parser.add_argument(
        "--selector",
        "-l",
        default=None,
        help="Label selector matching the application's Services and Ingresses",
    )
    parser.add_argument(
        "--service",
        action="append",
        default=[],
        dest="services",
        metavar="NAME",
        help="Service to inspect by name (repeatable; overrides --selector for Services)",
    )
    parser.add_argument(
        "--ingress",
        action="append",
        default=[],
        dest="ingresses",
        metavar="NAME",
        help="Ingress to inspect by name (repeatable; overrides --selector for Ingresses)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the section as JSON instead of a table",
    )
    parser.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="Path to kubeconfig (default: KUBECONFIG env or ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubernetes context to use",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for accessurls CLI."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    logger = logging.getLogger("accessurls")
    if not args.verbose:
        logger.setLevel(logging.WARNING)

    try:
        settings = get_settings()
        if args.kubeconfig:
            settings.kubeconfig = args.kubeconfig
        if args.json:
            settings.output = "json"

        result = run_access_urls(
            namespace=args.namespace,
            label_selector=args.selector,
            service_names=args.services,
            ingress_names=args.ingresses,
            context=args.context or settings.context,
            settings=settings,
        )
        print_result(result, Console(), as_json=settings.output == "json")
        return 0
    except Exception as e:
        logging.exception("Failed to build access URLs")
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
