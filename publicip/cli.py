from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from publicip.config import load_settings
from publicip.errors import PublicIPError
from publicip.execute import execute
from publicip.models import OutputDestination
from publicip.sinks import FileSink
from publicip.sources import SOURCES, build_source


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="publicip",
        description="Fetch this host's public IP address and write it to a file",
    )
    parser.add_argument("output", help="file to write the IP address to")
    parser.add_argument("--config", default=None, help="optional YAML settings file")
    parser.add_argument("--source", choices=sorted(SOURCES), default=None, help="IP lookup service")
    parser.add_argument("--verbose", action="store_true", default=False)
    return parser


def run(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.output:
        parser.error("output path must not be empty")
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("publicip").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_settings(args.config)
        destination = OutputDestination(args.output, mode=settings.file_mode)
        execute(
            build_source(settings, args.source),
            FileSink(create_parents=settings.create_parents),
            destination,
        )
    except PublicIPError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Public IP written to {destination.path}")
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
