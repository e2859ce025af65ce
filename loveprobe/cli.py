#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
loveprobe - command line entry point

Prints the kind of LÖVE project found at a path and the version it declares,
or only the required version with ``--required``.

Exit codes: 0 when a version was found, 1 on inspection or configuration
errors, 2 when the path is not a recognisable project.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .core import ProjectInspector
from .exceptions import BaseError, ConfigurationError, InspectionError
from .logging_config import setup_logging
from .version import load_version

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN = 2


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses command line arguments."""
    parser = argparse.ArgumentParser(
        prog="loveprobe",
        description="Detect the LÖVE version a project folder or .love package requires",
    )
    parser.add_argument("path", nargs="?", help="Project folder or .love package to inspect")
    parser.add_argument(
        "--required",
        action="store_true",
        help="Only print the required version; fail if it cannot be determined",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--config", metavar="FILE", help="Configuration file (default: bundled config.json)")
    parser.add_argument("--log-json", action="store_true", help="Emit structured JSON log lines")
    parser.add_argument("--version", action="store_true", help="Show version information")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    return parser.parse_args(argv)


def _emit_error(error: BaseError, as_json: bool) -> None:
    if as_json:
        print(json.dumps(error.to_dict()))
    else:
        print(f"Error: {error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run an inspection."""
    args = parse_arguments(argv)

    if args.version:
        print(f"loveprobe v{load_version()}")
        return EXIT_OK

    if not args.path:
        print("Error: a project path is required", file=sys.stderr)
        return EXIT_ERROR

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        setup_logging(log_level="WARNING", structured_json=args.log_json or None)
        logger.error("Invalid configuration: %s", e)
        _emit_error(e, args.json)
        return EXIT_ERROR

    log_cfg = settings.logging
    setup_logging(
        log_level="DEBUG" if args.debug else log_cfg.level,
        log_dir=log_cfg.log_dir,
        enable_file_logging=log_cfg.file_logging,
        structured_json=True if (args.log_json or log_cfg.json_output) else None,
    )
    logger.debug("Inspecting %s", args.path)

    inspector = ProjectInspector.from_config(settings)

    try:
        if args.required:
            version = inspector.required_version(args.path)
            if args.json:
                print(json.dumps({"path": str(args.path), "version": str(version)}))
            else:
                print(version)
            return EXIT_OK

        info = inspector.classify(args.path)
    except InspectionError as e:
        logger.debug("Inspection failed: %s", e.to_dict())
        _emit_error(e, args.json)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(info.to_dict()))
    else:
        print(info)
    return EXIT_UNKNOWN if info.is_unknown else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
