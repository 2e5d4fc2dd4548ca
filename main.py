"""
Auxa -- Lighting Policy Entry Point.

Reads a stored profile document (JSON) and prints the derived lighting,
notification and stress response settings as JSON.

Usage:
    python main.py profile.json
    cat profile.json | python main.py
    AUXA_DEV_MODE=1 LOG_LEVEL=DEBUG python main.py profile.json

Exit codes:
    0  settings printed
    1  profile rejected (structured error printed to stdout)
    2  input could not be read or parsed (structured error printed to stdout)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from src.lib.errors import VALIDATION_ERROR, build_error_response
from src.lib.exceptions import InvalidProfileError, SerializationError
from src.lib.logging import setup_logging
from src.services.lighting import get_lighting_policy_engine

logger = logging.getLogger(__name__)


def load_document(stream: TextIO) -> dict[str, Any]:
    """Parse a profile document from a JSON stream."""
    try:
        document = json.load(stream)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"profile is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise SerializationError("profile JSON must be an object")
    return document


def _dump(payload: dict[str, Any], stdout: TextIO) -> None:
    json.dump(payload, stdout, indent=2)
    stdout.write("\n")


def run(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    stdout = stdout or sys.stdout
    parser = argparse.ArgumentParser(description="Derive Auxa lighting settings from a profile.")
    parser.add_argument(
        "profile",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="profile document JSON file (default: stdin)",
    )
    parser.add_argument("--lang", default="en", help="language for error messages")
    args = parser.parse_args(argv)

    try:
        document = load_document(args.profile)
    except SerializationError as exc:
        logger.error("profile_unreadable error=%s", exc)
        error = build_error_response(
            VALIDATION_ERROR, details={"reason": str(exc)}, lang=args.lang
        )
        _dump({"error": error}, stdout)
        return 2

    try:
        settings = get_lighting_policy_engine().calculate_from_document(document)
    except InvalidProfileError as exc:
        _dump({"error": exc.to_error_response(lang=args.lang)}, stdout)
        return 1

    _dump(settings.to_dict(), stdout)
    return 0


def cli() -> int:
    """Console entry point: configure logging, then run."""
    setup_logging()
    return run()


if __name__ == "__main__":
    sys.exit(cli())
