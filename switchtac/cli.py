"""Command-line front end: translate a JSON case document and print the code."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import translate_document
from .document import SwitchDocument, load_document
from .run_types import DuplicateDefaultPolicy, TranslationConfig
from .switch import DuplicateDefaultCaseError

DEMO_DOCUMENT = {
    "expression": "day",
    "cases": [
        {"value": 1, "statements": ["x = 1"]},
        {"value": 2, "statements": ["x = 2", "y = x * 2 + 1"]},
        {"default": True, "statements": ["x = 0"]},
    ],
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="switchtac",
        description="Translate a switch/case construct to three-address code",
    )
    parser.add_argument("file", nargs="?",
                        help="JSON document with 'expression' and 'cases'")
    parser.add_argument("--json", action="store_true",
                        help="Print {'code': [...], 'logs': [...]} as JSON")
    parser.add_argument("--logs", action="store_true",
                        help="Append the translation trace to the listing")
    parser.add_argument("--group-parentheses", action="store_true",
                        help="Honour parentheses when lowering expressions")
    parser.add_argument("--reject-duplicate-default", action="store_true",
                        help="Fail instead of letting the last default win")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable INFO logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if not args.file:
        document = SwitchDocument(**DEMO_DOCUMENT)
        if not args.json:
            print("No file provided. Using built-in demo:\n")
            print(json.dumps(DEMO_DOCUMENT, indent=2))
            print()
    else:
        try:
            document = load_document(args.file)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot read {args.file}: {exc}")

    config = TranslationConfig(
        group_parentheses=args.group_parentheses,
        duplicate_default=(
            DuplicateDefaultPolicy.REJECT
            if args.reject_duplicate_default
            else DuplicateDefaultPolicy.LAST_WINS
        ),
    )
    try:
        result = translate_document(document, config)
    except DuplicateDefaultCaseError as exc:
        parser.error(str(exc))

    if args.json:
        json.dump({"code": result.code, "logs": result.logs}, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(result.report(include_logs=args.logs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
