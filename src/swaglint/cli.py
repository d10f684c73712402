"""
Lint a Swagger 2.0 document from the command line.

Usage:
    # Lint a JSON document
    swaglint --input swagger.json

    # Lint a YAML document with a configuration file
    swaglint --input swagger.yaml --config .swaglint.yml

    # Machine-readable output
    swaglint --input swagger.json --format json

    # Show the registered checkers and the rule names they report
    swaglint --list-rules

Exit status is 0 when the document is clean, 1 when violations were found
and 2 when the document or configuration could not be loaded.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from swaglint.config import LintConfig, load_config
from swaglint.errors import SwagLintError
from swaglint.loader import load_document
from swaglint.rules import RulesRegistry, get_default_registry
from swaglint.validator import ContractValidator, ViolationReport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_FATAL = 2

SUCCESS_MESSAGE = "File follows the expected Swagger 2.0 rules"


def format_text(report: ViolationReport) -> str:
    """Render a report the way it is printed on the console."""
    lines = []
    for resource, messages in report.as_dict().items():
        lines.append("")
        lines.append(resource)
        for message in messages:
            lines.append(f"\t{message}")

    if report.has_violations:
        lines.append("")
        lines.append(f"Total violations: {report.total}")
    else:
        lines.append(SUCCESS_MESSAGE)

    return "\n".join(lines)


def format_json(report: ViolationReport) -> str:
    return json.dumps({"violations": report.as_dict(), "total": report.total}, indent=2)


def format_rules(registry: RulesRegistry) -> str:
    """Describe every registered checker and the rule names it reports."""
    lines = []
    for name in registry.list_rules():
        rule = registry.get(name)
        lines.append(f"{rule.name}: {rule.description}")
        for rule_name in rule.rule_names:
            lines.append(f"\t{rule_name}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swaglint",
        description="Check a Swagger 2.0 document against API naming conventions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="Swagger 2.0 JSON (or YAML) file",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="YAML lint configuration file",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--list-rules",
        "-l",
        action="store_true",
        help="List the registered checkers and their rule names",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_rules:
        print(format_rules(get_default_registry()))
        return EXIT_OK

    if args.input is None:
        parser.error("the following arguments are required: --input/-i")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config) if args.config else LintConfig()
        document = load_document(args.input)
    except SwagLintError as e:
        logger.error(str(e))
        return EXIT_FATAL

    report = ContractValidator(config).validate(document)

    if args.format == "json":
        print(format_json(report))
    else:
        print(format_text(report))

    return EXIT_VIOLATIONS if report.has_violations else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
