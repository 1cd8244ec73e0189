#!/usr/bin/env python3
"""
PhishScope CLI - Command Line Interface

Scores emails exported as JSON by the webmail extractor and validates the
active configuration.
"""

import argparse
import json
import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple

from phishscope.config.logging import configure_logging, get_logger
from phishscope.core.exceptions import PhishScopeError
from phishscope.schemas.email import AnalysisResult, RiskLevel

logger = get_logger(__name__)

RISK_ICONS = {
    RiskLevel.LOW: "🟢",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.HIGH: "🔴",
}


def _read_documents(path: str, stdin: TextIO) -> List[Tuple[str, Any]]:
    """Load one JSON document (object or list of objects) from a file or stdin."""
    if path == "-":
        data = json.load(stdin)
    else:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)

    if isinstance(data, list):
        return [(f"{path}[{i}]", item) for i, item in enumerate(data)]
    return [(path, data)]


def _print_result(label: str, result: AnalysisResult, out: TextIO) -> None:
    icon = RISK_ICONS[result.risk_level]
    print(f"{icon} {label}: {result.score}/100 ({result.risk_level.value.upper()} risk)", file=out)
    for flag in result.flags:
        print(f"  • {flag}", file=out)


def analyze_command(args, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> bool:
    """Score every email document named on the command line."""
    from phishscope.services.risk_scorer import get_risk_scorer

    stdin = stdin or sys.stdin
    out = out or sys.stdout

    scorer = get_risk_scorer()
    success = True
    results = []

    for path in args.files or ["-"]:
        try:
            documents = _read_documents(path, stdin)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Failed to read email payload", path=path, error=str(e))
            print(f"❌ {path}: {e}", file=out)
            success = False
            continue

        for label, payload in documents:
            try:
                result = scorer.analyze_payload(payload)
            except PhishScopeError as e:
                logger.error("Rejected email payload", source=label, error=str(e))
                print(f"❌ {label}: {e}", file=out)
                success = False
                continue

            if args.json:
                results.append({"source": label, **result.model_dump(mode="json")})
            else:
                _print_result(label, result, out)

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False), file=out)

    return success


def validate_config_command(args) -> bool:
    """Validate application configuration."""
    from phishscope.config.validator import validate_configuration

    print("⚙️  Validating configuration...")
    is_valid, _ = validate_configuration(print_report=True, raise_on_error=False)
    return is_valid


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="phishscope",
        description="PhishScope CLI - heuristic phishing risk scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze email.json             # Score one exported email
  %(prog)s analyze batch.json --json      # Score a list of emails, JSON output
  cat email.json | %(prog)s analyze       # Read the email from stdin
  %(prog)s config                         # Validate configuration
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Score email JSON documents")
    analyze_parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="JSON file with one email object or a list of them ('-' for stdin)",
    )
    analyze_parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers.add_parser("config", help="Validate configuration")

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging()

    success = True
    try:
        if args.command == "analyze":
            success = analyze_command(args)
        elif args.command == "config":
            success = validate_config_command(args)
        else:
            parser.print_help()
    except KeyboardInterrupt:
        print("\n👋 Interrupted by user")
        success = False

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
