#!/usr/bin/env python3
"""
Filters accepted vulnerabilities out of `npm audit --json` output.

Reads the audit report from stdin, removes every finding whose dependency chain
is in the allow list and prints the remaining findings. Exits with 1 if any
finding is left, so it can replace `npm audit` in a pass/fail build gate:

  npm audit --json | npm-audit-filter
"""
import argparse
import json
import logging
import sys
import typing

from npm_audit_filter.allow_list import check_allow_list_sanity, get_allowed_paths
from npm_audit_filter.vulnerability_filter import Finding, filter_vulnerabilities, get_unused_allowed_paths

AUDIT_TOOL = "npm audit"
USAGE = "Usage: npm audit --json | npm-audit-filter"


def format_report_header(count: int, audit_tool: str = AUDIT_TOOL) -> str:
    suffix = "y" if count == 1 else "ies"
    return f"Found {count} unrecognized vulnerabilit{suffix} from `{audit_tool}`:"


def reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def format_findings(findings: typing.List[Finding]) -> str:
    return json.dumps(findings, indent=2, ensure_ascii=False)


def run(raw_input: bytes, allowed_paths: typing.AbstractSet[str]) -> int:
    """Filter the raw audit report and print what is left. Returns the exit status."""
    if len(raw_input) == 0:
        print(USAGE, file=sys.stderr)
        return 1

    audits = json.loads(raw_input.decode("utf-8"), parse_constant=reject_constant)
    findings = filter_vulnerabilities(audits, allowed_paths)

    for path in get_unused_allowed_paths(audits, allowed_paths):
        logging.info("Allow list entry '%s' matches no reported vulnerability", path)

    if not findings:
        logging.debug("All reported vulnerabilities are in the allow list")
        return 0

    print(format_report_header(len(findings)))
    print(format_findings(findings))
    return 1


def main(argv: typing.Optional[typing.List[str]] = None):
    parser = argparse.ArgumentParser(description="Remove allow-listed vulnerabilities from npm audit JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose mode")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    if not check_allow_list_sanity():
        logging.warning("Allow list is not sane, filtering with it anyway")

    raw_input = sys.stdin.buffer.read()
    sys.exit(run(raw_input, get_allowed_paths()))


if __name__ == "__main__":
    main()
