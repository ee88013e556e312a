"""
Vulnerabilities reported by `npm audit` that were reviewed and accepted.

Entries are keyed by the dependency chain (`path`) that `npm audit` reports for a
finding. Every finding with that exact path is suppressed, so a new occurrence
introduced through a different chain still fails the build.
"""
import logging
import typing
from collections import Counter

from npm_audit_filter.model.allow_list_entry import AllowListEntry

ALLOW_LIST: typing.Tuple[AllowListEntry, ...] = (
    AllowListEntry(
        path="webpack-dev-server>chokidar>glob-parent",
        advisory_url="https://github.com/advisories/GHSA-ww39-953v-wcq6",
        justification="Dev server only, globs are never built from user input.",
    ),
    AllowListEntry(
        path="mkdirp>minimist",
        advisory_url="https://github.com/advisories/GHSA-vh95-rmgr-6w4m",
        justification="Build tooling only, arguments are fixed in package.json scripts.",
    ),
    AllowListEntry(
        path="jest>jest-cli>yargs>yargs-parser",
        advisory_url="https://github.com/advisories/GHSA-p9pc-299p-vxgp",
        justification="Test runner only, never shipped in the bundle.",
    ),
)


def get_allowed_paths(entries: typing.Iterable[AllowListEntry] = ALLOW_LIST) -> typing.FrozenSet[str]:
    return frozenset(entry.path for entry in entries)


def check_allow_list_sanity(entries: typing.Iterable[AllowListEntry] = ALLOW_LIST) -> bool:
    # each path should have only one allow list entry
    duplicates = sorted(path for path, count in Counter(entry.path for entry in entries).items() if count > 1)
    if duplicates:
        logging.error("Allow list contains duplicate paths: %s", ", ".join(duplicates))
        return False
    return True
