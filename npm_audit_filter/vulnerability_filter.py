import typing

# parsed `npm audit --json` output, passed through unmodified
AuditDocument = typing.Dict[str, typing.Any]
Finding = typing.Dict[str, typing.Any]


def flatten_findings(audits: AuditDocument) -> typing.List[Finding]:
    """Concatenate the `resolves` of every action, in document order."""
    return [finding for action in audits["actions"] for finding in action["resolves"]]


def filter_vulnerabilities(audits: AuditDocument, allowed_paths: typing.AbstractSet[str]) -> typing.List[Finding]:
    """
    Return the findings of `audits` whose `path` is not in `allowed_paths`.

    Paths are compared as exact strings. Order and duplicates are kept, and the
    returned findings are the objects of the input document. Missing
    `actions`, `resolves` or `path` keys raise KeyError.
    """
    return [finding for finding in flatten_findings(audits) if finding["path"] not in allowed_paths]


def get_unused_allowed_paths(audits: AuditDocument, allowed_paths: typing.AbstractSet[str]) -> typing.List[str]:
    """Allowed paths that match no reported finding, sorted."""
    reported_paths = {finding["path"] for finding in flatten_findings(audits)}
    return sorted(allowed_paths - reported_paths)
