from dataclasses import dataclass


@dataclass(frozen=True)
class AllowListEntry:
    """dependency chain that introduces the vulnerability (e.g., webpack>watchpack>chokidar)"""

    path: str
    """advisory describing the accepted vulnerability"""
    advisory_url: str
    """why the maintainers accepted the vulnerability"""
    justification: str

    def __post_init__(self):
        """Validate field values after initialization"""
        assert self.path is not None and len(self.path) > 0
        assert self.advisory_url is not None and self.advisory_url.startswith("https://")
        assert self.justification is not None and len(self.justification) > 0
