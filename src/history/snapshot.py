"""Best-effort manifest parsing at a point in history.

The manifest grammar is deliberately line-oriented: a declaration is a line
that, after leading whitespace, starts with the declaration keyword followed
by a quoted dependency name and optionally a comma and a quoted version
specifier:

    gem "rails", "7.0.4"
    gem 'pry'

Everything else (comments, groups, conditionals, blank lines, other
directives) is ignored. Options after the specifier are not captured.
"""

import re
import subprocess
from pathlib import Path

from common.env import env
from common.logger import get_logger

from .git_utils import VersionControlGateway
from .models import Snapshot

logger = get_logger(__name__)


class ManifestGrammar:
    """Line pattern for dependency declarations."""

    def __init__(self, keyword: str | None = None):
        """Initialize the grammar.

        Args:
            keyword: Declaration keyword (default: MANIFEST_KEYWORD or "gem")
        """
        self.keyword = keyword or env.declaration_keyword()
        self.pattern = re.compile(
            rf"""^\s*{re.escape(self.keyword)}\s+["']([^"']+)["'](?:\s*,\s*["']([^"']+)["'])?"""
        )

    def parse(self, text: str) -> Snapshot:
        """
        Extract dependency declarations from manifest text.

        Later declarations of the same name overwrite earlier ones.

        Args:
            text: Full manifest content

        Returns:
            Mapping of dependency name to version specifier (None if unconstrained)
        """
        dependencies: Snapshot = {}
        for line in text.splitlines():
            match = self.pattern.match(line)
            if match:
                name, version = match.groups()
                dependencies[name] = version
        return dependencies


def parse_manifest(text: str, grammar: ManifestGrammar | None = None) -> Snapshot:
    """Parse manifest text with the given grammar (default keyword if omitted)."""
    return (grammar or ManifestGrammar()).parse(text)


def parse_at(
    repo_path: Path,
    commit_id: str,
    manifest: str,
    gateway: VersionControlGateway,
    grammar: ManifestGrammar | None = None,
) -> Snapshot:
    """
    Parse the manifest as it was at a commit.

    A manifest that cannot be read at that commit is treated as absent,
    so the snapshot is empty.

    Args:
        repo_path: Path to git repository
        commit_id: Commit hash to read the manifest at
        manifest: Manifest path relative to the repository root
        gateway: Version-control gateway to query
        grammar: Declaration grammar (default keyword if omitted)

    Returns:
        Snapshot of declared dependencies
    """
    try:
        content = gateway.show_file_at(repo_path, commit_id, manifest)
    except (OSError, subprocess.SubprocessError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {manifest} at {commit_id[:7]}, treating as empty: {e}")
        return {}

    return parse_manifest(content, grammar)
