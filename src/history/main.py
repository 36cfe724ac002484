"""
Reconstruct a manifest's dependency history from its commits.

Walks every commit that touched the manifest (following renames), parses
the declared dependencies at each one, and diffs each commit against its
predecessor to find when every dependency was added, removed or changed.
"""

from pathlib import Path

from common.env import env
from common.logger import get_logger

from .commit_log import list_commits
from .git_utils import GitGateway, VersionControlGateway
from .models import Commit, History, Snapshot
from .snapshot import ManifestGrammar, parse_at
from .timeline import adjacent_pairs, aggregate

logger = get_logger(__name__)


def analyze(
    repo_path: Path | str = ".",
    manifest: str | None = None,
    gateway: VersionControlGateway | None = None,
    grammar: ManifestGrammar | None = None,
) -> History:
    """
    Build the per-dependency change history of a manifest.

    An empty repository, or a manifest touched by fewer than two commits,
    is reported as an advisory and yields an empty history.

    Args:
        repo_path: Path to git repository (default: current directory)
        manifest: Manifest path relative to the repository root
                  (default: MANIFEST_FILE or "Gemfile")
        gateway: Version-control gateway (default: GitGateway)
        grammar: Declaration grammar (default: MANIFEST_KEYWORD or "gem")

    Returns:
        Mapping of dependency name to its change events, oldest first
    """
    repo_path = Path(repo_path)
    manifest = manifest or env.manifest_file()
    gateway = gateway or GitGateway()
    grammar = grammar or ManifestGrammar()

    commits = list_commits(repo_path, manifest, gateway)
    if len(commits) < 2:
        logger.info(
            f"[blue]📘[/blue] Fewer than two commits related to {manifest} found. "
            "Not enough history to analyze changes."
        )
        return {}

    # git log emits newest first
    chronological = list(reversed(commits))
    logger.debug(f"Diffing {len(chronological) - 1} commit pairs for {manifest}")

    snapshots: dict[str, Snapshot] = {}

    def snapshot_of(commit: Commit) -> Snapshot:
        if commit.id not in snapshots:
            snapshots[commit.id] = parse_at(repo_path, commit.id, manifest, gateway, grammar)
        return snapshots[commit.id]

    history = aggregate(
        (snapshot_of(older), snapshot_of(newer), newer)
        for older, newer in adjacent_pairs(chronological)
    )

    logger.debug(f"Recorded changes for {len(history)} dependencies")
    return history
