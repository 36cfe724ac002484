"""Read the commits that touched the manifest."""

import re
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from common.constants import LOG_FIELD_COUNT, LOG_FIELD_DELIMITER
from common.logger import get_logger

from .git_utils import VersionControlGateway
from .models import Commit

logger = get_logger(__name__)

# "#1234", "PR 1234", "pr1234"
REFERENCE_PATTERN = re.compile(r"(?:#|PR\s*)(\d+)", re.IGNORECASE)

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def extract_reference(subject: str) -> int | None:
    """
    Extract an issue or pull request number from a commit subject.

    Examples:
        "Add pry (#1234)"   -> 1234
        "Bump rails PR 2345" -> 2345
        "Cleanup"           -> None
    """
    match = REFERENCE_PATTERN.search(subject)
    return int(match.group(1)) if match else None


def parse_commit_date(value: str) -> datetime:
    """
    Parse a git date in ISO 8601 or git's --date=iso form.

    git's iso form looks like "2024-03-01 14:05:09 +0100". Dates without an
    offset are taken as UTC. Unparseable dates fall back to the Unix epoch.
    """
    value = value.strip()
    parsed = None
    for fmt in ("%Y-%m-%d %H:%M:%S %z", "%Y-%m-%dT%H:%M:%S%z"):
        try:
            parsed = datetime.strptime(value, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            logger.warning(f"Unparseable commit date '{value}', using epoch")
            return EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_commit_line(line: str) -> Commit:
    """
    Parse a single "id|author|date|subject" log line.

    The subject is the last field, so it keeps any further delimiters.
    Missing fields default to empty strings.

    Args:
        line: One line of git log output

    Returns:
        Commit built from the line
    """
    fields = line.strip().split(LOG_FIELD_DELIMITER, LOG_FIELD_COUNT - 1)
    if len(fields) < LOG_FIELD_COUNT:
        logger.debug(f"Malformed log line with {len(fields)} fields: {line!r}")
        fields += [""] * (LOG_FIELD_COUNT - len(fields))

    commit_id, author, date, subject = fields
    subject = subject.strip()

    return Commit(
        id=commit_id.strip(),
        author=author.strip(),
        timestamp=parse_commit_date(date),
        subject=subject,
        reference=extract_reference(subject),
    )


def parse_commit_log(text: str) -> list[Commit]:
    """Parse raw log text into commits, skipping blank lines."""
    return [parse_commit_line(line) for line in text.splitlines() if line.strip()]


def list_commits(
    repo_path: Path,
    manifest: str,
    gateway: VersionControlGateway,
) -> list[Commit]:
    """
    List the commits that touched the manifest, newest first.

    Renames of the manifest are followed. An empty or invalid repository
    is reported as a warning and yields no commits.

    Args:
        repo_path: Path to git repository
        manifest: Manifest path relative to the repository root
        gateway: Version-control gateway to query

    Returns:
        Commits in the order git emits them (newest first)
    """
    if not gateway.has_commits(repo_path):
        logger.warning("[yellow]⚠[/yellow]  No commits found in the repository yet.")
        return []

    try:
        text = gateway.log_following(repo_path, manifest)
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Could not read history of {manifest}: {e}")
        return []

    commits = parse_commit_log(text)
    logger.debug(f"Found {len(commits)} commits touching {manifest}")
    return commits
