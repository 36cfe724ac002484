"""Shared constants for manifest-history.

For environment-based configuration (manifest name, git binary, etc.), use the env module:
    from common.env import env
    manifest = env.manifest_file()
"""

from pathlib import Path

# Data directories
DATA_DIR = Path("./data")
RELATED_PROJECTS_PATH = DATA_DIR / "gems.yml"

# Manifest defaults
DEFAULT_MANIFEST = "Gemfile"
DEFAULT_DECLARATION_KEYWORD = "gem"

# git log output: one commit per line, fields split on LOG_FIELD_DELIMITER
LOG_FIELD_DELIMITER = "|"
LOG_FIELD_COUNT = 4
GIT_LOG_FORMAT = LOG_FIELD_DELIMITER.join(["%H", "%an", "%ad", "%s"])

SHORT_ID_LENGTH = 7
