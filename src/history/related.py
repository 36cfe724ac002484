"""Optional related-projects lookup for the timeline report.

The lookup file is a YAML list of entries such as:

    - full_name: rails
      repos:
        - rails/rails
        - rails/webpacker
"""

from pathlib import Path

import yaml

from common.logger import get_logger

logger = get_logger(__name__)


def load_related_projects(path: Path) -> dict[str, list[str]]:
    """
    Load a dependency name -> related repositories mapping.

    Args:
        path: YAML file to read

    Returns:
        Mapping keyed by each entry's full_name; empty if the file is
        missing or cannot be parsed
    """
    if not path.exists():
        logger.debug(f"No related-projects file at {path}")
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load related projects {path}: {e}")
        return {}

    if not isinstance(data, list):
        logger.warning(f"Expected a list of entries in {path}, ignoring it")
        return {}

    related: dict[str, list[str]] = {}
    for entry in data:
        if isinstance(entry, dict) and entry.get("full_name"):
            related[str(entry["full_name"])] = [str(repo) for repo in entry.get("repos") or []]
    return related
