"""Environment configuration interface for manifest-history.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import DEFAULT_DECLARATION_KEYWORD, DEFAULT_MANIFEST, RELATED_PROJECTS_PATH

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def manifest_file() -> str:
        """Get the manifest filename tracked in the repository.

        Returns:
            Manifest filename, defaults to 'Gemfile'
        """
        return os.getenv("MANIFEST_FILE", DEFAULT_MANIFEST)

    @staticmethod
    def declaration_keyword() -> str:
        """Get the keyword that starts a dependency declaration line.

        Returns:
            Declaration keyword, defaults to 'gem'
        """
        return os.getenv("MANIFEST_KEYWORD", DEFAULT_DECLARATION_KEYWORD)

    @staticmethod
    def git_executable() -> str:
        """Get the git executable used for history queries.

        Returns:
            Executable name or path, defaults to 'git'
        """
        return os.getenv("GIT_EXECUTABLE", "git")

    @staticmethod
    def related_projects_path() -> Path:
        """Get the path of the related-projects YAML file.

        Returns:
            Path to the YAML file, defaults to ./data/gems.yml
        """
        return Path(os.getenv("RELATED_PROJECTS_PATH", str(RELATED_PROJECTS_PATH)))


# Singleton instance for convenient access
env = Environment()
