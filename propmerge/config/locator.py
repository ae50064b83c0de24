"""
File Locator
============

Resolves a logical file name to a single file under a set of configuration
search directories.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import AmbiguousConfigFileError, ConfigFileNotFoundError

logger = logging.getLogger(__name__)

CONFIG_SEARCH_PATH_VAR = "CONFIG_SEARCH_PATH"


class FileLocator:
    """Searches configuration directories for files by name."""

    def __init__(self, search_paths: Iterable[Union[str, "os.PathLike[str]"]]):
        """
        Initialize the locator.

        Args:
            search_paths: Directories to search, in order
        """
        self.search_paths: List[Path] = [Path(p) for p in search_paths]

    @classmethod
    def from_environment(
        cls,
        var: str = CONFIG_SEARCH_PATH_VAR,
        environ: Optional[dict] = None
    ) -> "FileLocator":
        """Build a locator from an ``os.pathsep`` separated environment variable (cwd if unset)."""
        env = os.environ if environ is None else environ
        value = env.get(var, "")
        paths = [p for p in value.split(os.pathsep) if p]
        return cls(paths or [Path.cwd()])

    def find_files(self, name: str) -> List[Path]:
        """
        Find every file matching ``name`` under the search paths.

        Names with a directory part are joined onto each search path; bare
        names are searched for recursively.
        """
        matches: List[Path] = []
        seen = set()
        nested = Path(name).parent != Path(".")

        for root in self.search_paths:
            if not root.is_dir():
                logger.debug(f"Skipping missing config search path {root}")
                continue
            if nested:
                candidates = [root / name]
            else:
                base_name = Path(name).name
                candidates = sorted(p for p in root.rglob("*") if p.name == base_name)
            for candidate in candidates:
                if not candidate.is_file():
                    continue
                resolved = candidate.resolve()
                if resolved not in seen:
                    seen.add(resolved)
                    matches.append(resolved)

        return matches

    def find_unique_file(self, name: str) -> Path:
        """
        Find exactly one file matching ``name``.

        Raises:
            ConfigFileNotFoundError: If nothing matches
            AmbiguousConfigFileError: If more than one file matches
        """
        matches = self.find_files(name)
        if not matches:
            raise ConfigFileNotFoundError(name, [str(p) for p in self.search_paths])
        if len(matches) > 1:
            raise AmbiguousConfigFileError(name, [str(p) for p in matches])
        logger.debug(f"Located '{name}' at {matches[0]}")
        return matches[0]
