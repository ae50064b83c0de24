"""
Registered Property Locations
=============================

Loads local properties plus an ordered list of explicitly registered
property locations. Later locations override earlier ones, and every
location overrides the local properties.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .errors import FatalConfigError, PropertiesError
from .properties import load_properties, read_properties_file
from .resources import CLASSPATH_PREFIX, read_classpath_resource


class RegisteredLocations:
    """Callable that loads the registered property locations."""

    def __init__(
        self,
        locations: Iterable[str] = (),
        local_properties: Optional[Mapping[str, str]] = None,
        ignore_resource_not_found: bool = True,
        file_encoding: str = "utf-8",
        classpath: Optional[Iterable[str]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            locations: Filesystem paths or ``classpath:`` names, lowest priority first
            local_properties: Inline properties loaded before any location
            ignore_resource_not_found: Skip unreadable locations with a warning instead of failing
            file_encoding: Encoding used to read every location
            classpath: Search path for ``classpath:`` locations (``sys.path`` if None)
            logger: Logger for skipped locations
        """
        self.locations: List[str] = list(locations)
        self.local_properties: Dict[str, str] = dict(local_properties or {})
        self.ignore_resource_not_found = ignore_resource_not_found
        self.file_encoding = file_encoding
        self.classpath = list(classpath) if classpath is not None else None
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def __call__(self) -> Dict[str, str]:
        result = {str(k): str(v) for k, v in self.local_properties.items()}

        for location in self.locations:
            try:
                properties = self._load_location(location)
            except (OSError, ValueError, PropertiesError) as e:
                if not self.ignore_resource_not_found:
                    raise FatalConfigError(f"Could not load properties from {location}: {e}") from e
                self.logger.warning(f"Could not load properties from {location}: {e}")
                continue
            result.update(properties)
            self.logger.debug(f"Loaded {len(properties)} properties from {location}")

        return result

    def _load_location(self, location: str) -> Dict[str, str]:
        if location.startswith(CLASSPATH_PREFIX):
            text = read_classpath_resource(location, self.classpath, self.file_encoding)
            return load_properties(text)
        return read_properties_file(location, self.file_encoding)
