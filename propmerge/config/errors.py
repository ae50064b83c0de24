"""
Configuration Errors
====================

Exception hierarchy for property loading and merging.
"""

from typing import List, Optional


class PropertiesError(Exception):
    """Base class for all propmerge errors."""


class FatalConfigError(PropertiesError):
    """A required property source could not be loaded; the merge is aborted."""


class RecoverableSourceError(PropertiesError):
    """An optional property source could not be loaded and will be skipped."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class PropertiesParseError(PropertiesError, ValueError):
    """Malformed properties content."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number


class LocatorError(PropertiesError, LookupError):
    """A file locator could not resolve a name to exactly one file."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class ConfigFileNotFoundError(LocatorError):
    def __init__(self, name: str, search_paths: List[str]):
        super().__init__(name, f"No file named '{name}' found in config paths: {search_paths}")
        self.search_paths = search_paths


class AmbiguousConfigFileError(LocatorError):
    def __init__(self, name: str, matches: List[str]):
        super().__init__(name, f"Multiple files named '{name}' found: {matches}")
        self.matches = matches
