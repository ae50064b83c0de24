"""
Property Merging
================

Builds one key/value mapping from up to four property sources. Sources are
loaded in this order, each overriding keys from the ones before it:

1. Default properties on the classpath (required when configured)
2. Registered locations (local properties plus explicit files)
3. A properties file found on the configuration search paths
4. A properties file named by a runtime variable (absolute path)

The file named by the runtime variable therefore takes precedence over all
else. Sources 3 and 4 are optional: if they cannot be loaded a warning is
logged and the merge continues with the values gathered so far.
"""

import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional

from .errors import FatalConfigError, PropertiesError, RecoverableSourceError
from .locator import FileLocator
from .properties import load_properties, read_properties_file
from .registered_locations import RegisteredLocations
from .resources import read_classpath_resource
from .runtime_variables import CONFIG_PROPERTIES_VAR, RuntimeVariables
from .settings import MergerSettings


class ConfigSource(Enum):
    """Property sources (higher numbers take precedence)."""
    CLASSPATH_DEFAULTS = 1
    REGISTERED_LOCATIONS = 2
    CONFIG_PATH = 3
    RUNTIME_VARIABLE = 4


class ConfigMerger:
    """
    Merges properties from the classpath defaults, registered locations, the
    configuration search paths and a runtime-variable override file.
    """

    def __init__(
        self,
        default_properties_on_classpath: Optional[str] = None,
        properties_on_config_path: Optional[str] = None,
        registered_locations: Optional[Callable[[], Mapping[str, str]]] = None,
        locate_unique_file: Optional[Callable[[str], Path]] = None,
        runtime_variables: Optional[RuntimeVariables] = None,
        runtime_variable: str = CONFIG_PROPERTIES_VAR,
        classpath: Optional[Iterable[str]] = None,
        file_encoding: str = "utf-8",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the merger.

        Args:
            default_properties_on_classpath: Classpath resource holding default properties
            properties_on_config_path: File name resolved with ``locate_unique_file``
            registered_locations: Returns the properties of all registered locations
            locate_unique_file: Resolves a file name to exactly one path, raising on failure
            runtime_variables: Runtime variable lookup (process environment by default)
            runtime_variable: Name of the variable holding the override file path
            classpath: Search path for the defaults resource (``sys.path`` if None)
            file_encoding: Encoding of every properties file
            logger: Logger for skipped sources
        """
        self.default_properties_on_classpath = default_properties_on_classpath
        self.properties_on_config_path = properties_on_config_path
        self.registered_locations = registered_locations or RegisteredLocations()
        self.locate_unique_file = locate_unique_file or FileLocator.from_environment().find_unique_file
        self.runtime_variables = runtime_variables or RuntimeVariables()
        self.runtime_variable = runtime_variable
        self.classpath = list(classpath) if classpath is not None else None
        self.file_encoding = file_encoding
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self.origins: Mapping[str, ConfigSource] = MappingProxyType({})

    @classmethod
    def from_settings(
        cls,
        settings: MergerSettings,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None
    ) -> "ConfigMerger":
        """
        Build a merger and its default collaborators from settings.

        Args:
            settings: Merger settings
            environ: Environment mapping for runtime variables (``os.environ`` if None)
            logger: Logger shared by the merger and its collaborators
        """
        registered = RegisteredLocations(
            locations=settings.locations,
            local_properties=settings.local_properties,
            ignore_resource_not_found=settings.ignore_resource_not_found,
            file_encoding=settings.file_encoding,
            classpath=settings.classpath,
            logger=logger,
        )
        if settings.config_search_paths:
            locator = FileLocator(settings.config_search_paths)
        else:
            locator = FileLocator.from_environment(environ=environ)

        return cls(
            default_properties_on_classpath=settings.default_properties_on_classpath,
            properties_on_config_path=settings.properties_on_config_path,
            registered_locations=registered,
            locate_unique_file=locator.find_unique_file,
            runtime_variables=RuntimeVariables(environ, settings.dotenv_path),
            runtime_variable=settings.runtime_variable,
            classpath=settings.classpath,
            file_encoding=settings.file_encoding,
            logger=logger,
        )

    def merge(self) -> Mapping[str, str]:
        """
        Merge all configured sources.

        Returns:
            Read-only mapping of property name to value

        Raises:
            FatalConfigError: If the configured default properties cannot be loaded
        """
        self.origins = MappingProxyType({})
        merged: Dict[str, str] = {}
        origins: Dict[str, ConfigSource] = {}

        def apply(properties: Mapping[str, str], source: ConfigSource) -> None:
            for key, value in properties.items():
                merged[key] = value
                origins[key] = source

        if self.default_properties_on_classpath is not None:
            apply(self._load_defaults(), ConfigSource.CLASSPATH_DEFAULTS)

        apply(self.registered_locations(), ConfigSource.REGISTERED_LOCATIONS)

        if self.properties_on_config_path is not None:
            try:
                apply(self._load_from_config_path(), ConfigSource.CONFIG_PATH)
            except RecoverableSourceError as e:
                self.logger.warning(
                    f"Error loading property configurations from file : "
                    f"{self.properties_on_config_path}. Using defaults ({e})"
                )

        runtime_path = self.runtime_variables.get_variable(self.runtime_variable)
        if runtime_path is not None:
            try:
                apply(self._load_from_runtime_path(runtime_path), ConfigSource.RUNTIME_VARIABLE)
            except RecoverableSourceError as e:
                self.logger.warning(
                    f"Error loading property configurations from file specified in "
                    f"{self.runtime_variable} : {runtime_path}. Using defaults ({e})"
                )

        self.origins = MappingProxyType(origins)
        self.logger.debug(f"Merged {len(merged)} properties")
        return MappingProxyType(merged)

    def _load_defaults(self) -> Dict[str, str]:
        name = self.default_properties_on_classpath
        try:
            text = read_classpath_resource(name, self.classpath, self.file_encoding)
            properties = load_properties(text)
        except (OSError, ValueError, PropertiesError) as e:
            raise FatalConfigError(f"Cannot load default properties from classpath resource {name}: {e}") from e
        self.logger.info(f"Loaded {len(properties)} default properties from {name}")
        return properties

    def _load_from_config_path(self) -> Dict[str, str]:
        name = self.properties_on_config_path
        try:
            path = self.locate_unique_file(name)
            properties = read_properties_file(path, self.file_encoding)
        except (OSError, LookupError, ValueError, PropertiesError) as e:
            raise RecoverableSourceError(name, str(e)) from e
        self.logger.info(f"Loaded {len(properties)} properties from config path file {path}")
        return properties

    def _load_from_runtime_path(self, runtime_path: str) -> Dict[str, str]:
        # Not resolved through the locator: the path must be absolute
        path = Path(runtime_path)
        if not path.is_absolute():
            raise RecoverableSourceError(runtime_path, "path is not absolute")
        try:
            properties = read_properties_file(path, self.file_encoding)
        except (OSError, ValueError, PropertiesError) as e:
            raise RecoverableSourceError(runtime_path, str(e)) from e
        self.logger.info(f"Loaded {len(properties)} properties from {self.runtime_variable} file {path}")
        return properties
