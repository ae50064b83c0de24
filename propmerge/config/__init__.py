"""Configuration package.

Provides the ConfigMerger plus the properties parser, file locator and
runtime variable lookup it builds on.
"""
from .errors import (  # noqa: F401
    AmbiguousConfigFileError,
    ConfigFileNotFoundError,
    FatalConfigError,
    LocatorError,
    PropertiesError,
    PropertiesParseError,
    RecoverableSourceError,
)
from .locator import FileLocator  # noqa: F401
from .merger import ConfigMerger, ConfigSource  # noqa: F401
from .properties import load_properties, read_properties_file  # noqa: F401
from .registered_locations import RegisteredLocations  # noqa: F401
from .resources import read_classpath_resource  # noqa: F401
from .runtime_variables import CONFIG_PROPERTIES_VAR, RuntimeVariables  # noqa: F401
from .settings import MergerSettings, load_settings  # noqa: F401
