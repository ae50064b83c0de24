"""Runtime variable lookup backed by the process environment and an optional .env file."""

import os
from typing import Mapping, Optional

from dotenv import dotenv_values

# Runtime variable holding an absolute path to a properties file that overrides all other sources
CONFIG_PROPERTIES_VAR = "CONFIG_PROPERTIES_VAR"


class RuntimeVariables:
    """Read-only view over runtime variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, dotenv_path: Optional[str] = None):
        self._environ = os.environ if environ is None else environ
        self._dotenv = dotenv_values(dotenv_path) if dotenv_path else {}

    def get_variable(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the variable's value; the environment wins over the .env file and empty values count as unset."""
        value = self._environ.get(name)
        if not value:
            value = self._dotenv.get(name)
        return value if value else default
