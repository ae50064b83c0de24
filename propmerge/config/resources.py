"""Read bundled ("classpath") resources by logical name."""

import re
import sys
from importlib import resources
from pathlib import Path
from typing import Iterable, Optional

from .errors import PropertiesParseError

CLASSPATH_PREFIX = "classpath:"

_PACKAGE_RESOURCE = re.compile(r"^(?P<package>[A-Za-z_][\w.]+):(?P<resource>.+)$")


def read_classpath_resource(
    name: str,
    search_path: Optional[Iterable[str]] = None,
    encoding: str = "utf-8"
) -> str:
    """
    Read a classpath resource as text.

    ``package.name:relative/file`` reads a resource bundled inside an importable
    package. Any other name is looked up relative to each entry of
    ``search_path`` (``sys.path`` by default) and the first existing file wins.

    Args:
        name: Logical resource name, optionally prefixed with ``classpath:``
        search_path: Directories to search, empty entry meaning the cwd
        encoding: Text encoding of the resource

    Returns:
        Resource content

    Raises:
        FileNotFoundError: If the resource does not exist
        PropertiesParseError: If the resource cannot be decoded
    """
    if name.startswith(CLASSPATH_PREFIX):
        name = name[len(CLASSPATH_PREFIX):]

    match = _PACKAGE_RESOURCE.match(name)
    if match:
        return _read_package_resource(match.group("package"), match.group("resource"), encoding)

    relative = name.lstrip("/")
    roots = sys.path if search_path is None else search_path
    for root in roots:
        candidate = Path(root or ".") / relative
        if candidate.is_file():
            try:
                with candidate.open("r", encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError as e:
                raise PropertiesParseError(f"Cannot decode {candidate} as {encoding}: {e.reason}") from e

    raise FileNotFoundError(
        f"class path resource [{relative}] cannot be opened because it does not exist"
    )


def _read_package_resource(package: str, resource: str, encoding: str) -> str:
    try:
        target = resources.files(package).joinpath(resource.lstrip("/"))
    except (ModuleNotFoundError, TypeError) as e:
        raise FileNotFoundError(f"class path resource [{package}:{resource}] has no package: {e}") from e
    if not target.is_file():
        raise FileNotFoundError(
            f"class path resource [{package}:{resource}] cannot be opened because it does not exist"
        )
    try:
        return target.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise PropertiesParseError(f"Cannot decode {package}:{resource} as {encoding}: {e.reason}") from e
