"""
Properties File Parsing
=======================

Reads the plain-text ``.properties`` format:

- ``key=value``, ``key:value`` or ``key value``, one entry per logical line
- ``#`` and ``!`` comment lines
- backslash line continuation
- ``\\t \\n \\r \\f`` and ``\\uXXXX`` escapes

Later duplicate keys overwrite earlier ones.
"""

import os
import re
from typing import Dict, Iterator, Optional, TextIO, Tuple, Union

from .errors import PropertiesParseError

WHITESPACE = " \t\f"
SEPARATORS = "=:"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = set("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def load_properties(
    source: Union[str, TextIO],
    into: Optional[Dict[str, str]] = None
) -> Dict[str, str]:
    """
    Parse properties text into a dictionary.

    Args:
        source: Properties text, or a text stream to read it from
        into: Existing dictionary to update in place (a new one if None)

    Returns:
        The updated dictionary

    Raises:
        PropertiesParseError: If an escape sequence is malformed
    """
    text = source if isinstance(source, str) else source.read()
    properties = {} if into is None else into

    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[_unescape(raw_key, line_number)] = _unescape(raw_value, line_number)

    return properties


def read_properties_file(
    path: Union[str, "os.PathLike[str]"],
    encoding: str = "utf-8"
) -> Dict[str, str]:
    """
    Read and parse a properties file.

    Args:
        path: Filesystem path of the file
        encoding: Text encoding of the file

    Returns:
        Parsed properties

    Raises:
        OSError: If the file cannot be opened or read
        PropertiesParseError: If the content cannot be decoded or parsed
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            return load_properties(f)
    except UnicodeDecodeError as e:
        raise PropertiesParseError(f"Cannot decode {path} as {encoding}: {e.reason}") from e


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (line number, logical line) pairs, joining continuations and skipping comments."""
    natural_lines = _LINE_BREAK.split(text)
    index = 0
    while index < len(natural_lines):
        line_number = index + 1
        line = natural_lines[index].lstrip(WHITESPACE)
        index += 1

        if not line or line[0] in "#!":
            continue

        while _continues(line):
            line = line[:-1]
            if index >= len(natural_lines):
                break
            line += natural_lines[index].lstrip(WHITESPACE)
            index += 1

        yield line_number, line


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> Tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    length = len(line)
    end = 0
    while end < length:
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        end += 1

    key = line[:end]
    start = end
    if start < length and line[start] in WHITESPACE:
        while start < length and line[start] in WHITESPACE:
            start += 1
        if start < length and line[start] in SEPARATORS:
            start += 1
    elif start < length:
        start += 1
    while start < length and line[start] in WHITESPACE:
        start += 1

    return key, line[start:]


def _unescape(text: str, line_number: int) -> str:
    if "\\" not in text:
        return text

    chars = []
    length = len(text)
    index = 0
    while index < length:
        char = text[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= length:
            break

        char = text[index]
        index += 1
        if char == "u":
            digits = text[index:index + 4]
            if len(digits) < 4 or not set(digits) <= _HEX_DIGITS:
                raise PropertiesParseError("Malformed \\uxxxx encoding", line_number)
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_SIMPLE_ESCAPES.get(char, char))

    result = "".join(chars)
    if any("\ud800" <= c <= "\udfff" for c in result):
        # Recombine \uXXXX surrogate pairs into single code points
        result = result.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")
    return result
