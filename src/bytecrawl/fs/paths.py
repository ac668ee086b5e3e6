r"""Path grammar: pull a path out of a command line.

Commands such as ``edit`` and ``./program`` take a path followed by
free text, so the path has to be peeled off the front of the argument
string before anything else happens:

- ``dungeon/door1``            → path ``dungeon/door1``, no remainder
- ``notes hello world``        → path ``notes``, remainder ``hello world``
- ``'my file' rest of line``   → path ``my file``, remainder ``rest of line``

Quoting lets a path contain spaces.  Inside quotes a backslash escapes
the next character, so ``'it\'s'`` names the file ``it's``.

The remainder is ``None`` when nothing follows the path at all.  That
is different from an empty remainder: ``"notes "`` means "an empty
trailing argument was given".

Nothing here looks at the filesystem: these are pure string
functions.
"""

from __future__ import annotations

from bytecrawl.fs.errors import MalformedPathError

_QUOTE = "'"
_ESCAPE = "\\"
_SEPARATOR = " "


def parse_path_segment(raw: str) -> tuple[str, str | None]:
    """Split *raw* into a leading path and the unconsumed remainder.

    Args:
        raw: The argument string following a command verb.

    Returns:
        A ``(path, remainder)`` tuple.  *remainder* is ``None`` when
        the path runs to the end of *raw*.

    Raises:
        MalformedPathError: If a quoted path has no closing quote.

    """
    if raw.startswith(_QUOTE):
        path, end = _read_quoted(raw)
    else:
        end = raw.find(_SEPARATOR)
        if end == -1:
            end = len(raw)
        path = raw[:end]

    if end >= len(raw):
        return (path, None)
    # Skip exactly one separating character after the path.
    return (path, raw[end + 1 :])


def _read_quoted(raw: str) -> tuple[str, int]:
    """Read a quoted path starting at ``raw[0]``.

    Returns the unescaped path and the index just past the closing quote.
    """
    chars: list[str] = []
    i = 1
    while i < len(raw):
        ch = raw[i]
        if ch == _ESCAPE and i + 1 < len(raw):
            chars.append(raw[i + 1])
            i += 2
            continue
        if ch == _QUOTE:
            return ("".join(chars), i + 1)
        chars.append(ch)
        i += 1
    msg = f"No closing quote found in path: {raw}"
    raise MalformedPathError(msg)


def split_parent_and_name(path: str) -> tuple[str, str]:
    """Split a file path into (containing_directory, name).

    Examples::

        "notes"          → ("", "notes")      # current directory
        "/stats"         → ("/", "stats")
        "dungeon/door1/x" → ("dungeon/door1", "x")

    An empty parent means "the current directory".
    """
    last_slash = path.rfind("/")
    if last_slash == -1:
        return ("", path)
    if last_slash == 0:
        return ("/", path[1:])
    return (path[:last_slash], path[last_slash + 1 :])


def split_segments(path: str) -> list[str]:
    """Return the non-empty ``/``-separated segments of *path*."""
    return [part for part in path.split("/") if part]
