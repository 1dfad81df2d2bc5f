"""Path: splits a request path into node names, a format and a handler.

Given ``/foo/bar/biz/buz.html.erb``:

- ``node_names`` -> ("foo", "bar", "biz", "buz")
- ``format``     -> "html"
- ``handler``    -> "erb"
- ``dirname``    -> "/foo/bar/biz"
- ``basename``   -> "buz"

``PathParser`` memoizes parsing in a per-instance LRU cache.  ``Path`` is
frozen, so one parsed instance can be handed to any number of callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from resource_tree.protocols import ParsedPath

__all__ = ["Path", "PathParser", "as_parsed"]

_SEPARATOR = "/"
_EXTENSION = "."


@dataclass(frozen=True, slots=True)
class Path:
    """A parsed request path.

    Attributes:
        path:       The original request path string.
        dirname:    Everything before the final segment, "/" when there is none.
        basename:   The final segment without extensions; "" when the path
                    ends in "/" or is empty.
        format:     First extension of the final segment, or None.
        handler:    Second extension of the final segment, or None.
        node_names: Directory segments followed by ``basename`` (when not
                    empty).  Empty segments are dropped.
    """

    path: str
    dirname: str
    basename: str
    format: str | None
    handler: str | None
    node_names: tuple[str, ...]

    @classmethod
    def parse(cls, path: str) -> Path:
        """Parse ``path`` into a ``Path``.

        A trailing "/" means every segment is a directory, so there is no
        basename and no format.  A leading dot (".keep") belongs to the name.

        Args:
            path: Request path such as "/docs/guide.html".

        Returns:
            The parsed ``Path``.
        """
        raw = str(path)
        segments = [s for s in raw.split(_SEPARATOR) if s]

        if not segments or raw.endswith(_SEPARATOR):
            dirname = _SEPARATOR + _SEPARATOR.join(segments) if segments else _SEPARATOR
            return cls(
                path=raw,
                dirname=dirname,
                basename="",
                format=None,
                handler=None,
                node_names=tuple(segments),
            )

        *directories, filename = segments
        basename, format_, handler = _split_extensions(filename)

        names = list(directories)
        if basename:
            names.append(basename)

        return cls(
            path=raw,
            dirname=_SEPARATOR + _SEPARATOR.join(directories),
            basename=basename,
            format=format_,
            handler=handler,
            node_names=tuple(names),
        )

    def __str__(self) -> str:
        return self.path


def _split_extensions(filename: str) -> tuple[str, str | None, str | None]:
    """Split "buz.html.erb" into ("buz", "html", "erb")."""
    # A leading dot is part of the name, not an extension separator.
    prefix = ""
    if filename.startswith(_EXTENSION):
        stripped = filename.lstrip(_EXTENSION)
        prefix = filename[: len(filename) - len(stripped)]
        filename = stripped

    name, *extensions = filename.split(_EXTENSION)
    extensions = [e for e in extensions if e]
    format_ = extensions[0] if extensions else None
    handler = extensions[1] if len(extensions) > 1 else None
    return prefix + name, format_, handler


class PathParser:
    """LRU-cached front end to ``Path.parse``.

    Each instance owns its own ``LRUCache``; two parsers never share state.
    Eviction is silent when ``max_size`` is exceeded.

    Args:
        max_size: Maximum number of parsed paths kept in memory.  Defaults to 512.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[str, Path] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def parse(self, path: str | ParsedPath) -> ParsedPath:
        """Return the parsed form of ``path``, from cache when possible.

        Anything that is not a string is taken as already parsed and
        returned unchanged.
        """
        if not isinstance(path, str):
            return path
        try:
            return self._cache[path]
        except KeyError:
            parsed = Path.parse(path)
            self._cache[path] = parsed
            return parsed


def as_parsed(path: str | ParsedPath) -> ParsedPath:
    """Parse ``path`` when it is a string; return any parsed path unchanged.

    Uncached, so it is safe to call from several threads at once.
    """
    if isinstance(path, str):
        return Path.parse(path)
    return path
