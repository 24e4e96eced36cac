"""File records flowing through the publish pipeline.

A ``SourceFile`` is what a host hands to the upload transform: where the file
lives locally, which directory its relative path is computed from, and its
content. ``contents=None`` is the null sentinel for entries that carry no
data (for example a directory) and are passed through without an upload.
"""
import os
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, BinaryIO, Iterable, Iterator, Optional, Union

DEFAULT_CHUNK_SIZE = 64 * 1024

Contents = Union[bytes, BinaryIO, Iterable[Union[bytes, str]], None]


class LocalFileContents:
    """Content of a file on disk, opened only when iterated.

    Read errors (missing file, dangling symlink, permissions) surface while
    the content is streamed, so they belong to the upload of that one file.
    Each iteration reopens the file.

    Example:
        >>> contents = LocalFileContents("/build/app.js")
        >>> b"".join(contents)
        b'console.log(1)'
    """

    def __init__(
        self, path: Union[str, "os.PathLike[str]"], chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        self.path = path
        self.chunk_size = chunk_size

    def __iter__(self) -> Iterator[bytes]:
        with open(self.path, "rb") as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                yield chunk

    def __repr__(self) -> str:
        return f"LocalFileContents({str(self.path)!r})"


@dataclass
class SourceFile:
    """One unit of pipeline data.

    Attributes:
        path: Absolute local path of the file
        base: Directory the relative portion of ``path`` is computed from
        contents: bytes, a binary file-like object, an iterable of byte or
            str chunks, or None when the record has no content

    Example:
        >>> f = SourceFile(path="/build/css/site.css", base="/build/", contents=b"body{}")
        >>> f.relative
        'css/site.css'
        >>> f.extname
        '.css'
    """

    path: str
    base: str
    contents: Contents = None

    @property
    def relative(self) -> str:
        """Path of the file relative to its base, using ``/`` separators.

        Empty when the path is the base itself.
        """
        try:
            relative = PurePath(self.path).relative_to(self.base).as_posix()
            return "" if relative == "." else relative
        except ValueError:
            # path is not under base; strip the textual prefix only
            return self.path.replace(self.base, "", 1)

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)

    @property
    def extname(self) -> str:
        """Last extension of the file name including the dot (``.gz`` for ``a.css.gz``)."""
        return os.path.splitext(self.path)[1]

    def is_null(self) -> bool:
        return self.contents is None

    def iter_chunks(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the file content as byte chunks.

        Args:
            chunk_size: Read size used for file-like contents

        Yields:
            Non-empty byte strings in content order
        """
        contents: Any = self.contents
        if contents is None:
            return
        if isinstance(contents, (bytes, bytearray, memoryview)):
            if contents:
                yield bytes(contents)
            return
        if hasattr(contents, "read"):
            while True:
                chunk = contents.read(chunk_size)
                if not chunk:
                    break
                yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk
            return
        for chunk in contents:
            if chunk:
                yield chunk.encode("utf-8") if isinstance(chunk, str) else bytes(chunk)

    def pipe(self, destination: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Any:
        """Write every content chunk into a writable destination.

        Args:
            destination: Object exposing ``write(bytes)``
            chunk_size: Read size used for file-like contents

        Returns:
            The destination, for chaining
        """
        for chunk in self.iter_chunks(chunk_size):
            destination.write(chunk)
        return destination
