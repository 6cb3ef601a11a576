"""
Files sent to Graph as multipart attachments.

A GraphFile is a bounded view over a file on disk. Readability is checked
at construction; the contents are read lazily inside a scoped ``open``.
"""
import mimetypes
from pathlib import Path
from typing import Union

from .exceptions import FileError
from .logging import get_logger

logger = get_logger('fbgraph.file')

DEFAULT_MIMETYPE = 'text/plain'


class GraphFile:
    """
    A file (or a byte range of it) to upload.

    Attributes:
        path: Path of the file on disk
        max_length: Number of bytes to read, -1 for the whole remainder
        offset: Byte offset to start reading from, -1 for the beginning
    """

    def __init__(self, path: Union[str, Path], max_length: int = -1, offset: int = -1):
        """
        Validate and wrap a local file.

        Args:
            path: Local path of the file
            max_length: Number of bytes to read, -1 for everything
            offset: Byte offset to start at, -1 for the beginning

        Raises:
            FileError: If the path is not a readable regular file
        """
        self.path = Path(path)
        self.max_length = max_length
        self.offset = offset
        self._validate()

    def _validate(self) -> None:
        if not self.path.is_file():
            raise FileError(f'Failed to create GraphFile entity. Unable to open resource: {self.path}.', str(self.path))
        try:
            with open(self.path, 'rb'):
                pass
        except OSError as e:
            raise FileError(f'Failed to create GraphFile entity. Unable to read resource: {self.path}.', str(self.path)) from e

    def get_contents(self) -> bytes:
        """
        Read the bounded range of the file.

        Raises:
            FileError: If the file can no longer be read
        """
        try:
            with open(self.path, 'rb') as f:
                if self.offset > 0:
                    f.seek(self.offset)
                data = f.read(self.max_length) if self.max_length >= 0 else f.read()
        except OSError as e:
            raise FileError(f'Unable to read resource: {self.path}.', str(self.path)) from e
        logger.debug(f"Read {len(data)} bytes from {self.path.name} at offset {max(self.offset, 0)}")
        return data

    def get_file_name(self) -> str:
        return self.path.name

    def get_file_path(self) -> str:
        return str(self.path)

    def get_size(self) -> int:
        """Size in bytes of the range this file covers."""
        try:
            total = self.path.stat().st_size
        except OSError as e:
            raise FileError(f'Unable to stat resource: {self.path}.', str(self.path)) from e
        remaining = max(total - max(self.offset, 0), 0)
        if self.max_length >= 0:
            return min(self.max_length, remaining)
        return remaining

    def get_mimetype(self) -> str:
        mimetype, _ = mimetypes.guess_type(self.path.name)
        return mimetype or DEFAULT_MIMETYPE

    def slice(self, start: int, end: int) -> 'GraphFile':
        """
        Return a file of the same class covering ``[start, end)``.

        Raises:
            FileError: If the file became unreadable
        """
        return type(self)(self.path, max_length=end - start, offset=start)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r}, max_length={self.max_length}, offset={self.offset})"


class GraphVideo(GraphFile):
    """A video file. Requests carrying one go to the video host."""
    pass


__all__ = ['GraphFile', 'GraphVideo', 'DEFAULT_MIMETYPE']
