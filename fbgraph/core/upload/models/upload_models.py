"""
Data models for the resumable upload.

Chunks are immutable: every protocol step yields a new chunk.
"""
import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ...file import GraphFile


@dataclass(frozen=True)
class TransferChunk:
    """
    The byte range Graph expects next for an upload session.

    Attributes:
        file: The whole file being uploaded
        upload_session_id: Session id from the start phase
        video_id: Video id from the start phase
        start_offset: First byte Graph expects
        end_offset: One past the last byte Graph expects
    """
    file: GraphFile
    upload_session_id: str
    video_id: str
    start_offset: int
    end_offset: int

    def is_last_chunk(self) -> bool:
        """Graph signals completion with an empty range."""
        return self.start_offset == self.end_offset

    def partial_file(self) -> GraphFile:
        """
        The slice of the file covering ``[start_offset, end_offset)``.

        Raises:
            FileError: If the file is no longer readable
        """
        return self.file.slice(self.start_offset, self.end_offset)

    def with_range(self, start_offset: int, end_offset: int) -> 'TransferChunk':
        return dataclasses.replace(self, start_offset=int(start_offset), end_offset=int(end_offset))


class TransferStatus(Enum):
    PROGRESSED = 'progressed'
    RETRY = 'retry'


@dataclass(frozen=True)
class TransferOutcome:
    """Result of one transfer attempt."""
    status: TransferStatus
    chunk: TransferChunk

    @classmethod
    def progressed(cls, chunk: TransferChunk) -> 'TransferOutcome':
        return cls(TransferStatus.PROGRESSED, chunk)

    @classmethod
    def retry(cls, chunk: TransferChunk) -> 'TransferOutcome':
        return cls(TransferStatus.RETRY, chunk)

    @property
    def is_retry(self) -> bool:
        return self.status is TransferStatus.RETRY


@dataclass(frozen=True)
class UploadResult:
    """Outcome of a complete resumable upload."""
    video_id: str
    success: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'video_id': self.video_id, 'success': self.success}
