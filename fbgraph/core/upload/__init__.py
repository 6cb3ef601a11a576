"""
Resumable video upload.

Example:
    >>> uploader = ResumableUploader(app, client, token, 'v2.10')
    >>> result = UploadCoordinator(uploader).upload_resumable('/me/videos', GraphVideo('clip.mp4'))
    >>> result.video_id
    '1337'
"""
from .models import TransferChunk, TransferOutcome, TransferStatus, UploadResult
from .protocols import UploadTransport
from .strategies import RetryStrategy, ExponentialBackoffStrategy, TransferBudget
from .uploader import ResumableUploader, GraphUploadTransport
from .coordinator import UploadCoordinator, DEFAULT_MAX_TRANSFER_TRIES

__all__ = [
    'TransferChunk',
    'TransferOutcome',
    'TransferStatus',
    'UploadResult',
    'UploadTransport',
    'RetryStrategy',
    'ExponentialBackoffStrategy',
    'TransferBudget',
    'ResumableUploader',
    'GraphUploadTransport',
    'UploadCoordinator',
    'DEFAULT_MAX_TRANSFER_TRIES',
]
