"""Upload data models."""
from .upload_models import TransferChunk, TransferOutcome, TransferStatus, UploadResult

__all__ = [
    'TransferChunk',
    'TransferOutcome',
    'TransferStatus',
    'UploadResult',
]
