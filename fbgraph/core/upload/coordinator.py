"""
Upload coordinator.

Drives a ResumableUploader through start, transfer and finish with a
bounded retry budget per chunk.
"""
from typing import Any, Dict, Optional

from ..config import RetryConfig
from ..file import GraphFile
from ..logging import get_logger
from .models import UploadResult
from .strategies import RetryStrategy, ExponentialBackoffStrategy, TransferBudget
from .uploader import ResumableUploader

logger = get_logger('fbgraph.upload.coordinator')

DEFAULT_MAX_TRANSFER_TRIES = 5


class UploadCoordinator:
    """
    Coordinates a resumable upload.

    Each transfer attempt is made with ``allow_throw`` once the chunk's
    budget is down to its last try. A ``retry`` outcome consumes one try;
    progress to a new chunk restores the full budget. Non-resumable errors
    propagate immediately.
    """

    def __init__(self, uploader: ResumableUploader, retry_strategy: Optional[RetryStrategy] = None,
                 retry_config: Optional[RetryConfig] = None):
        """
        Args:
            uploader: Phase runner
            retry_strategy: Delay between retries
            retry_config: Used to build the default backoff strategy
        """
        self._uploader = uploader
        self._retry_strategy = retry_strategy or ExponentialBackoffStrategy(retry_config)

    def upload_resumable(self, endpoint: str, file: GraphFile, metadata: Optional[Dict[str, Any]] = None,
                         max_tries: int = DEFAULT_MAX_TRANSFER_TRIES) -> UploadResult:
        """
        Upload a file in chunks.

        Args:
            endpoint: Upload endpoint, e.g. ``/me/videos``
            file: File to upload
            metadata: Video fields sent with the finish phase
            max_tries: Transfer attempts allowed per chunk

        Returns:
            UploadResult with the video id and finish status

        Raises:
            ValueError: If max_tries is less than 1
            ResumableUploadError: If a chunk still fails on its last try
        """
        budget = TransferBudget(max_tries)

        chunk = self._uploader.start(endpoint, file)
        transfers = 0
        while not chunk.is_last_chunk():
            outcome = self._uploader.attempt_transfer(endpoint, chunk, allow_throw=budget.allow_throw)
            transfers += 1
            if outcome.is_retry:
                budget.consume()
                logger.info(f"Retrying bytes {chunk.start_offset}-{chunk.end_offset} "
                            f"({budget.remaining} of {budget.max_tries} tries left)")
                self._retry_strategy.wait(budget.retries - 1)
            else:
                budget.reset()
            chunk = outcome.chunk

        logger.debug(f"All chunks sent for video {chunk.video_id} in {transfers} transfer requests")
        success = self._uploader.finish(endpoint, chunk.upload_session_id, metadata)
        return UploadResult(video_id=chunk.video_id, success=success)
