"""
Resumable video upload protocol.

An upload runs in three phases against ``/<target>/videos``:

* ``start``: announce the file size, get a session id, a video id and the
  first byte range;
* ``transfer``: send the requested range, get the next one, until Graph
  answers with an empty range;
* ``finish``: close the session, optionally with video metadata.
"""
from typing import Any, Dict, Optional, Union

from ..auth.access_token import AccessToken
from ..exceptions import ProtocolError
from ..file import GraphFile
from ..logging import get_logger
from ..api.errors.api_errors import ResumableUploadError
from ..api.request.graph_request import GraphRequest
from .models import TransferChunk, TransferOutcome
from .protocols import UploadTransport

logger = get_logger('fbgraph.upload.uploader')


class GraphUploadTransport:
    """UploadTransport that POSTs GraphRequests through a GraphClient."""

    def __init__(self, app, client, access_token: Union[str, AccessToken, None], graph_version: str):
        self.app = app
        self.client = client
        self.access_token = access_token
        self.graph_version = graph_version

    def send_upload_request(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        request = GraphRequest(self.app, self.access_token, 'POST', endpoint, params, None, self.graph_version)
        return self.client.send_request(request).get_decoded_body()


class ResumableUploader:
    """
    Runs the individual phases of a resumable upload.

    Looping and retrying is left to UploadCoordinator.
    """

    def __init__(self, app=None, client=None, access_token: Union[str, AccessToken, None] = None,
                 graph_version: Optional[str] = None, transport: Optional[UploadTransport] = None):
        """
        Args:
            app: GraphApp
            client: GraphClient used when no transport is given
            access_token: Token for the upload requests
            graph_version: Graph version for the upload requests
            transport: Custom UploadTransport (overrides app/client/token)
        """
        self.transport = transport or GraphUploadTransport(app, client, access_token, graph_version)

    def start(self, endpoint: str, file: GraphFile) -> TransferChunk:
        """
        Open an upload session.

        Raises:
            ProtocolError: If Graph omits a session field
            ResponseError: If Graph returns an error
        """
        params = {
            'upload_phase': 'start',
            'file_size': file.get_size(),
        }
        response = self.transport.send_upload_request(endpoint, params)
        chunk = TransferChunk(
            file=file,
            upload_session_id=str(_require(response, 'upload_session_id', 'start')),
            video_id=str(_require(response, 'video_id', 'start')),
            start_offset=_require_offset(response, 'start_offset', 'start'),
            end_offset=_require_offset(response, 'end_offset', 'start'),
        )
        logger.info(f"Upload session {chunk.upload_session_id} started for video {chunk.video_id}")
        return chunk

    def attempt_transfer(self, endpoint: str, chunk: TransferChunk, allow_throw: bool = False) -> TransferOutcome:
        """
        Send one chunk.

        Returns:
            ``progressed`` with the next chunk (from the response, or from the
            corrected range of a resumable error), or ``retry`` with the same
            chunk when a resumable error carries no range

        Raises:
            ResumableUploadError: If allow_throw is set
            ResponseError: For any non-resumable Graph error
            ProtocolError: If the response lacks the next offsets
            FileError: If the file became unreadable
        """
        params = {
            'upload_phase': 'transfer',
            'upload_session_id': chunk.upload_session_id,
            'start_offset': chunk.start_offset,
            'video_file_chunk': chunk.partial_file(),
        }
        logger.debug(f"Transferring bytes {chunk.start_offset}-{chunk.end_offset} of session {chunk.upload_session_id}")
        try:
            response = self.transport.send_upload_request(endpoint, params)
        except ResumableUploadError as e:
            if allow_throw:
                raise
            if e.has_range():
                logger.debug(f"Graph corrected range to {e.start_offset}-{e.end_offset}")
                return TransferOutcome.progressed(chunk.with_range(e.start_offset, e.end_offset))
            logger.debug(f"Resumable error on bytes {chunk.start_offset}-{chunk.end_offset}: {e}")
            return TransferOutcome.retry(chunk)

        return TransferOutcome.progressed(chunk.with_range(
            _require_offset(response, 'start_offset', 'transfer'),
            _require_offset(response, 'end_offset', 'transfer'),
        ))

    def transfer(self, endpoint: str, chunk: TransferChunk, allow_throw: bool = False) -> TransferChunk:
        """
        Send one chunk and return the next.

        The same chunk instance is returned when the transfer failed with a
        resumable error and should be retried.
        """
        return self.attempt_transfer(endpoint, chunk, allow_throw).chunk

    def finish(self, endpoint: str, upload_session_id: str, metadata: Optional[Dict[str, Any]] = None) -> bool:
        """
        Close the upload session.

        Args:
            endpoint: Upload endpoint
            upload_session_id: Session to close
            metadata: Extra video fields (title, description, ...)

        Raises:
            ProtocolError: If Graph omits ``success``
        """
        params = dict(metadata or {})
        params.update({
            'upload_phase': 'finish',
            'upload_session_id': upload_session_id,
        })
        response = self.transport.send_upload_request(endpoint, params)
        success = bool(_require(response, 'success', 'finish'))
        logger.info(f"Upload session {upload_session_id} finished (success={success})")
        return success


def _require(response: Any, field: str, phase: str) -> Any:
    if not isinstance(response, dict) or field not in response:
        raise ProtocolError(f'Graph response to the "{phase}" phase is missing "{field}".', field)
    return response[field]


def _require_offset(response: Any, field: str, phase: str) -> int:
    value = _require(response, field, phase)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ProtocolError(f'Graph returned a non-numeric "{field}" in the "{phase}" phase: {value!r}.', field) from e
