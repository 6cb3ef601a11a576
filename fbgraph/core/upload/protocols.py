"""
Protocol definitions for the upload module.

The uploader talks to Graph only through an UploadTransport, so tests can
play the server without HTTP.
"""
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class UploadTransport(Protocol):
    """Sends one upload-phase request and returns the decoded body."""

    def send_upload_request(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send a POST to the upload endpoint.

        Args:
            endpoint: Graph endpoint, e.g. ``/me/videos``
            params: Form params; GraphFile values are sent as file parts

        Returns:
            Decoded response body

        Raises:
            ResponseError: If Graph returned an error
        """
        ...
