"""Graph API error classification."""
from typing import Dict, Any, Optional, Type

from ...exceptions import SDKError

# Subcodes that mean the upload session can be resumed
RESUMABLE_UPLOAD_SUBCODES = (1363030, 1363019, 1363033, 1363021, 1363041)
# Subcode carrying a corrected byte range in error_data
RESUMABLE_RANGE_SUBCODE = 1363037

AUTHENTICATION_SUBCODES = (458, 459, 460, 463, 464, 467)
AUTHENTICATION_CODES = (100, 102, 190)
SERVER_CODES = (1, 2)
THROTTLE_CODES = (4, 17, 32, 341, 613)
CLIENT_CODES = (506,)
AUTHORIZATION_CODES = (10,)


class ResponseError(SDKError):
    """
    Raised when the Graph API returns an ``error`` object.

    Attributes:
        response: The GraphResponse that carried the error
        error: The decoded ``error`` object
    """

    def __init__(self, response, message: Optional[str] = None, code: Optional[int] = None):
        self.response = response
        body = response.get_decoded_body() if response is not None else {}
        self.error: Dict[str, Any] = {}
        if isinstance(body, dict) and isinstance(body.get('error'), dict):
            self.error = body['error']
        if code is None:
            code = _as_int(self.error.get('code'), -1)
        if message is None:
            message = self.error.get('message', 'Unknown error from Graph.')
        super().__init__(message, code)

    @property
    def http_status_code(self) -> Optional[int]:
        return self.response.get_http_status_code() if self.response is not None else None

    @property
    def subcode(self) -> int:
        return _as_int(self.error.get('error_subcode'), -1)

    @property
    def error_type(self) -> str:
        return self.error.get('type', '')

    @property
    def raw_response(self) -> Optional[str]:
        return self.response.get_body() if self.response is not None else None

    @property
    def response_data(self) -> Any:
        return self.response.get_decoded_body() if self.response is not None else None

    @classmethod
    def create(cls, response) -> 'ResponseError':
        """
        Classify an error response into the matching exception type.

        Args:
            response: GraphResponse whose decoded body holds an ``error`` object

        Returns:
            The classified ResponseError subclass instance (not raised)
        """
        body = response.get_decoded_body()
        error = body.get('error') if isinstance(body, dict) else None
        if not isinstance(error, dict):
            return OtherError(response, 'Unknown error from Graph.', -1)

        code = _as_int(error.get('code'), -1)
        subcode = _as_int(error.get('error_subcode'), -1)
        message = error.get('message', 'Unknown error from Graph.')

        if subcode in AUTHENTICATION_SUBCODES:
            return AuthenticationError(response, message, code)
        if subcode in RESUMABLE_UPLOAD_SUBCODES:
            return ResumableUploadError(response, message, code)
        if subcode == RESUMABLE_RANGE_SUBCODE:
            error_data = error.get('error_data') or {}
            return ResumableUploadError(
                response, message, code,
                start_offset=error_data.get('start_offset'),
                end_offset=error_data.get('end_offset'),
            )

        error_class: Type[ResponseError] = OtherError
        if code in AUTHENTICATION_CODES:
            error_class = AuthenticationError
        elif code in SERVER_CODES:
            error_class = ServerError
        elif code in THROTTLE_CODES:
            error_class = ThrottleError
        elif code in CLIENT_CODES:
            error_class = ClientError
        elif code in AUTHORIZATION_CODES or 200 <= code <= 299:
            error_class = AuthorizationError
        elif error.get('type') == 'OAuthException':
            error_class = AuthorizationError
        return error_class(response, message, code)


class AuthenticationError(ResponseError):
    """Login status or access token expired, revoked or invalid."""
    pass


class AuthorizationError(ResponseError):
    """Missing permission or OAuth failure."""
    pass


class ClientError(ResponseError):
    """Duplicate post or similar client-side error."""
    pass


class ServerError(ResponseError):
    """Graph API server-side failure."""
    pass


class ThrottleError(ResponseError):
    """Rate limit reached."""
    pass


class OtherError(ResponseError):
    """Any error not covered by another classification."""
    pass


class ResumableUploadError(ResponseError):
    """
    A resumable upload transfer failed.

    When Graph supplies a corrected byte range, ``start_offset`` and
    ``end_offset`` hold it; otherwise both are None.
    """

    def __init__(self, response, message: Optional[str] = None, code: Optional[int] = None,
                 start_offset: Optional[int] = None, end_offset: Optional[int] = None):
        super().__init__(response, message, code)
        self.start_offset = None if start_offset is None else int(start_offset)
        self.end_offset = None if end_offset is None else int(end_offset)

    def has_range(self) -> bool:
        return self.start_offset is not None and self.end_offset is not None


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
