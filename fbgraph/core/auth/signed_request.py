"""Signed requests: ``<signature>.<payload>`` signed with the app secret."""
import json
import time
from typing import Any, Dict, Optional, Tuple

from ..crypto import Base64Encoder, HmacSigner
from ..exceptions import SignedRequestError

ALGORITHM = 'HMAC-SHA256'


class SignedRequest:
    """
    Parses and creates signed requests.

    Example:
        >>> raw = SignedRequest(app).make({'user_id': '123'})
        >>> SignedRequest(app, raw).get_user_id()
        '123'
    """

    def __init__(self, app, raw_signed_request: Optional[str] = None):
        """
        Args:
            app: GraphApp whose secret signs the request
            raw_signed_request: Raw ``signature.payload`` string to parse

        Raises:
            SignedRequestError: If the raw request is malformed or badly signed
        """
        self.app = app
        self._signer = HmacSigner()
        self.raw_signed_request = raw_signed_request
        self.payload: Dict[str, Any] = {}
        if raw_signed_request:
            self.parse()

    def get_raw_signed_request(self) -> Optional[str]:
        return self.raw_signed_request

    def get_payload(self) -> Dict[str, Any]:
        return self.payload

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def get_user_id(self) -> Optional[str]:
        return self.get('user_id')

    def has_oauth_data(self) -> bool:
        return bool(self.get('oauth_token') or self.get('code'))

    def make(self, payload: Dict[str, Any]) -> str:
        """Sign a payload and return the raw signed request."""
        payload = dict(payload)
        payload.setdefault('algorithm', ALGORITHM)
        payload.setdefault('issued_at', int(time.time()))
        encoded_payload = Base64Encoder.encode(json.dumps(payload, separators=(',', ':')).encode())
        signature = self._signer.digest(encoded_payload, self.app.get_secret())
        return f"{Base64Encoder.encode(signature)}.{encoded_payload}"

    def parse(self) -> None:
        encoded_signature, encoded_payload = self._split()
        signature = self._decode_signature(encoded_signature)
        if not self._signer.verify(encoded_payload, self.app.get_secret(), signature):
            raise SignedRequestError('Signed request has an invalid signature.', 602)
        self.payload = self._decode_payload(encoded_payload)
        self._validate_algorithm()

    def _split(self) -> Tuple[str, str]:
        if '.' not in self.raw_signed_request:
            raise SignedRequestError('Malformed signed request.', 606)
        signature, payload = self.raw_signed_request.split('.', 1)
        return signature, payload

    @staticmethod
    def _decode_signature(encoded_signature: str) -> bytes:
        signature = Base64Encoder.decode(encoded_signature)
        if not signature:
            raise SignedRequestError('Signed request has malformed encoded signature data.', 607)
        return signature

    @staticmethod
    def _decode_payload(encoded_payload: str) -> Dict[str, Any]:
        try:
            payload = json.loads(Base64Encoder.decode(encoded_payload))
        except ValueError as e:
            raise SignedRequestError('Signed request has malformed encoded payload data.', 607) from e
        if not isinstance(payload, dict):
            raise SignedRequestError('Signed request has malformed encoded payload data.', 607)
        return payload

    def _validate_algorithm(self) -> None:
        if self.get('algorithm') != ALGORITHM:
            raise SignedRequestError('Signed request is using the wrong algorithm.', 605)
