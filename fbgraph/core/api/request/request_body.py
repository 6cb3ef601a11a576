"""Request bodies: url-encoded forms and multipart uploads."""
from typing import Dict, Any, Optional, List, Tuple

from urllib3 import encode_multipart_formdata

from .url import build_query, to_query_value


class RequestBodyUrlEncoded:
    """``application/x-www-form-urlencoded`` body."""

    content_type = 'application/x-www-form-urlencoded'

    def __init__(self, params: Optional[Dict[str, Any]] = None):
        self.params = params or {}

    def get_body(self) -> str:
        return build_query(self.params)


class RequestBodyMultipart:
    """``multipart/form-data`` body with file parts."""

    def __init__(self, params: Optional[Dict[str, Any]] = None,
                 files: Optional[Dict[str, Any]] = None,
                 boundary: Optional[str] = None):
        """
        Args:
            params: Plain form fields
            files: Mapping of field name to GraphFile
            boundary: Fixed boundary; generated when omitted
        """
        self.params = params or {}
        self.files = files or {}
        self._body: Optional[bytes] = None
        self._content_type: Optional[str] = None
        self._boundary = boundary

    def _fields(self) -> List[Tuple[str, Any]]:
        fields: List[Tuple[str, Any]] = [
            (key, to_query_value(value)) for key, value in self.params.items() if value is not None
        ]
        for name, graph_file in self.files.items():
            fields.append((name, (graph_file.get_file_name(), graph_file.get_contents(), graph_file.get_mimetype())))
        return fields

    def _encode(self) -> None:
        if self._body is None:
            self._body, self._content_type = encode_multipart_formdata(self._fields(), boundary=self._boundary)

    def get_body(self) -> bytes:
        self._encode()
        return self._body

    @property
    def content_type(self) -> str:
        self._encode()
        return self._content_type

    def get_boundary(self) -> str:
        return self.content_type.split('boundary=', 1)[1]
