"""Error hierarchy of the tool.

Metadata errors never escape the version validator (they collapse into an
invalid result). Request errors are caught at the request service boundary and
turned into a non-zero exit code.
"""

from __future__ import annotations


class TailorError(Exception):
    pass


class MetadataError(TailorError):
    pass


class MetadataUnreadable(MetadataError):
    pass


class MetadataMalformed(MetadataError):
    pass


class MetadataVersionMissing(MetadataError):
    pass


class MissingCredentials(TailorError):
    pass


class RequestError(TailorError):
    pass


class RequestTransportFailure(RequestError):
    pass


class RequestRejectedByServer(RequestError):
    def __init__(self, message: str, *, status_code: int, content: object | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.content = content
