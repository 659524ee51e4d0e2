from .helper import find_version
from .error import (
    CanonreqError,
    InvalidArgument,
    DuplicateHeader,
    IncompleteRequest,
)
from .request import Request, RequestBuilder

__version__ = find_version()
__all__ = (
    "Request",
    "RequestBuilder",
    "CanonreqError",
    "InvalidArgument",
    "DuplicateHeader",
    "IncompleteRequest",
)
