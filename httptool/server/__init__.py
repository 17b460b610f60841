"""Host-side pieces: the response sink and the Starlette adapter.

The application factory lives in :mod:`httptool.server.app` and is not
imported here, so the middleware package can depend on this one.
"""

from httptool.server.endpoint import ErrorHandler, as_endpoint, default_error_handler
from httptool.server.response import ResponseWriter, http_error
from httptool.status import status_text

__all__ = [
    "ErrorHandler",
    "ResponseWriter",
    "as_endpoint",
    "default_error_handler",
    "http_error",
    "status_text",
]
