from .request_id import REQUEST_ID_HEADER, RequestIDMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestIDMiddleware",
    "LoggingMiddleware",
]
