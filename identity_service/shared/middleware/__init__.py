from .error_handler import configure_error_handling
from .rate_limit import InMemoryRateLimiter, configure_rate_limit
from .request_logger import configure_request_logging
from .security_headers import configure_security_headers

__all__ = [
    "InMemoryRateLimiter",
    "configure_error_handling",
    "configure_rate_limit",
    "configure_request_logging",
    "configure_security_headers",
]
