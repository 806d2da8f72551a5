from .timing import Stopwatch
from .tcp_checker import TCPChecker, describe_dial_error
from .http_checker import HTTPChecker, is_success_status
from .executor import ProbeExecutor

__all__ = [
    "Stopwatch",
    "TCPChecker",
    "describe_dial_error",
    "HTTPChecker",
    "is_success_status",
    "ProbeExecutor",
]
