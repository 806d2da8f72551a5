"""Infrastructure layer - Config loading and report persistence."""
from .config import JSONTargetSource, write_sample_config
from .reporting import JSONReportWriter

__all__ = [
    'JSONTargetSource',
    'write_sample_config',
    'JSONReportWriter',
]
