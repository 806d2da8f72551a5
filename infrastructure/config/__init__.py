from .json_target_source import JSONTargetSource
from .sample import SAMPLE_TARGETS, write_sample_config

__all__ = ["JSONTargetSource", "SAMPLE_TARGETS", "write_sample_config"]
