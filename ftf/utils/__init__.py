"""
ftf Utils - Logging and security helpers.
"""

from ftf.utils.logger import log_prefix, logger, setup_logger
from ftf.utils.security import redact_sensitive_info

__all__ = ["log_prefix", "logger", "redact_sensitive_info", "setup_logger"]
