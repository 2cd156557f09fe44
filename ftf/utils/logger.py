"""
Centralized logging for ftf.

Provides:
- Console logging on stderr (stdout is reserved for the chosen correction)
- Optional rotated log file
- Secret redaction on every record
"""
import os
import sys
from pathlib import Path

from loguru import logger

from ftf.utils.security import redact_sensitive_info


def use_emoji_logs() -> bool:
    """
    Check if emoji prefixes should be used in log messages.

    Returns True unless FTF_EMOJI_LOGS is set to "0" or "false".
    """
    value = os.environ.get("FTF_EMOJI_LOGS", "1").lower()
    return value not in ("0", "false", "no", "off")


_EMOJI_TO_ASCII = {
    "✅": "[OK]",
    "❌": "[ERROR]",
    "⚠️": "[WARN]",
    "🔧": "[RULE]",
    "🔍": "[MATCH]",
    "📁": "[FILE]",
    "🐚": "[SHELL]",
}


def log_prefix(emoji: str) -> str:
    """
    Return the appropriate log prefix based on FTF_EMOJI_LOGS.

    Args:
        emoji: The emoji to use when emoji logs are enabled.

    Returns:
        The emoji, or its ASCII equivalent (empty string if no mapping exists).
    """
    if use_emoji_logs():
        return emoji
    return _EMOJI_TO_ASCII.get(emoji, "")


def setup_logger(verbose: bool = False, log_file: Path | str | None = None) -> None:
    """
    Configure the logger.

    Rules:
    1. CONSOLE: DEBUG+ to stderr when verbose, WARNING+ otherwise.
    2. FILE: Only when log_file is given, DEBUG+ with rotation.

    Args:
        verbose: Enable debug output on the console
        log_file: Optional path of a log file
    """
    logger.remove()

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        format=console_format,
        level="DEBUG" if verbose else "WARNING",
        colorize=True,
    )

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="1 week",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )

    def redaction_filter(record):
        """Redact sensitive info from all logs."""
        record["message"] = redact_sensitive_info(record["message"])

    logger.configure(patcher=redaction_filter)


__all__ = ["logger", "log_prefix", "setup_logger", "use_emoji_logs"]
