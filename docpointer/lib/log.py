"""
Centralized package-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from the package settings.

Features:
- A custom `LOG` function for package-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent and customizable logging format.

Usage:
- Use `LOG` for package-specific debug logging.
- The `beQuiet` flag controls whether logs are displayed.

Example:
    from docpointer.lib.log import LOG
    LOG("Token 'qwer' missed at '/asdf'")

Environment:
- Set `DOCPTR_BEQUIET=False` to show detailed logging output.
"""

from loguru import logger
from typing import Any, Optional, TextIO
import sys

from docpointer.config.settings import appsettings

APP_NAME: str = "DOCPOINTER"

# Create a distinct logger instance for the package
app_logger = logger.bind(app=APP_NAME)

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <30}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

_sink_id: Optional[int] = None


def log_configure(sink: TextIO = sys.stderr) -> int:
    """
    Attach a sink for records emitted by this package.

    Only records bound to this package are routed to the sink; handlers the
    host application registered with loguru are left untouched. Calling this
    again replaces the previously attached sink.

    :param sink: Stream receiving formatted records.
    :return: The loguru handler id of the attached sink.
    """
    global _sink_id
    if _sink_id is not None:
        logger.remove(_sink_id)
    _sink_id = logger.add(
        sink,
        format=logger_format,
        level=appsettings.logLevel,
        filter=lambda record: record["extra"].get("app") == APP_NAME,
    )
    return _sink_id


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Package-specific logging function.

    This function checks the `beQuiet` flag in `appsettings` and logs the message
    only if logging is enabled.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)


if not appsettings.beQuiet:
    log_configure()
