# commitview/utils/logging_config.py
"""commitview.utils.logging_config
=================================

Logging configuration for the commitview history browser.

The module defines the global logger objects and a single function,
`setup_logging`, which attaches handlers to the root logger according to the
``[logging]`` section of the application configuration.

Features:
    - Rotating file logging for general application events (commitview.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Optional key event tracing (keytrace.log) enabled via the
      COMMITVIEW_KEYTRACE environment variable.
    - Never raises; all errors are reported to stderr and logging continues
      with a best-effort configuration.

Globals:
    logger: Main application logger ("commitview").
    KEY_LOGGER: Logger for raw input trace events ("commitview.keyevents").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global loggers ========================
logger = logging.getLogger("commitview")
KEY_LOGGER = logging.getLogger("commitview.keyevents")

LOG_FILENAME = "commitview.log"
ERROR_LOG_FILENAME = "error.log"
KEY_TRACE_FILENAME = "keytrace.log"
KEY_TRACE_ENV = "COMMITVIEW_KEYTRACE"


def _rotating_handler(
    filename: str, max_bytes: int, backup_count: int
) -> logging.handlers.RotatingFileHandler:
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)
    return logging.handlers.RotatingFileHandler(
        filename, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to four independent handlers are installed:

    1. File handler - rotating commitview.log capturing everything from
       the configured `file_level` (default DEBUG) upward.
    2. Console handler - optional `stderr` output whose threshold is
       `console_level` (default WARNING).
    3. Error-file handler - optional rotating error.log that stores
       only ERROR and CRITICAL events.
    4. Key-event handler - optional rotating keytrace.log enabled when
       ``COMMITVIEW_KEYTRACE`` is set to ``1/true/yes``; attached to the
       ``commitview.keyevents`` logger.

    Existing handlers on the root logger are cleared, so calling the function
    repeatedly (e.g. in unit tests) does not duplicate records.

    Args:
        config (dict | None): Optional application configuration. Only the
            ``["logging"]`` sub-section is consulted; recognised keys are
            ``file_level``, ``console_level``, ``log_to_console`` and
            ``separate_error_log``.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    log_filename = LOG_FILENAME
    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = _rotating_handler(log_filename, 2 * 1024 * 1024, 5)
    except OSError as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}.",
            file=sys.stderr,
        )
        log_filename = os.path.join(tempfile.gettempdir(), LOG_FILENAME)
        print(f"Logging to temporary file: '{log_filename}'", file=sys.stderr)
        try:
            file_handler = _rotating_handler(log_filename, 2 * 1024 * 1024, 5)
        except OSError as e_tmp:
            print(
                f"Error setting up fallback logger '{log_filename}': {e_tmp}. File logging disabled.",
                file=sys.stderr,
            )
    if file_handler:
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        )
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        try:
            error_file_handler = _rotating_handler(ERROR_LOG_FILENAME, 1024 * 1024, 3)
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except OSError as e_efh:
            print(
                f"Error setting up separate error log '{ERROR_LOG_FILENAME}': {e_efh}.",
                file=sys.stderr,
            )

    root_logger = logging.getLogger()
    root_logger.handlers = []

    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)

    root_logger.setLevel(log_file_level)

    # Key Event Logger
    KEY_LOGGER.propagate = False
    KEY_LOGGER.setLevel(logging.DEBUG)
    KEY_LOGGER.handlers = []

    if os.environ.get(KEY_TRACE_ENV, "").lower() in {"1", "true", "yes"}:
        try:
            key_trace_handler = _rotating_handler(KEY_TRACE_FILENAME, 1024 * 1024, 3)
            key_trace_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            KEY_LOGGER.addHandler(key_trace_handler)
            KEY_LOGGER.disabled = False
            logging.info("Key event tracing enabled, logging to '%s'.", KEY_TRACE_FILENAME)
        except OSError as e_keytrace:
            logging.error(f"Failed to set up key trace logging: {e_keytrace}", exc_info=True)
            KEY_LOGGER.disabled = True
    else:
        KEY_LOGGER.addHandler(logging.NullHandler())
        KEY_LOGGER.disabled = True
        logging.debug("Key event tracing is disabled.")

    logging.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logging.info(
            f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}."
        )
    if console_handler:
        logging.info(
            f"Console logging to stderr at level: {logging.getLevelName(console_handler.level)}."
        )
    if error_file_handler:
        logging.info(f"Error logging to '{ERROR_LOG_FILENAME}' at level: ERROR.")
