"""
Logging for the JDL parsing and generation pipeline.

Pipeline modules get a child of the "jdl.gen" logger and report through
the tag helpers, so every line of output has the same shape:

    from jdl_angular.api.gen_logging import get_logger, log_skip
    logger = get_logger(__name__)
    log_skip(logger, "Commented declaration at line 4")   ->  "  [SKIP] Commented ..."

Levels are chosen once by the CLI through `configure_gen_logging`.
"""

import logging
import sys

_LOGGER_NAME = "jdl.gen"

# (verbose, quiet) -> level; verbose wins when both are given
_LEVELS = {
    (True, False): logging.DEBUG,
    (True, True): logging.DEBUG,
    (False, False): logging.INFO,
    (False, True): logging.WARNING,
}


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a child logger under the jdl.gen hierarchy.

    "jdl_angular.api.extractors.entity_extractor" -> "jdl.gen.entity_extractor"
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def tag(label: str, message, indent: int = 2) -> str:
    return f"{' ' * indent}[{label}] {message}"


def log_skip(logger: logging.Logger, message: str) -> None:
    """Something in the input was ignored (commented out, not a field)."""
    logger.debug(tag("SKIP", message))


def log_warn(logger: logging.Logger, message: str) -> None:
    """Something in the input is suspicious but generation goes on."""
    logger.warning(tag("WARN", message))


def log_step(logger: logging.Logger, message: str) -> None:
    logger.info(f"  -> {message}")


def log_generated(logger: logging.Logger, path) -> None:
    logger.debug(tag("GENERATED", path, indent=0))


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> int:
    """
    Set the jdl.gen level and make sure exactly one stderr handler exists.

        -v  DEBUG    skipped declarations, every written file
            INFO     audit notices, per-entity progress
        -q  WARNING  dangling references, shadowed fields, errors

    Calling it again only changes the level. Returns the level in effect.
    """
    level = _LEVELS[(bool(verbose), bool(quiet))]

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_GenFormatter())
        root_logger.addHandler(handler)
        root_logger.propagate = False

    for handler in root_logger.handlers:
        handler.setLevel(level)
    return level


class _GenFormatter(logging.Formatter):
    """Emit the message as-is; the tag helpers already shape it."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()
