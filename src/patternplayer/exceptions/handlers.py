"""
Helpers that turn low-level failures into PatternPlayerError and report them.

- `wrap_pydantic_error`: pydantic ValidationError -> ConfigFileInvalidError
  (bad JSON) or ConfigValidationError (bad values)
- `format_error_for_display`: (message, hint) pair for the CLI
- `ErrorContext`: logs a step starting, finishing, or failing

A failing step is logged once, by the ErrorContext around it. Callers higher
up only report the error to the user.
"""

import logging
from typing import Any, Optional

from .base import PatternPlayerError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager that logs one step of a larger operation.

    Example:
        ```python
        with ErrorContext("build playlist", logger_instance=logger, log_level=logging.INFO):
            playlist = build_playlist(config)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
        log_level: int = logging.DEBUG,
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the step
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
            log_level: Level for the start and completion messages
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.log_level = log_level
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.log(self.log_level, f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.log(self.log_level, f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, PatternPlayerError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        # Suppress only when asked to
        return not self.re_raise


def _field_name(error: dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> PatternPlayerError:
    """
    Convert a pydantic validation failure into a configuration error.

    Args:
        error: Usually a pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        ConfigFileInvalidError when the file is not valid JSON,
        ConfigValidationError otherwise
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError(field="unknown", value=None, error_msg=str(error), file_path=file_path)

    errors = error.errors()

    json_errors = [err for err in errors if err.get("type") == "json_invalid"]
    if json_errors:
        details = json_errors[0]
        parse_error = details.get("ctx", {}).get("error") or details.get("msg", str(error))
        return ConfigFileInvalidError(file_path, str(parse_error))

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            field=_field_name(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    summary = "\n".join(
        f"  - {_field_name(err)}: {err.get('msg', 'validation failed')}" for err in errors
    )
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n{summary}",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, PatternPlayerError):
        return error.user_message, error.recovery_hint

    return f"{type(error).__name__}: {error}", None
