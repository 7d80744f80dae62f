"""
Shared error types and the step-runner used for batch rendering.

Two concerns live here:
1) Configuration errors raised by theme factories and overlays. They are
   raised immediately at construction time, never deferred to rendering.
2) Policy-controlled execution for batch jobs (e.g. the gallery command):
   debug mode re-raises at the first failure, run mode captures structured
   failure details and lets the batch continue.
"""

import json
import logging
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

# ==================================================================================================
#                                   EXCEPTIONS
# ==================================================================================================


class InvalidConfiguration(ValueError):
    """
    Raised when a theme or overlay option has an invalid value.

    Usage example
    -------------
        try:
            theme_half_open(font_size=-1)
        except InvalidConfiguration as exc:
            print(exc.option, exc)
    """

    def __init__(self, option: str, value: Any, reason: str) -> None:
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for '{option}': {value!r} ({reason})")


class UnknownPreset(InvalidConfiguration):
    """Raised when a theme or overlay name is not registered."""

    def __init__(self, kind: str, name: str, available: Iterable[str]) -> None:
        self.available = sorted(available)
        super().__init__(kind, name, f"available: {', '.join(self.available)}")


# ==================================================================================================
#                                   TYPES
# ==================================================================================================

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorPolicy:
    """
    Error handling policy.

    Attributes
    ----------
    debug : bool
        If True, exceptions are re-raised (fail-fast).
        If False, exceptions are logged and the batch continues.
    log_path : Path
        Where to write logs (file logger).
    """

    debug: bool
    log_path: Path


@dataclass(frozen=True)
class StepFailure:
    """
    Structured failure record for non-debug runs.

    Attributes
    ----------
    step : str
        Name of the step that failed.
    context : dict[str, Any]
        Useful metadata (theme name, output path, overlays, etc.).
    exc_type : str
        Exception class name.
    message : str
        Exception message.
    traceback : str
        Full traceback.
    timestamp_utc : str
        ISO timestamp.
    """

    step: str
    context: dict[str, Any]
    exc_type: str
    message: str
    traceback: str
    timestamp_utc: str


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """
    Result wrapper: either value or failure.

    Usage example
    -------------
        result = run_step(policy, "render:half_open", {"theme": "half_open"}, render, path)
        if result.failure is not None:
            # handle failure
            ...
        else:
            png_path = result.value
    """

    value: Optional[T]
    failure: Optional[StepFailure]


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def make_logger(*, log_path: Path) -> logging.Logger:
    """
    Return a file-backed logger used by batch steps.

    The function is idempotent for a given path: it avoids attaching duplicate
    handlers when called repeatedly in long-running processes or tests.
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("themekit.batch")
    logger.setLevel(logging.INFO)

    # One handler per log file, even across repeated calls.
    if not any(isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path) for h in logger.handlers):
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# ==================================================================================================
#                                   CORE LOGIC
# ==================================================================================================

def run_step(
    policy: ErrorPolicy,
    step: str,
    context: dict[str, Any],
    func: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> StepResult[T]:
    """
    Run a batch step with policy-controlled error handling.

    In debug mode, re-raises exceptions to halt immediately.
    In run mode, logs the failure and returns StepResult(value=None, failure=...).

    Usage example
    -------------
        policy = ErrorPolicy(debug=False, log_path=Path("gallery.log"))
        res = run_step(policy, "render:map", {"theme": "map"}, render, out_path)
        if res.failure:
            # continue / skip
            pass
    """
    logger = make_logger(log_path=policy.log_path)

    try:
        value = func(*args, **kwargs)
        return StepResult(value=value, failure=None)
    except Exception as exc:  # noqa: BLE001 (intentional: boundary catch)
        tb = traceback.format_exc()
        failure = StepFailure(
            step=step,
            context=context,
            exc_type=type(exc).__name__,
            message=str(exc),
            traceback=tb,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
        )

        logger.error("%s failed | %s: %s", step, failure.exc_type, failure.message)
        logger.error("context=%s", json.dumps(context, ensure_ascii=False, default=str))
        logger.error("traceback=%s", tb)

        if policy.debug:
            raise

        return StepResult(value=None, failure=failure)
