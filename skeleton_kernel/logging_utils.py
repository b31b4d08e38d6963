from __future__ import annotations

import logging
import reprlib
from fractions import Fraction
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 6
_repr.maxtuple = 6

# dataclass values whose __str__ is already compact
_COMPACT_TYPES = ("Point", "Segment", "Line", "Rational", "Trisegment", "SeededTrisegment", "NodeSeed")


def format_number(value: Any) -> str:
    """Render a field number; fractions also show their approximate value."""

    if isinstance(value, Fraction):
        if value.denominator == 1:
            return str(value.numerator)
        try:
            approx = float(value)
        except OverflowError:
            return f"{value.numerator}/{value.denominator}"
        return f"{approx:.17g}~"
    if isinstance(value, float):
        return f"{value:.17g}"
    return _repr.repr(value)


def describe(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    if value is None:
        return "None"
    if type(value).__name__ in _COMPACT_TYPES:
        rendered = str(value)
    elif isinstance(value, (Fraction, float)):
        rendered = format_number(value)
    elif isinstance(value, (list, tuple)):
        items = [describe(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append("...")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        rendered = open_br + ", ".join(items) + close_br
    else:
        try:
            rendered = _repr.repr(value)
        except Exception as exc:  # pragma: no cover
            rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(describe(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={describe(value)}" for key, value in kwargs.items()) + "}")
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG records on entry and exit."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.exception("Exception in %s", qualname)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, describe(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call", "describe", "format_number"]
