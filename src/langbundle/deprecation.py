"""Deprecation utilities for langbundle.

Provides a standardized deprecation warning and a decorator for marking
deprecated APIs with migration guidance.

Policy:
    - Deprecated aliases stay functional until the announced removal version
    - Warnings name the removal version and the replacement call

Python 3.13+.
"""

import functools
import warnings
from collections.abc import Callable
from typing import ParamSpec, TypeVar

__all__ = [
    "deprecated",
    "warn_deprecated",
]

P = ParamSpec("P")
R = TypeVar("R")


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Issue a DeprecationWarning with the standard message format.

    Args:
        feature: Name of the deprecated feature
        removal_version: Version when the feature will be removed (e.g., "1.0.0")
        alternative: Suggested replacement (optional)
        stacklevel: Stack level for warning (default: 2, caller's caller)

    Example:
        >>> warn_deprecated("tl()", removal_version="1.0.0", alternative="t(id, lang=lang)")
        # DeprecationWarning: tl() is deprecated and will be removed in
        # version 1.0.0. Use t(id, lang=lang) instead.
    """
    msg = f"{feature} is deprecated and will be removed in version {removal_version}."
    if alternative:
        msg += f" Use {alternative} instead."

    warnings.warn(msg, DeprecationWarning, stacklevel=stacklevel)


def deprecated(
    *,
    removal_version: str,
    alternative: str | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator marking a function as deprecated.

    Emits DeprecationWarning on each call, pointing at the caller's line.
    Preserves signature and docstring, appending a deprecation note.

    Args:
        removal_version: Version when the function will be removed
        alternative: Suggested replacement call (optional)
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warn_deprecated(
                f"{func.__qualname__}()",
                removal_version=removal_version,
                alternative=alternative,
                stacklevel=3,
            )
            return func(*args, **kwargs)

        note = f"\n\n.. deprecated::\n    Will be removed in version {removal_version}."
        if alternative:
            note += f"\n    Use ``{alternative}`` instead."
        if wrapper.__doc__:
            wrapper.__doc__ += note
        else:
            wrapper.__doc__ = note.strip()

        return wrapper

    return decorator
