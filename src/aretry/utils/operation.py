r"""Utilities to call operations with or without the attempt number."""

from __future__ import annotations

__all__ = ["bind_attempt", "takes_attempt"]

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def takes_attempt(operation: Callable[..., Any]) -> bool:
    """Indicate if an operation accepts the attempt number.

    An operation accepts the attempt number if it has at least one
    positional parameter. Operations whose signature cannot be inspected
    are assumed to accept it.

    Args:
        operation: The operation to inspect.

    Returns:
        ``True`` if the operation must be called with the attempt number,
        ``False`` if it must be called without argument.

    Example:
        ```pycon
        >>> from aretry.utils.operation import takes_attempt
        >>> takes_attempt(lambda attempt: attempt)
        True
        >>> takes_attempt(lambda: "ok")
        False

        ```
    """
    try:
        parameters = inspect.signature(operation).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(parameter.kind in _POSITIONAL_KINDS for parameter in parameters)


def bind_attempt(operation: Callable[..., Any]) -> Callable[[int], Any]:
    """Adapt a zero-or-one-argument operation to take the attempt number.

    Args:
        operation: Function called either with the attempt number
            (0-indexed) or without argument.

    Returns:
        A function always called with the attempt number.

    Example:
        ```pycon
        >>> from aretry.utils.operation import bind_attempt
        >>> bind_attempt(lambda: "ok")(3)
        'ok'
        >>> bind_attempt(lambda attempt: attempt * 2)(3)
        6

        ```
    """
    if takes_attempt(operation):
        return operation
    return lambda attempt: operation()  # noqa: ARG005
