from __future__ import annotations

"""
Visitor Control Flow.

Traversal drivers ask pre-order and level hooks whether to keep going. Hooks
answer with an explicit Visit value; plain booleans are accepted and a hook
that returns nothing is read as CONTINUE, so side-effect-only lambdas work.
"""

from enum import Enum
from typing import Any, Callable

# Hook signatures (see the node module for the exact call shapes)
PreVisitor = Callable[..., Any]
PostVisitor = Callable[..., Any]
LevelVisitor = Callable[[Any, Any], Any]
NodeVisitor = Callable[[Any], Any]


class Visit(Enum):
    """Answer of a visitor hook to the traversal driver."""
    CONTINUE = "continue"
    STOP = "stop"

    @classmethod
    def of(cls, answer: Any) -> "Visit":
        """
        Normalize a hook's return value.

        Args:
            answer: Whatever the hook returned.

        Returns:
            Visit: CONTINUE or STOP.

        Raises:
            TypeError: If the hook returned something other than a Visit,
                a bool or None.
        """
        if isinstance(answer, Visit):
            return answer
        if answer is None:
            return cls.CONTINUE
        if isinstance(answer, bool):
            return cls.CONTINUE if answer else cls.STOP
        raise TypeError(
            f"Visitor must return Visit, bool or None, received {type(answer).__name__}."
        )


def proceed(answer: Any) -> bool:
    """Return True if the hook answer asks the driver to continue."""
    return Visit.of(answer) is Visit.CONTINUE


def always_continue(*_: Any) -> Visit:
    """Pre-order hook used by the post-order shorthands."""
    return Visit.CONTINUE


def ignore(*_: Any) -> None:
    """Post-order hook used by the pre-order shorthands."""
    return None
