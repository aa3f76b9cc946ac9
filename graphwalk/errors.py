"""Error types raised by graphwalk algorithms.

Every error carries an ordered ``context`` mapping of named diagnostic fields
(vertices, weights, the endpoints of the failed call). Algorithms add the
context of the outer call to an error raised deeper down and re-raise it, so
the caller sees one exception with the whole picture.
"""

from __future__ import annotations

from typing import Any, Dict


class GraphWalkError(Exception):
    """Base error with named diagnostic fields.

    Attributes:
        message: Human-readable description without context.
        context: Diagnostic fields in insertion order.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context)

    def add_context(self, name: str, value: Any) -> GraphWalkError:
        """Attach a diagnostic field and return self for chaining."""
        self.context[name] = value
        return self

    def __str__(self) -> str:
        if not self.context:
            return self.message
        fields = ", ".join(f"{name}={value!r}" for name, value in self.context.items())
        return f"{self.message} ({fields})"


class NegativeWeightError(GraphWalkError, ValueError):
    """A traversed arc has a negative weight."""

    def __init__(self, head: Any, tail: Any, weight: float, **context: Any) -> None:
        super().__init__(
            "Negative weight detected", head=head, tail=tail, weight=weight, **context
        )

    @property
    def head(self) -> Any:
        return self.context["head"]

    @property
    def tail(self) -> Any:
        return self.context["tail"]

    @property
    def weight(self) -> float:
        return self.context["weight"]


class NegativeCycleError(GraphWalkError, ValueError):
    """A cycle with negative total weight is reachable from the source."""

    def __init__(self, **context: Any) -> None:
        super().__init__("Negative cycle detected", **context)
