"""Typed domain errors for the route planner.

All errors inherit from RoutePlannerError and can optionally wrap a
root cause exception for debugging. Graph errors are raised before any
mutation, so a failed call always leaves the graph unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(RoutePlannerError):
    """Graph construction or lookup error."""


@dataclass
class InvalidArgumentError(GraphError):
    """A required input is missing, empty, or of the wrong shape.

    Attributes:
        method: Name of the operation that rejected the argument
        argument: Name of the rejected argument
        expected_type: Description of what was expected
        received: String form of the received value
    """

    method: str = ""
    argument: str = ""
    expected_type: str = ""
    received: str = ""


@dataclass
class UnknownKeyError(GraphError):
    """A lookup references a node or edge key that does not exist.

    Attributes:
        method: Name of the operation performing the lookup
        kind: Either 'node' or 'edge'
        key: The missing key
    """

    method: str = ""
    kind: str = ""
    key: str = ""


@dataclass
class DuplicateKeyError(GraphError):
    """A node with the same key is already registered."""

    key: str = ""


@dataclass
class SelfLoopError(GraphError):
    """An edge would link a node to itself."""

    key: str = ""


@dataclass
class ValidationError(RoutePlannerError):
    """A record field fails type, range or enum checks.

    Attributes:
        field_name: Name of the offending field
        value: String form of the rejected value
    """

    field_name: str = ""
    value: str = ""


@dataclass
class ScheduleLoadError(RoutePlannerError):
    """Schedule data could not be read or parsed.

    Attributes:
        file_path: Path to the schedule file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoutePlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""


def _describe(value: Any) -> str:
    return repr(value) if isinstance(value, str) else str(value)


def make_invalid_argument_error(
    method: str,
    argument: str,
    received: Any,
    expected_type: str = "non-empty string",
) -> InvalidArgumentError:
    """Build an InvalidArgumentError with a consistent message.

    Example message::

        "Graph.add_node" argument [key] expected a <non-empty string>. Received <int> 3.
    """
    received_type = type(received).__name__
    text = (
        f'"{method}" argument [{argument}] expected a <{expected_type}>. '
        f"Received <{received_type}> {_describe(received)}."
    )
    return InvalidArgumentError(
        text,
        method=method,
        argument=argument,
        expected_type=expected_type,
        received=_describe(received),
    )


def make_unknown_key_error(method: str, kind: str, key: str) -> UnknownKeyError:
    """Build an UnknownKeyError with a consistent message."""
    return UnknownKeyError(
        f'"{method}" {kind} key {{{key}}} does not exist.',
        method=method,
        kind=kind,
        key=key,
    )
