"""Domain layer - Core business models and errors.

This module contains the domain records and typed errors used
throughout the application.
"""

from .errors import (
    ConfigurationError,
    DuplicateKeyError,
    GraphError,
    InvalidArgumentError,
    RoutePlannerError,
    ScheduleLoadError,
    SelfLoopError,
    UnknownKeyError,
    ValidationError,
)
from .models import (
    ClientRequest,
    Connection,
    Duration,
    Itinerary,
    Preference,
    Price,
    Ticket,
    TripType,
)

__all__ = [
    # Models
    "ClientRequest",
    "Connection",
    "Duration",
    "Itinerary",
    "Preference",
    "Price",
    "Ticket",
    "TripType",
    # Errors
    "RoutePlannerError",
    "GraphError",
    "InvalidArgumentError",
    "UnknownKeyError",
    "DuplicateKeyError",
    "SelfLoopError",
    "ValidationError",
    "ScheduleLoadError",
    "ConfigurationError",
]
