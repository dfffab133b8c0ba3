"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the planning core and the adapters
that feed it schedule data and present its results.
"""

from .rendering import TicketRendererPort
from .schedule import ScheduleRepositoryPort

__all__ = [
    "ScheduleRepositoryPort",
    "TicketRendererPort",
]
