"""Schedule adapters - Implementations of the schedule repository port.

Available implementations:
- XMLScheduleRepository: Loads connections and clients from XML files
"""

from .xml_repository import XMLScheduleRepository

__all__ = ["XMLScheduleRepository"]
