"""Services layer - Application orchestration.

Available services:
- ItineraryPlannerService: Builds the network and plans client tickets
"""

from .planner import ItineraryPlannerService

__all__ = ["ItineraryPlannerService"]
