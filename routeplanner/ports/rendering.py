"""Rendering port - Abstraction for presenting tickets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Ticket


class TicketRendererPort(Protocol):
    """Port for turning a ticket into human-readable text.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render(self, ticket: Ticket) -> str:
        """Render a ticket.

        Args:
            ticket: The ticket computed for one client.

        Returns:
            The rendered ticket.
        """
        ...
