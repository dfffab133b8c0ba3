"""Rendering adapters - Implementations of the ticket rendering port."""

from .text_renderer import TextTicketRenderer

__all__ = ["TextTicketRenderer"]
