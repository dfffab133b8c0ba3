"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the planner to:
- Schedule storage (XML files)
- Ticket presentation (plain text)
"""
