"""Schedule ports - Abstractions for loading connections and clients.

The repository is responsible for reading schedule data from persistent
storage into validated domain records. The core never performs I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import ClientRequest, Connection


class ScheduleRepositoryPort(Protocol):
    """Port for loading schedule data.

    Implementation: adapters/schedule/xml_repository.py
    """

    def load_connections(self) -> Sequence[Connection]:
        """Load every scheduled connection.

        Returns:
            Connections in file order.

        Raises:
            ScheduleLoadError: If the data cannot be read or is invalid.
        """
        ...

    def load_clients(self) -> Sequence[ClientRequest]:
        """Load every client request.

        Returns:
            Client requests in file order.

        Raises:
            ScheduleLoadError: If the data cannot be read or is invalid.
        """
        ...
