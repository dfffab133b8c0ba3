"""XML Schedule Repository adapter.

Reads attribute-style schedule files::

    <Flights>
      <Flight Number="123" Company="Air France" Origin="CDG"
              Destination="YUL" Departure="08:00Z" Arrival="10:30Z" Cost="420"/>
    </Flights>

    <Clients>
      <Client Name="Ada" Origin="CDG" Destination="YUL"
              Preference="Cost" Type="RoundTrip"/>
    </Clients>

Attribute names are matched case-insensitively.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from ...config import DataConfig, get_config
from ...domain.errors import ScheduleLoadError, ValidationError
from ...domain.models import ClientRequest, Connection

T = TypeVar("T")


def _read_items(path: Path, root_name: str, item_name: str) -> List[Dict[str, str]]:
    """Return the lower-cased attributes of every ``item_name`` element."""
    tree = ET.parse(path)
    root = tree.getroot()
    if root.tag != root_name:
        raise ScheduleLoadError(
            f"Expected <{root_name}> root element, found <{root.tag}>",
            file_path=str(path),
        )
    return [
        {name.lower(): value.strip() for name, value in element.attrib.items()}
        for element in root.iter(item_name)
    ]


def _connection_from_row(row: Dict[str, str]) -> Connection:
    return Connection(
        number=row.get("number", ""),
        company=row.get("company", ""),
        origin=row.get("origin", ""),
        destination=row.get("destination", ""),
        departure=row.get("departure", ""),
        arrival=row.get("arrival", ""),
        cost=row.get("cost", ""),
    )


def _client_from_row(row: Dict[str, str]) -> ClientRequest:
    return ClientRequest(
        name=row.get("name", ""),
        origin=row.get("origin", ""),
        destination=row.get("destination", ""),
        preference=row.get("preference", ""),  # type: ignore[arg-type]
        trip_type=row.get("type", "OneWay"),  # type: ignore[arg-type]
    )


@dataclass
class XMLScheduleRepository:
    """Schedule repository that loads from XML files.

    This adapter implements ScheduleRepositoryPort. Loaded records are
    cached until ``clear_cache`` is called.

    Attributes:
        config: Data configuration (paths, file names)
    """

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _connections: Optional[List[Connection]] = field(default=None, repr=False)
    _clients: Optional[List[ClientRequest]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_connections(self) -> Sequence[Connection]:
        """Load every connection from the flights file.

        Raises:
            ScheduleLoadError: If the file is missing, malformed, or
                holds an invalid connection.
        """
        if self._connections is None:
            self._connections = self._load(
                self.config.flights_path, "Flights", "Flight", _connection_from_row
            )
        return list(self._connections)

    def load_clients(self) -> Sequence[ClientRequest]:
        """Load every client request from the clients file.

        Raises:
            ScheduleLoadError: If the file is missing, malformed, or
                holds an invalid client.
        """
        if self._clients is None:
            self._clients = self._load(
                self.config.clients_path, "Clients", "Client", _client_from_row
            )
        return list(self._clients)

    def _load(
        self,
        path: Path,
        root_name: str,
        item_name: str,
        build: Callable[[Dict[str, str]], T],
    ) -> List[T]:
        self._logger.debug("Loading schedule file", extra={"path": str(path)})

        try:
            rows = _read_items(path, root_name, item_name)
        except (OSError, ET.ParseError) as e:
            raise ScheduleLoadError(
                f"Failed to read {item_name.lower()} data",
                file_path=str(path),
                cause=e,
            )

        records: List[T] = []
        for index, row in enumerate(rows, start=1):
            try:
                records.append(build(row))
            except ValidationError as e:
                raise ScheduleLoadError(
                    f"Invalid {item_name.lower()} #{index}",
                    file_path=str(path),
                    cause=e,
                )

        self._logger.info(
            "Schedule file loaded",
            extra={"path": str(path), "records": len(records)},
        )
        return records

    def clear_cache(self) -> None:
        """Clear cached connections and clients."""
        self._connections = None
        self._clients = None
        self._logger.debug("Schedule cache cleared")
