"""ConnectionService — per-supplier connection configuration, state and events.

Nothing here talks to a remote system. "Testing" a connection validates its
configuration; synchronisation outcomes are reported in by whoever ran the
sync, through :meth:`ConnectionService.record_sync`.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.connection import (
    ConnectionConfig,
    ConnectionState,
    validate_connection_config,
)
from ..primitives.exceptions import EntityNotFoundError
from ..primitives.id_generator import IIDGenerator, UUID4Generator
from ..validation.result import ValidationResult

logger = logging.getLogger("supplier_admin.connections")

DEFAULT_MAX_EVENTS = 100


class ConnectionEventType(str, Enum):
    TEST = "test"
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    SYNC = "sync"


class ConnectionEventStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ConnectionEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime
    type: ConnectionEventType
    status: ConnectionEventStatus
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ConnectionStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    supplier_id: str
    state: ConnectionState
    last_sync: datetime | None = None
    next_sync: datetime | None = None
    message: str = ""


class ConnectionService:
    """Holds connection setup for each supplier, keyed by supplier id."""

    def __init__(
        self,
        *,
        max_events: int = DEFAULT_MAX_EVENTS,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._max_events = max_events
        self._id_generator = id_generator or UUID4Generator()
        self._configs: dict[str, ConnectionConfig] = {}
        self._states: dict[str, ConnectionState] = {}
        self._events: dict[str, deque[ConnectionEvent]] = {}

    # ── Configuration ────────────────────────────────────────────

    def save_config(
        self, supplier_id: str, config: ConnectionConfig
    ) -> ConnectionConfig:
        """Store *config* for *supplier_id*.

        Raises:
            ValidationError: If the configuration is incomplete for its type.
        """
        validate_connection_config(config).raise_if_invalid()
        self._configs[supplier_id] = config
        self._states.setdefault(supplier_id, ConnectionState.DISCONNECTED)
        logger.info(
            "Saved %s connection for supplier %s", config.type.value, supplier_id
        )
        return config

    def get_config(self, supplier_id: str) -> ConnectionConfig | None:
        return self._configs.get(supplier_id)

    def update_field_mapping(
        self, supplier_id: str, mapping: dict[str, str]
    ) -> ConnectionConfig:
        config = self._require_config(supplier_id)
        return self.save_config(
            supplier_id, config.replace(field_mapping=dict(mapping))
        )

    # ── Lifecycle ────────────────────────────────────────────────

    def test_connection(
        self, supplier_id: str, config: ConnectionConfig | None = None
    ) -> ValidationResult:
        """Validate *config* (or the saved one) and log the outcome."""
        if config is None:
            config = self._require_config(supplier_id)
        result = validate_connection_config(config)
        if result.is_valid:
            self._record(
                supplier_id,
                ConnectionEventType.TEST,
                True,
                "Connection test successful",
            )
        else:
            self._record(
                supplier_id,
                ConnectionEventType.TEST,
                False,
                "Connection test failed",
                {"errors": result.errors},
            )
        return result

    def connect(self, supplier_id: str) -> ConnectionStatus:
        config = self._require_config(supplier_id)
        result = validate_connection_config(config)
        if result.is_valid:
            self._states[supplier_id] = ConnectionState.CONNECTED
            self._record(supplier_id, ConnectionEventType.CONNECT, True, "Connected")
        else:
            self._states[supplier_id] = ConnectionState.FAILED
            self._record(
                supplier_id,
                ConnectionEventType.CONNECT,
                False,
                "Failed to establish connection",
                {"errors": result.errors},
            )
        return self.get_status(supplier_id)

    def disconnect(self, supplier_id: str) -> ConnectionStatus:
        self._require_config(supplier_id)
        self._states[supplier_id] = ConnectionState.DISCONNECTED
        self._record(supplier_id, ConnectionEventType.DISCONNECT, True, "Disconnected")
        return self.get_status(supplier_id)

    def record_sync(
        self,
        supplier_id: str,
        *,
        success: bool,
        message: str = "",
        details: dict[str, Any] | None = None,
        at: datetime | None = None,
    ) -> ConnectionEvent:
        """Log a finished synchronisation; success advances ``last_synced``."""
        config = self._require_config(supplier_id)
        at = at or datetime.now(timezone.utc)
        if success:
            self._configs[supplier_id] = config.replace(last_synced=at)
            message = message or "Synchronization completed"
        else:
            message = message or "Synchronization failed"
        return self._record(
            supplier_id, ConnectionEventType.SYNC, success, message, details, at=at
        )

    # ── Status ───────────────────────────────────────────────────

    def get_status(self, supplier_id: str) -> ConnectionStatus:
        config = self._require_config(supplier_id)
        state = self._states.get(supplier_id, ConnectionState.DISCONNECTED)
        next_sync = None
        if config.last_synced is not None:
            next_sync = config.sync.next_sync_after(config.last_synced)
        latest = self.get_history(supplier_id, limit=1)
        return ConnectionStatus(
            supplier_id=supplier_id,
            state=state,
            last_sync=config.last_synced,
            next_sync=next_sync,
            message=latest[0].message if latest else "Not connected yet",
        )

    def get_history(
        self, supplier_id: str, limit: int | None = None
    ) -> list[ConnectionEvent]:
        """Logged events for *supplier_id*, newest first."""
        events = list(reversed(self._events.get(supplier_id, ())))
        return events if limit is None else events[:limit]

    def _record(
        self,
        supplier_id: str,
        event_type: ConnectionEventType,
        success: bool,
        message: str,
        details: dict[str, Any] | None = None,
        *,
        at: datetime | None = None,
    ) -> ConnectionEvent:
        event = ConnectionEvent(
            id=self._id_generator.next_id(),
            timestamp=at or datetime.now(timezone.utc),
            type=event_type,
            status=(
                ConnectionEventStatus.SUCCESS
                if success
                else ConnectionEventStatus.ERROR
            ),
            message=message,
            details=details or {},
        )
        log = self._events.setdefault(supplier_id, deque(maxlen=self._max_events))
        log.append(event)
        level = logging.INFO if success else logging.WARNING
        logger.log(level, "Supplier %s %s: %s", supplier_id, event_type.value, message)
        return event

    def _require_config(self, supplier_id: str) -> ConnectionConfig:
        config = self._configs.get(supplier_id)
        if config is None:
            raise EntityNotFoundError("ConnectionConfig", supplier_id)
        return config
