"""External-system connection configuration and synchronisation settings."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from enum import Enum

from pydantic import Field, SecretStr

from ..validation.result import ValidationResult
from .field_mapping import DEFAULT_FIELD_MAPPING, validate_field_mapping
from .value_object import ValueObject


class ConnectionType(str, Enum):
    API = "api"
    SFTP = "sftp"
    DATABASE = "database"
    WEBHOOK = "webhook"
    MANUAL = "manual"


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"
    SYNCING = "syncing"


class SyncFrequency(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    MANUAL = "manual"


class ConflictResolution(str, Enum):
    SUPPLIER = "supplier"
    LOCAL = "local"
    NEWEST = "newest"
    MANUAL = "manual"


class ConnectionCredentials(ValueObject):
    api_key: SecretStr | None = None
    username: str = ""
    password: SecretStr | None = None
    host: str = ""
    port: int | None = Field(default=None, ge=1, le=65535)
    database: str = ""
    certificate_path: str = ""
    sftp_path: str = ""
    webhook_url: str = ""
    secret_key: SecretStr | None = None


class SyncOptions(ValueObject):
    overwrite_existing: bool = False
    sync_images: bool = True
    sync_prices: bool = True
    sync_inventory: bool = True
    notify_on_completion: bool = False
    conflict_resolution: ConflictResolution = ConflictResolution.NEWEST


class SyncSettings(ValueObject):
    frequency: SyncFrequency = SyncFrequency.DAILY
    sync_time: str | None = None
    sync_day: str | None = None
    enabled: bool = False
    retry_attempts: int = Field(default=3, ge=0)
    timeout_seconds: int = Field(default=30, ge=1)
    options: SyncOptions = Field(default_factory=SyncOptions)

    def next_sync_after(self, last: datetime) -> datetime | None:
        """When the next scheduled sync is due, or ``None`` if unscheduled."""
        if not self.enabled or self.frequency is SyncFrequency.MANUAL:
            return None
        if self.frequency is SyncFrequency.HOURLY:
            return last + timedelta(hours=1)
        if self.frequency is SyncFrequency.DAILY:
            return last + timedelta(days=1)
        if self.frequency is SyncFrequency.WEEKLY:
            return last + timedelta(weeks=1)
        return _add_month(last)


def _add_month(moment: datetime) -> datetime:
    year, month = divmod(moment.month, 12)
    year += moment.year
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class ConnectionConfig(ValueObject):
    type: ConnectionType = ConnectionType.API
    name: str = ""
    base_url: str = ""
    credentials: ConnectionCredentials = Field(default_factory=ConnectionCredentials)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    field_mapping: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_FIELD_MAPPING)
    )
    enabled: bool = False
    last_synced: datetime | None = None


def _require(result: ValidationResult, field_name: str, value: object) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        result.add_error(field_name, "is required")


def validate_connection_config(config: ConnectionConfig) -> ValidationResult:
    """Check the fields each connection type needs, and the field mapping."""
    result = ValidationResult.success()
    creds = config.credentials

    if config.type is ConnectionType.API:
        _require(result, "base_url", config.base_url)
        if creds.api_key is None and not creds.username.strip():
            result.add_error("credentials", "api_key or username is required")
    elif config.type is ConnectionType.SFTP:
        _require(result, "credentials.host", creds.host)
        _require(result, "credentials.username", creds.username)
        _require(result, "credentials.sftp_path", creds.sftp_path)
    elif config.type is ConnectionType.DATABASE:
        _require(result, "credentials.host", creds.host)
        _require(result, "credentials.database", creds.database)
        _require(result, "credentials.username", creds.username)
    elif config.type is ConnectionType.WEBHOOK:
        _require(result, "credentials.webhook_url", creds.webhook_url)

    return result.merge(validate_field_mapping(config.field_mapping))
