"""Audit trail record describing one user activity."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any


def _format_time(moment: datetime) -> str:
    """Format a datetime as RFC 3339 with trimmed fractional seconds."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _json(name: str, default: Any = "", **kwargs: Any) -> Any:
    if "default_factory" in kwargs:
        return field(metadata={"json": name}, **kwargs)
    return field(default=default, metadata={"json": name})


_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class AuditPayload:
    """One audited activity, serialisable under its wire field names."""

    user_id: int = _json("userId", 0)
    account_number: str = _json("accountNumber")
    channel_code: str = _json("channelCode")
    activity_date: datetime = _json("activityDate", _ZERO_TIME)
    activity_category: str = _json("activityCategory")
    activity_name: str = _json("activityName")
    activity_ref_code: str = _json("activityRefCode")
    activity_status: str = _json("activityStatus")
    device_id: str = _json("deviceId")
    phone_os: str = _json("phoneOs")
    phone_type: str = _json("phoneType")
    phone_brand: str = _json("phoneBrand")
    user_agent: str = _json("userAgent")
    ip_address: str = _json("ipAddress")
    app_version: str = _json("appVersion")
    core_ref_no: str = _json("coreRefNo")
    transaction_id: str = _json("transactionId")
    source_system: str = _json("sourceSystem")
    error_code: str = _json("errorCode")
    error_message: str = _json("errorMessage")
    additional_data: str = _json("additionalData")
    latitude: float = _json("latitude", 0.0)
    longitude: float = _json("longitude", 0.0)
    created_by: str = _json("createdBy")

    def to_dict(self) -> dict[str, Any]:
        """Return the payload keyed by its JSON field names."""
        result: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, datetime):
                value = _format_time(value)
            result[item.metadata["json"]] = value
        return result