"""
IP geolocation lookup against ip-api.com.

A single GET with a fixed timeout. Transport failures, bodies that are not
JSON, payloads missing fields and payloads the service itself marks as
failed all surface as LocationLookupError.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


log = logging.getLogger(__name__)

IP_API_URL = "http://ip-api.com/json/"
REQUEST_TIMEOUT = 10.0


class LocationLookupError(Exception):
    """The lookup could not produce a LocationRecord."""


@dataclass(frozen=True)
class LocationRecord:
    query: str
    status: str
    country: str
    country_code: str
    region: str
    region_name: str
    city: str
    zip: str
    lat: float
    lon: float
    timezone: str
    isp: str
    org: str
    as_: str
    message: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "LocationRecord":
        """
        Build a record from an ip-api.com payload.
        Absent keys fall back to empty values, since the service omits most
        of them on failure. Raises TypeError if a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")

        def text(key: str) -> str:
            value = data.get(key, "")
            if not isinstance(value, str):
                raise TypeError(f"field {key!r} should be text, got {type(value).__name__}")
            return value

        def number(key: str) -> float:
            value = data.get(key, 0.0)
            # bool is an int subclass; ip-api never sends one for lat/lon
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"field {key!r} should be a number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"field {key!r} should be finite, got {value!r}")
            return float(value)

        return cls(
            query=text("query"),
            status=text("status"),
            country=text("country"),
            country_code=text("countryCode"),
            region=text("region"),
            region_name=text("regionName"),
            city=text("city"),
            zip=text("zip"),
            lat=number("lat"),
            lon=number("lon"),
            timezone=text("timezone"),
            isp=text("isp"),
            org=text("org"),
            as_=text("as"),
            message=text("message") or None,
        )


def fetch_location(
    session: Optional[requests.Session] = None,
    url: str = IP_API_URL,
    timeout: float = REQUEST_TIMEOUT,
) -> LocationRecord:
    """Look up the caller's public IP. One attempt, no retries."""
    client = session if session is not None else requests
    log.info("Looking up IP location at %s", url)

    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        # requests' JSONDecodeError is a RequestException too
        log.warning("IP lookup failed: %s", e)
        raise LocationLookupError(str(e)) from e
    except (ValueError, RecursionError) as e:
        log.warning("IP lookup returned malformed JSON: %s", e)
        raise LocationLookupError(f"malformed response: {e}") from e

    try:
        record = LocationRecord.from_json(payload)
    except (KeyError, TypeError, ValueError) as e:
        log.warning("IP lookup returned an unexpected payload: %s", e)
        raise LocationLookupError(f"unexpected response: {e}") from e

    if record.status != "success":
        reason = record.message or record.status or "unknown reason"
        log.warning("ip-api.com refused the lookup: %s", reason)
        raise LocationLookupError(f"lookup failed: {reason}")

    log.info("Located %s in %s, %s", record.query, record.city, record.country)
    return record
