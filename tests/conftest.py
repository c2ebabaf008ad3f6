import pytest

from ipvisualizer.lookup import LocationRecord


LONDON_PAYLOAD = {
    "query": "81.2.69.160",
    "status": "success",
    "country": "United Kingdom",
    "countryCode": "GB",
    "region": "ENG",
    "regionName": "England",
    "city": "London",
    "zip": "EC1A",
    "lat": 51.5,
    "lon": -0.12,
    "timezone": "Europe/London",
    "isp": "Andrews & Arnold Ltd",
    "org": "Andrews & Arnold",
    "as": "AS20712 Andrews & Arnold Ltd",
}


@pytest.fixture
def london_payload() -> dict:
    return dict(LONDON_PAYLOAD)


@pytest.fixture
def london_record() -> LocationRecord:
    return LocationRecord.from_json(LONDON_PAYLOAD)
