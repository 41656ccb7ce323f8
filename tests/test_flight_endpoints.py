import pytest

from opensky_api.endpoints import (
    GetAllFlights,
    GetArrivals,
    GetDepartures,
    GetFlights,
    OpenSkyService,
)
from opensky_api.errors import (
    EmptyParameterSet,
    IntervalInvalid,
    IntervalTooLarge,
    InvalidIdentifier,
    RequestFailed,
)
from opensky_api.models.identifiers import ICAO24
from opensky_api.models.parameters import Authentication, TimeInterval

BASE_URL = "https://opensky.test/api/"

FLIGHTS = [
    {
        "icao24": "3c6444",
        "firstSeen": 1517227200,
        "estDepartureAirport": "EDDF",
        "lastSeen": 1517230800,
        "estArrivalAirport": "EGLL",
        "callsign": "DLH9LF  ",
        "departureAirportCandidatesCount": 1,
        "arrivalAirportCandidatesCount": 3,
    }
]


@pytest.mark.anyio
async def test_get_all_flights_builds_request_and_decodes(fake_transport):
    transport = fake_transport(payload=FLIGHTS)
    service = GetAllFlights((1517227200, 1517230800), transport=transport, base_url=BASE_URL)

    flights = await service.invoke()

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.url == "https://opensky.test/api/flights/all?begin=1517227200&end=1517230800"
    assert request.authentication is None
    assert flights[0].est_arrival_airport == "EGLL"


def test_get_all_flights_rejects_interval_over_two_hours():
    with pytest.raises(IntervalTooLarge):
        GetAllFlights(TimeInterval(0, 2 * 60 * 60 + 1))


@pytest.mark.anyio
async def test_get_arrivals_passes_airport_and_authentication(fake_transport):
    transport = fake_transport(payload=FLIGHTS)
    auth = Authentication(username="pilot", password="s3cret")
    service = GetArrivals(
        " EDDF ",
        TimeInterval(1517227200, 1517230800),
        authentication=auth,
        transport=transport,
        base_url=BASE_URL,
    )

    await service.invoke()

    request = transport.requests[0]
    assert request.url == (
        "https://opensky.test/api/flights/arrival"
        "?airport=EDDF&begin=1517227200&end=1517230800"
    )
    assert request.authentication == auth


@pytest.mark.anyio
async def test_get_arrivals_not_found_is_empty(fake_transport):
    transport = fake_transport(status_code=404, body="")
    service = GetArrivals("EDDF", (1517227200, 1517230800), transport=transport)

    assert await service.invoke() == []


@pytest.mark.anyio
async def test_get_arrivals_server_error_raises(fake_transport):
    transport = fake_transport(status_code=500, body="boom")
    service = GetArrivals("EDDF", (1517227200, 1517230800), transport=transport)

    with pytest.raises(RequestFailed) as excinfo:
        await service.invoke()

    assert excinfo.value.status_code == 500
    assert excinfo.value.body == "boom"


def test_airport_endpoints_allow_seven_days():
    week = 7 * 24 * 60 * 60

    GetArrivals("EDDF", (0, week))
    GetDepartures("EDDF", (0, week))
    with pytest.raises(IntervalTooLarge):
        GetDepartures("EDDF", (0, week + 1))


def test_airport_endpoints_require_airport():
    with pytest.raises(EmptyParameterSet):
        GetDepartures("  ", (0, 10))


@pytest.mark.anyio
async def test_get_departures_path(fake_transport):
    transport = fake_transport(payload=[])
    service = GetDepartures("EDDF", (1517227200, 1517230800), transport=transport)

    assert await service.invoke() == []
    assert transport.requests[0].path.endswith("/flights/departure")


@pytest.mark.anyio
async def test_get_flights_repeats_icao24(fake_transport):
    transport = fake_transport(payload=FLIGHTS)
    service = GetFlights(
        [ICAO24("3C6444"), "a0b1c2"],
        (1517227200, 1517230800),
        transport=transport,
        base_url=BASE_URL,
    )

    flights = await service.invoke()

    assert transport.requests[0].url == (
        "https://opensky.test/api/flights/aircraft"
        "?icao24=3c6444&icao24=a0b1c2&begin=1517227200&end=1517230800"
    )
    assert flights[0].transponder == ICAO24("3c6444")


def test_get_flights_requires_transponders_before_interval_checks():
    with pytest.raises(EmptyParameterSet):
        GetFlights([], (200, 100))


def test_get_flights_rejects_zero_span_and_long_intervals():
    with pytest.raises(IntervalInvalid):
        GetFlights(["3c6444"], (100, 100))
    with pytest.raises(IntervalTooLarge):
        GetFlights(["3c6444"], (0, 30 * 24 * 60 * 60 + 1))


def test_get_flights_validates_identifiers():
    with pytest.raises(InvalidIdentifier):
        GetFlights(["3c644"], (0, 10))


def test_base_service_cannot_be_instantiated():
    with pytest.raises(TypeError):
        OpenSkyService()


def test_subclass_must_build_query_items():
    class Incomplete(OpenSkyService[list]):
        path = "flights/all"

        def decode(self, payload):
            return payload

        def empty_result(self):
            return []

    with pytest.raises(TypeError):
        Incomplete()
