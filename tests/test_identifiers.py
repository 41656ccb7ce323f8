import pytest

from opensky_api.errors import InvalidIdentifier
from opensky_api.models.flights import Flight
from opensky_api.models.identifiers import ICAO24


@pytest.mark.parametrize("raw", ["abc123", "ABC123", "3C6444", "00ffAa"])
def test_icao24_normalizes_to_lower_case(raw):
    identifier = ICAO24(raw)

    assert identifier.value == raw.lower()
    assert str(identifier) == raw.lower()


@pytest.mark.parametrize(
    "raw", ["", "abc12", "abc1234", "abcxyz", " abc123", "abc123 ", "0xabcd", None, 0xABC123]
)
def test_icao24_rejects_invalid_values(raw):
    with pytest.raises(InvalidIdentifier):
        ICAO24(raw)


def test_icao24_equality_and_hash_use_normalized_value():
    assert ICAO24("ABC123") == ICAO24("abc123")
    assert len({ICAO24("ABC123"), ICAO24("abc123"), ICAO24("abc124")}) == 2
    assert ICAO24("abc123") != "abc123"


def test_icao24_is_immutable():
    identifier = ICAO24("abc123")

    with pytest.raises(AttributeError):
        identifier._value = "def456"


def test_icao24_coerce_accepts_instances_and_strings():
    identifier = ICAO24("abc123")

    assert ICAO24.coerce(identifier) is identifier
    assert ICAO24.coerce("ABC123") == identifier


def test_flight_transponder_round_trips_through_identifier():
    flight = Flight.model_validate(
        {
            "icao24": "3c6444",
            "firstSeen": 1517227200,
            "lastSeen": 1517230800,
            "departureAirportCandidatesCount": 1,
            "arrivalAirportCandidatesCount": 0,
        }
    )

    assert flight.transponder == ICAO24("3C6444")
