"""
Tests for the country lookup client
"""
import pytest
import requests

from countries import utils
from countries.exceptions import DecodeError, NetworkError, NoMatchError
from countries.projector import Row
from tests.factories import country_payload, make_record, make_response


def test_build_lookup_url_encodes_name_and_keeps_fields():
    url = utils.build_lookup_url("Côte d'Ivoire/x")

    assert url.startswith("https://restcountries.com/v3.1/translation/C%C3%B4te%20d%27Ivoire%2Fx?")
    assert url.endswith("?fields=" + utils.FIELDS)


def test_fields_cover_every_record_attribute():
    assert utils.FIELDS.split(",") == [
        "name", "capital", "population", "flag", "region", "subregion", "timezones",
        "latlng", "capitalInfo", "tld", "languages", "currencies", "borders",
        "landlocked", "startOfWeek", "continents", "maps",
    ]


def test_lookup_country_returns_first_record(api_get):
    api_get.return_value = make_response(body=[
        country_payload(),
        {"not": "a country"},
    ])

    record = utils.lookup_country("Japan")

    assert record == make_record()
    api_get.assert_called_once_with(utils.build_lookup_url("Japan"), timeout=None)


def test_lookup_country_uses_configured_timeout(api_get, settings):
    settings.COUNTRY_LOOKUP = {"TIMEOUT": 5}

    utils.lookup_country("Japan")

    assert api_get.call_args.kwargs["timeout"] == 5


def test_transport_failure_is_network_error(api_get):
    api_get.side_effect = requests.ConnectionError("boom")

    with pytest.raises(NetworkError) as excinfo:
        utils.lookup_country("Japan")
    assert excinfo.value.kind == "network"


def test_server_error_status_is_network_error(api_get):
    api_get.return_value = make_response(status_code=500, body={"message": "oops"})

    with pytest.raises(NetworkError):
        utils.lookup_country("Japan")


def test_not_found_status_is_no_match(api_get):
    api_get.return_value = make_response(status_code=404, body={"status": 404, "message": "Not Found"})

    with pytest.raises(NoMatchError):
        utils.lookup_country("Atlantis")


def test_empty_array_is_no_match(api_get):
    api_get.return_value = make_response(body=[])

    with pytest.raises(NoMatchError) as excinfo:
        utils.lookup_country("Atlantis")
    # still a decode outcome
    assert isinstance(excinfo.value, DecodeError)


def test_non_json_body_is_decode_error(api_get):
    api_get.return_value = make_response(content=b"<html>nope</html>")

    with pytest.raises(DecodeError) as excinfo:
        utils.lookup_country("Japan")
    assert not isinstance(excinfo.value, NoMatchError)


def test_object_body_is_decode_error():
    with pytest.raises(DecodeError):
        utils.parse_countries({"status": 200})


def test_schema_mismatch_is_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        utils.parse_countries([country_payload(population="many")])
    assert "population" in excinfo.value.details


def test_generate_summary_image_returns_png():
    png = utils.generate_summary_image(
        [Row("Region", "Asia"), Row("Maps", "OpenStreetMaps", href="https://osm.org")],
        "Japan",
    )

    assert png.startswith(b"\x89PNG")
