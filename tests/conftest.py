from unittest.mock import patch

import pytest

from tests.factories import country_payload, make_response


@pytest.fixture
def japan_payload():
    return country_payload()


@pytest.fixture
def api_get():
    """Patch the outbound GET; tests set return_value / side_effect."""
    with patch("countries.utils.requests.get") as mocked:
        mocked.return_value = make_response(body=[country_payload()])
        yield mocked
