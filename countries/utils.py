import io
import logging
from urllib.parse import quote

import requests
from django.conf import settings
from PIL import Image, ImageDraw, ImageFont
from requests.exceptions import HTTPError, RequestException

from .exceptions import DecodeError, NetworkError, NoMatchError
from .serializers import CountrySerializer

logger = logging.getLogger(__name__)


FIELDS = (
    "name,capital,population,flag,region,subregion,timezones,latlng,capitalInfo,"
    "tld,languages,currencies,borders,landlocked,startOfWeek,continents,maps"
)
COUNTRIES_API = "https://restcountries.com/v3.1/translation/{name}?fields=" + FIELDS


class Config:
    """Read-through view of settings.COUNTRY_LOOKUP with the app defaults."""

    DEFAULTS = {
        "API_URL": COUNTRIES_API,
        "TIMEOUT": None,  # requests' own default: wait as long as the transport does
        "STORAGE_KEY": "country",
        "DEFAULT_COUNTRY": "",
    }

    def _get(self, key):
        options = getattr(settings, "COUNTRY_LOOKUP", {}) or {}
        return options.get(key, self.DEFAULTS[key])

    @property
    def api_url(self) -> str:
        return self._get("API_URL")

    @property
    def timeout(self):
        return self._get("TIMEOUT")

    @property
    def storage_key(self) -> str:
        return self._get("STORAGE_KEY")

    @property
    def default_country(self) -> str:
        return self._get("DEFAULT_COUNTRY")


config = Config()


def build_lookup_url(name):
    """Percent-encode the raw input, slashes included, and fill the endpoint template."""
    return config.api_url.format(name=quote(name, safe=""))


def parse_countries(payload):
    """
    Decode an already-parsed JSON body into a CountryRecord.
    Only the first element is looked at; ambiguous names are not disambiguated.
    """
    if not isinstance(payload, list):
        raise DecodeError("Expected a JSON array", details={"type": type(payload).__name__})
    if not payload:
        raise NoMatchError("No country matched")

    serializer = CountrySerializer(data=payload[0])
    if not serializer.is_valid():
        raise DecodeError("Unexpected country schema", details=serializer.errors)
    return serializer.save()


def lookup_country(name):
    """
    GET the translation endpoint once for `name`.
    Raises NetworkError, NoMatchError or DecodeError; never retries.
    """
    url = build_lookup_url(name)
    logger.info("Looking up country %r", name)

    try:
        resp = requests.get(url, timeout=config.timeout)
        resp.raise_for_status()
    except HTTPError as exc:
        # the API answers 404 when nothing matches the name
        if exc.response is not None and exc.response.status_code == 404:
            raise NoMatchError("No country matched", details={"status": 404}) from exc
        raise NetworkError("Countries API returned an error status", details=str(exc)) from exc
    except RequestException as exc:
        raise NetworkError("Could not reach the countries API", details=str(exc)) from exc

    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError("Response body is not JSON", details=str(exc)) from exc

    return parse_countries(payload)


def generate_summary_image(rows, title):
    """
    Render display rows into a PNG card and return the encoded bytes.
    """
    height = 120 + 30 * len(rows)
    img = Image.new("RGB", (800, height), color="white")
    draw = ImageDraw.Draw(img)

    try:
        font_title = ImageFont.truetype("arial.ttf", 28)
        font_body = ImageFont.truetype("arial.ttf", 20)
    except OSError:
        font_title = ImageFont.load_default(size=28)
        font_body = ImageFont.load_default(size=20)

    draw.text((20, 20), title, fill="black", font=font_title)

    y = 80
    for row in rows:
        draw.text((20, y), row.label, fill="gray", font=font_body)
        draw.text((240, y), row.href or row.text, fill="black", font=font_body)
        y += 30

    buffer = io.BytesIO()
    img.save(buffer, "PNG")
    return buffer.getvalue()
