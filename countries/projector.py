from typing import List, NamedTuple, Optional

from .models import CountryRecord

MISSING = "None"


class Row(NamedTuple):
    label: str
    text: str
    href: Optional[str] = None


def _coordinate(value):
    # whole degrees print as "36", not "36.0"
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _latlng(pair):
    lat, lng = pair
    return f"{_coordinate(lat)}/{_coordinate(lng)}"


def _joined(items):
    return " ".join(items)


def _optional(items):
    return MISSING if items is None else _joined(items)


def project(result) -> List[Row]:
    """
    Map a lookup outcome onto the labelled display rows.

    Anything but a CountryRecord (nothing yet, or a failed lookup) yields no rows.
    """
    if not isinstance(result, CountryRecord):
        return []

    record = result
    return [
        Row("Official name", f"{record.official_name} {record.flag_emoji}"),
        Row("Capital", record.capitals[0] if record.capitals else ""),
        Row("Region", record.region),
        Row("Subregion", record.subregion),
        Row("LatLng", _latlng(record.coordinates)),
        Row("Capital LatLng", _latlng(record.capital_coordinates)),
        Row("Timezones", _joined(record.timezones)),
        Row("TLD", _joined(record.top_level_domains)),
        Row("Population", f"{record.population:,}"),
        Row("Borders", _optional(record.borders)),
        Row("Languages", _joined(record.languages.values())),
        Row("Currencies", _joined(f"{c.name} ({c.symbol})" for c in record.currencies.values())),
        Row("Landlocked", "Yes" if record.landlocked else "No"),
        Row("Start of week", record.start_of_week.capitalize()),
        Row("Continents", _optional(record.continents)),
        Row("Maps", "OpenStreetMaps", href=record.maps_url),
    ]
