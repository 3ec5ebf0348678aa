from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# Not database-backed: a record lives only as long as the lookup that produced it.


@dataclass(frozen=True)
class Currency:
    name: str
    symbol: str


@dataclass(frozen=True)
class CountryRecord:
    official_name: str
    flag_emoji: str
    capitals: Tuple[str, ...]
    capital_coordinates: Tuple[float, float]
    region: str
    subregion: str
    coordinates: Tuple[float, float]
    population: int
    timezones: Tuple[str, ...]
    top_level_domains: Tuple[str, ...]
    languages: Mapping[str, str] = field(default_factory=dict)
    currencies: Mapping[str, Currency] = field(default_factory=dict)
    # None -> not reported by the API, () -> reported as having no land borders
    borders: Optional[Tuple[str, ...]] = None
    continents: Optional[Tuple[str, ...]] = None
    landlocked: bool = False
    start_of_week: str = ""
    maps_url: str = ""

    def __post_init__(self):
        # freeze the mappings so the record can be shared between renders
        object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))
        object.__setattr__(self, "currencies", MappingProxyType(dict(self.currencies)))

    def __str__(self):
        return self.official_name
