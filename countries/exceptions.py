class CountryLookupError(Exception):
    """Base class for everything that can go wrong during one lookup."""

    kind = "lookup"

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details


class NetworkError(CountryLookupError):
    """Transport failure or a non-success HTTP status."""

    kind = "network"


class DecodeError(CountryLookupError):
    """Body is not a JSON array of country objects."""

    kind = "decode"


class NoMatchError(DecodeError):
    """The API answered, but with zero matches."""

    kind = "no_match"
