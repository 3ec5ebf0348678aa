from rest_framework import serializers
from .models import CountryRecord, Currency


def _text(**kwargs):
    # values from the API are kept verbatim, surrounding spaces included
    return serializers.CharField(trim_whitespace=False, **kwargs)


def _strings(**kwargs):
    return serializers.ListField(child=_text(allow_blank=True), **kwargs)


def _latlng():
    return serializers.ListField(child=serializers.FloatField(), min_length=2, max_length=2)


class NameSerializer(serializers.Serializer):
    official = _text()


class CapitalInfoSerializer(serializers.Serializer):
    latlng = _latlng()


class MapsSerializer(serializers.Serializer):
    openStreetMaps = _text()


class CurrencySerializer(serializers.Serializer):
    name = _text()
    symbol = _text(allow_blank=True)


class CountrySerializer(serializers.Serializer):
    """
    One element of the REST Countries array, keys spelled the way the API sends them.
    Only decoding is supported: save() builds a CountryRecord, nothing is persisted.
    """
    name = NameSerializer()
    flag = _text(allow_blank=True)
    capital = _strings()
    capitalInfo = CapitalInfoSerializer()
    region = _text(allow_blank=True)
    subregion = _text(allow_blank=True)
    latlng = _latlng()
    population = serializers.IntegerField(min_value=0)
    timezones = _strings()
    tld = _strings()
    languages = serializers.DictField(child=_text())
    currencies = serializers.DictField(child=CurrencySerializer())
    # absent and null both mean "not reported"; [] is a real answer
    borders = _strings(required=False, allow_null=True)
    continents = _strings(required=False, allow_null=True)
    landlocked = serializers.BooleanField()
    startOfWeek = _text()
    maps = MapsSerializer()

    def create(self, validated_data):
        borders = validated_data.get("borders")
        continents = validated_data.get("continents")
        return CountryRecord(
            official_name=validated_data["name"]["official"],
            flag_emoji=validated_data["flag"],
            capitals=tuple(validated_data["capital"]),
            capital_coordinates=tuple(validated_data["capitalInfo"]["latlng"]),
            region=validated_data["region"],
            subregion=validated_data["subregion"],
            coordinates=tuple(validated_data["latlng"]),
            population=validated_data["population"],
            timezones=tuple(validated_data["timezones"]),
            top_level_domains=tuple(validated_data["tld"]),
            languages=validated_data["languages"],
            currencies={
                code: Currency(name=currency["name"], symbol=currency["symbol"])
                for code, currency in validated_data["currencies"].items()
            },
            borders=tuple(borders) if borders is not None else None,
            continents=tuple(continents) if continents is not None else None,
            landlocked=validated_data["landlocked"],
            start_of_week=validated_data["startOfWeek"],
            maps_url=validated_data["maps"]["openStreetMaps"],
        )


class CurrencyRecordSerializer(serializers.Serializer):
    name = serializers.CharField()
    symbol = serializers.CharField()


class CountryRecordSerializer(serializers.Serializer):
    """Read-only JSON view of a CountryRecord for the API endpoints."""
    official_name = serializers.CharField()
    flag_emoji = serializers.CharField()
    capitals = _strings()
    capital_coordinates = serializers.ListField(child=serializers.FloatField())
    region = serializers.CharField()
    subregion = serializers.CharField()
    coordinates = serializers.ListField(child=serializers.FloatField())
    population = serializers.IntegerField()
    timezones = _strings()
    top_level_domains = _strings()
    languages = serializers.DictField(child=serializers.CharField())
    currencies = serializers.DictField(child=CurrencyRecordSerializer())
    borders = _strings(allow_null=True)
    continents = _strings(allow_null=True)
    landlocked = serializers.BooleanField()
    start_of_week = serializers.CharField()
    maps_url = serializers.CharField()
