import logging

from asgiref.sync import async_to_sync, sync_to_async
from django.http import HttpResponse
from django.shortcuts import render
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from . import utils
from .controller import FetchController
from .exceptions import CountryLookupError, NoMatchError
from .projector import project
from .serializers import CountryRecordSerializer
from .state import CookieStore, PersistedInput

logger = logging.getLogger(__name__)


def _persisted_input(store):
    return PersistedInput(
        store,
        key=utils.config.storage_key,
        default=utils.config.default_country,
    )


def _resolve(persisted, value=None):
    """
    Apply an optional edit, then run the fetch controller until the latest
    lookup has settled. Returns the rows to display (possibly none).
    """
    async def run():
        if value is not None:
            persisted.set(value)
        controller = FetchController(sync_to_async(utils.lookup_country, thread_sensitive=False))
        unsubscribe = controller.watch(persisted)
        try:
            return await controller.settle()
        finally:
            unsubscribe()

    return project(async_to_sync(run)())


def index(request):
    """
    GET / -> the lookup page.
    ?country=<name> stores a new value first (plain form submit without script).
    """
    store = CookieStore(request.COOKIES)
    persisted = _persisted_input(store)
    rows = _resolve(persisted, request.GET.get("country"))
    response = render(request, "countries/index.html", {
        "country": persisted.value,
        "rows": rows,
        "storage_key": persisted.key,
        "cookie_max_age": store.max_age,
    })
    return store.apply(response)


def rows_fragment(request):
    """
    GET /rows?country=<name> -> only the result list, called on every keystroke.
    Failures render an empty fragment. Nothing is stored here: the page script
    has already written the cookie, and responses may come back out of order.
    """
    persisted = _persisted_input({})
    rows = _resolve(persisted, request.GET.get("country", ""))
    return render(request, "countries/_rows.html", {"rows": rows})


def _error_response(exc):
    logger.warning("Lookup failed (%s): %s", exc.kind, exc)
    if isinstance(exc, NoMatchError):
        return Response({"error": "Country not found"}, status=status.HTTP_404_NOT_FOUND)
    if exc.kind == "network":
        return Response(
            {"error": "External data source unavailable", "details": exc.details},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response(
        {"error": "Invalid response from countries API", "details": exc.details},
        status=status.HTTP_502_BAD_GATEWAY,
    )


@api_view(['GET'])
def country_detail(request, name):
    """
    GET /countries/:name -> { query, country, rows }
    404 when nothing matches, 503 when the API is unreachable, 502 on a malformed answer.
    """
    try:
        record = utils.lookup_country(name)
    except CountryLookupError as exc:
        return _error_response(exc)

    rows = [
        {"label": row.label, "text": row.text, "href": row.href}
        for row in project(record)
    ]
    return Response({
        "query": name,
        "country": CountryRecordSerializer(record).data,
        "rows": rows,
    })


@api_view(['GET'])
def country_image(request, name):
    """
    GET /countries/:name/image -> PNG card with the same rows as the page.
    Errors use the JSON bodies of /countries/:name.
    """
    try:
        record = utils.lookup_country(name)
    except CountryLookupError as exc:
        return _error_response(exc)

    png = utils.generate_summary_image(project(record), record.official_name)
    return HttpResponse(png, content_type="image/png")
