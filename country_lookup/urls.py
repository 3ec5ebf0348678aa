"""
URL configuration for country_lookup project.

The lookup page and its JSON/PNG endpoints all live in the countries app.
"""
from django.urls import path, include
from django.http import JsonResponse

urlpatterns = [
    path('', include('countries.urls'))
]


def custom_404(request, exception):
    return JsonResponse({"error": "Endpoint not found, try / or /countries/<name>"}, status=404)


def custom_500(request):
    return JsonResponse({"error": "Internal server error"}, status=500)


handler404 = "country_lookup.urls.custom_404"
handler500 = "country_lookup.urls.custom_500"
