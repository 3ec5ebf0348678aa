from django.urls import path
from . import views


urlpatterns = [
    # GET / → lookup page
    path('', views.index, name='index'),
    # GET /rows?country=<name> → result list fragment, fetched on every keystroke
    path('rows', views.rows_fragment, name='country_rows'),

    # GET /countries/<name>/image → PNG summary card
    path('countries/<str:name>/image', views.country_image, name='country_image'),
    # GET /countries/<name> → JSON record and display rows
    path('countries/<str:name>', views.country_detail, name='country_detail'),
]
