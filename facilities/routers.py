"""
URL mappings for the facility directory API.

Paths mirror the ones the front-end pages call.  Trailing slashes are
deliberately omitted.  ``search`` must be registered before the
``<facility_id>`` route; the id is captured as a string so that a
malformed id reaches the view and gets a 400 instead of a 404.
"""
from django.urls import path, include

from .views import catalog, facilities, health, results

urlpatterns = [
    # Exposes /metrics
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Facilities
    path('api/facilities', facilities.list_facilities, name='facility-list'),
    path('api/facilities/search', facilities.search_facilities, name='facility-search'),
    path('api/facilities/<str:facility_id>', facilities.facility_detail, name='facility-detail'),
    # Quiz results
    path('api/results', results.quiz_results, name='quiz-results'),
    # Form options
    path('api/treatments/popular', catalog.popular_treatment_list, name='popular-treatments'),
    path('api/regions', catalog.region_list, name='regions'),
]
