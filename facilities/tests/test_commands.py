import pytest
from django.core.management import call_command

from facilities.models import Doctor, Facility, Treatment

pytestmark = pytest.mark.django_db


def test_seed_facilities_is_idempotent():
    call_command('seed_facilities')
    counts = (Facility.objects.count(), Treatment.objects.count(), Doctor.objects.count())
    assert counts[0] == 4
    call_command('seed_facilities')
    assert (Facility.objects.count(), Treatment.objects.count(), Doctor.objects.count()) == counts


def test_seeded_rows_are_listed(client):
    call_command('seed_facilities')
    response = client.get('/api/facilities', {'region': 'asia'})
    assert response.status_code == 200
    ratings = [f['rating'] for f in response.json()['facilities']]
    assert ratings == sorted(ratings, reverse=True)
    assert len(ratings) == 2
