import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from facilities.exceptions import FacilityNotFound, RepositoryFailure
from facilities.services.detail import fetch_facility_detail


class FakeRepository:
    def __init__(self, facility=None, treatments=None, doctors=None, delay=0.0):
        self.facility = facility
        self.treatments = treatments if treatments is not None else []
        self.doctors = doctors if doctors is not None else []
        self.delay = delay
        self.calls = []

    def _result(self, kind, facility_id, value):
        self.calls.append((kind, facility_id))
        if self.delay:
            time.sleep(self.delay)
        if isinstance(value, Exception):
            raise value
        return value

    def get_facility_by_id(self, facility_id):
        return self._result('facility', facility_id, self.facility)

    def list_treatments_by_facility(self, facility_id):
        return self._result('treatments', facility_id, self.treatments)

    def list_doctors_by_facility(self, facility_id):
        return self._result('doctors', facility_id, self.doctors)


class SlowFacilityRepository(FakeRepository):
    def get_facility_by_id(self, facility_id):
        time.sleep(1.0)
        return super().get_facility_by_id(facility_id)


class SlowDoctorsRepository(FakeRepository):
    def list_doctors_by_facility(self, facility_id):
        time.sleep(1.0)
        return super().list_doctors_by_facility(facility_id)


@pytest.fixture
def executor():
    pool = ThreadPoolExecutor(max_workers=4, thread_name_prefix='test-read')
    yield pool
    pool.shutdown(wait=False)


def test_all_three_reads_are_issued(executor):
    repo = FakeRepository(facility={'id': 7}, treatments=['t'], doctors=['d'])
    detail = fetch_facility_detail(repo, 7, executor=executor)
    assert detail.facility == {'id': 7}
    assert detail.treatments == ['t']
    assert detail.doctors == ['d']
    assert sorted(kind for kind, _ in repo.calls) == ['doctors', 'facility', 'treatments']
    assert all(fid == 7 for _, fid in repo.calls)


def test_reads_run_concurrently(executor):
    repo = FakeRepository(facility={'id': 1}, delay=0.3)
    started = time.monotonic()
    fetch_facility_detail(repo, 1, executor=executor, timeout=5)
    # Three 0.3s reads one after another would take 0.9s
    assert time.monotonic() - started < 0.75


def test_missing_facility_is_not_found(executor):
    with pytest.raises(FacilityNotFound):
        fetch_facility_detail(FakeRepository(facility=None), 1, executor=executor)


def test_facility_failure_is_fatal(executor):
    repo = FakeRepository(facility=RuntimeError('connection reset'), treatments=['t'])
    with pytest.raises(RepositoryFailure) as info:
        fetch_facility_detail(repo, 1, executor=executor)
    assert 'connection reset' not in str(info.value.detail)


def test_treatment_and_doctor_failures_degrade_to_empty(executor):
    repo = FakeRepository(
        facility={'id': 1},
        treatments=RuntimeError('boom'),
        doctors=RuntimeError('boom'),
    )
    detail = fetch_facility_detail(repo, 1, executor=executor)
    assert detail.facility == {'id': 1}
    assert detail.treatments == []
    assert detail.doctors == []


def test_none_lists_become_empty(executor):
    repo = FakeRepository(facility={'id': 1})
    repo.treatments = None
    repo.doctors = None
    detail = fetch_facility_detail(repo, 1, executor=executor)
    assert detail.treatments == []
    assert detail.doctors == []


def test_slow_facility_read_fails_within_timeout(executor):
    started = time.monotonic()
    with pytest.raises(RepositoryFailure):
        fetch_facility_detail(SlowFacilityRepository(facility={'id': 1}), 1, executor=executor, timeout=0.05)
    assert time.monotonic() - started < 0.5


def test_slow_doctors_read_degrades_within_timeout(executor):
    repo = SlowDoctorsRepository(facility={'id': 1}, treatments=['t'], doctors=['d'])
    started = time.monotonic()
    detail = fetch_facility_detail(repo, 1, executor=executor, timeout=0.2)
    assert time.monotonic() - started < 0.7
    assert detail.facility == {'id': 1}
    assert detail.treatments == ['t']
    assert detail.doctors == []
