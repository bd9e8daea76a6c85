"""
Fetch everything a facility page shows.

The facility row, its treatments and its doctors are three independent
reads.  They run together on the read executor and are joined, up to a
timeout, before the caller decides what to answer.  Only the facility
read is essential: a failed or late treatments or doctors read degrades
to an empty list.
"""
from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, wait
from dataclasses import dataclass, field
from typing import Callable, Optional

from django.db import close_old_connections

from facilities.exceptions import FacilityNotFound, RepositoryFailure
from facilities.services.repository import FacilityRepository

logger = logging.getLogger(__name__)


@dataclass
class FacilityDetail:
    facility: object
    treatments: list = field(default_factory=list)
    doctors: list = field(default_factory=list)


def _read(func: Callable, facility_id: int):
    # Runs on a pool thread, which owns its own DB connection
    try:
        return func(facility_id)
    finally:
        close_old_connections()


def _optional_rows(future: Future, what: str, facility_id: int) -> list:
    if not future.done():
        future.cancel()
        logger.warning("Timed out fetching %s for facility %s", what, facility_id)
        return []
    exc = future.exception()
    if exc is not None:
        logger.warning("Error fetching %s for facility %s: %r", what, facility_id, exc)
        return []
    return future.result() or []


def fetch_facility_detail(repository: FacilityRepository, facility_id: int, *,
                          executor: Executor, timeout: Optional[float] = None) -> FacilityDetail:
    """Run the three reads on ``executor`` and wait at most ``timeout`` seconds."""
    facility_f = executor.submit(_read, repository.get_facility_by_id, facility_id)
    treatments_f = executor.submit(_read, repository.list_treatments_by_facility, facility_id)
    doctors_f = executor.submit(_read, repository.list_doctors_by_facility, facility_id)

    wait([facility_f, treatments_f, doctors_f], timeout=timeout)

    if not facility_f.done():
        for f in (facility_f, treatments_f, doctors_f):
            f.cancel()
        logger.error("Timed out after %ss fetching facility %s", timeout, facility_id)
        raise RepositoryFailure('Failed to fetch facility')

    exc = facility_f.exception()
    if exc is not None:
        logger.error("Error fetching facility %s: %r", facility_id, exc)
        raise RepositoryFailure('Failed to fetch facility') from exc
    facility = facility_f.result()
    if facility is None:
        raise FacilityNotFound('Facility not found')

    return FacilityDetail(
        facility=facility,
        treatments=_optional_rows(treatments_f, 'treatments', facility_id),
        doctors=_optional_rows(doctors_f, 'doctors', facility_id),
    )
