"""
Read-only data access for facilities, treatments and doctors.

Every method returns fully evaluated lists so callers can run them on the
read executor (see :mod:`facilities.services.detail`) without touching
lazy querysets afterwards.
"""
from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional

from django.apps import apps

from facilities.models import Doctor, Facility, Treatment
from facilities.services.filters import FacilityFilter
from facilities.services.query import select

SEARCH_FIELDS = ('name', 'specialty', 'description')
# Highest rated first; id keeps pages stable between equal ratings
FACILITY_ORDER = ('-rating', 'id')


class FacilityRepository:

    def list_facilities(self, flt: FacilityFilter) -> list[Facility]:
        return list(select(
            Facility,
            eq={'country': flt.country} if flt.country else None,
            lte={'estimated_cost': flt.max_cost} if flt.max_cost is not None else None,
            in_={'region': flt.regions} if flt.regions else None,
            ilike_or=(SEARCH_FIELDS, flt.treatment) if flt.treatment else None,
            order_by=FACILITY_ORDER,
            offset=flt.offset,
            limit=flt.limit,
        ))

    def get_facility_by_id(self, facility_id: int) -> Optional[Facility]:
        return select(Facility, eq={'id': facility_id}).first()

    def list_treatments_by_facility(self, facility_id: int) -> list[Treatment]:
        return list(select(Treatment, eq={'facility_id': facility_id}, order_by=('name',)))

    def list_doctors_by_facility(self, facility_id: int) -> list[Doctor]:
        return list(select(Doctor, eq={'facility_id': facility_id}, order_by=('name',)))

    def search_facilities(self, term: str, limit: int) -> list[Facility]:
        return list(select(
            Facility,
            ilike_or=(SEARCH_FIELDS, term),
            order_by=FACILITY_ORDER,
            limit=limit,
        ))


def get_repository() -> FacilityRepository:
    """Return the repository owned by the facilities app config."""
    return apps.get_app_config('facilities').repository


def get_read_executor() -> Executor:
    """Return the thread pool the facility detail reads run on."""
    return apps.get_app_config('facilities').read_executor
