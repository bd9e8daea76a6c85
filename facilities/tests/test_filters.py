import pytest
from django.http import QueryDict

from facilities.services.filters import (
    MAX_DB_INT,
    FacilityFilter,
    build_facility_filter,
    clamp_limit,
    cost_ceiling,
    parse_int,
    parse_number,
    split_csv,
)


@pytest.mark.parametrize('raw, expected', [
    ('20', 20),
    (' 7 ', 7),
    ('-3', -3),
    ('abc', None),
    ('1.5', None),
    ('1_000', None),
    ('\u0663', None),
    ('\uff17', None),
    ('', None),
    (None, None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_parse_int_default():
    assert parse_int('nope', 20) == 20
    assert parse_int(None, 0) == 0


@pytest.mark.parametrize('raw, expected', [
    ('900', 900.0),
    ('1500.5', 1500.5),
    ('1e3', 1000.0),
    ('.5', 0.5),
    ('abc', None),
    ('1_000', None),
    ('\u0663', None),
    ('nan', None),
    ('inf', None),
    (None, None),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_split_csv_drops_empty_segments():
    assert split_csv('asia,,europe, ') == ['asia', 'europe']
    assert split_csv(',') == []
    assert split_csv(None) == []


def test_clamp_limit():
    assert clamp_limit(None) == 20
    assert clamp_limit(0) == 20
    assert clamp_limit(-5) == 20
    assert clamp_limit(50) == 50
    assert clamp_limit(1000) == 100
    assert clamp_limit(1000, 10, 30) == 30


def test_empty_params_give_defaults():
    flt = build_facility_filter({})
    assert flt == FacilityFilter()
    assert flt.limit == 20
    assert flt.offset == 0
    assert flt.range_end == 19


def test_budget_gets_headroom():
    flt = build_facility_filter({'budget': '900'})
    assert flt.budget == 900
    assert flt.max_cost == pytest.approx(1080)


def test_malformed_budget_is_no_filter():
    assert build_facility_filter({'budget': 'abc'}) == build_facility_filter({})


def test_regions_and_treatment_are_normalized():
    flt = build_facility_filter(QueryDict('region=asia,,europe&treatment=%20Dental%20'))
    assert flt.regions == ('asia', 'europe')
    assert flt.treatment == 'Dental'


def test_blank_treatment_and_country_are_dropped():
    flt = build_facility_filter({'treatment': '   ', 'country': '', 'region': ','})
    assert flt.treatment is None
    assert flt.country is None
    assert flt.regions == ()


def test_pagination_range():
    flt = build_facility_filter({'limit': '10', 'offset': '30'})
    assert (flt.offset, flt.range_end) == (30, 39)


def test_malformed_pagination_falls_back():
    flt = build_facility_filter({'limit': 'ten', 'offset': '-4'})
    assert flt.limit == 20
    assert flt.offset == 0


def test_limit_is_capped():
    assert build_facility_filter({'limit': '5000'}).limit == 100
    assert build_facility_filter({'limit': '5000'}, max_limit=50).limit == 50


def test_huge_offset_is_clamped_to_addressable_rows():
    flt = build_facility_filter({'offset': '99999999999999999999', 'limit': '10'})
    assert flt.offset == MAX_DB_INT - 10
    assert flt.range_end < MAX_DB_INT


def test_cost_ceiling():
    assert cost_ceiling(None) is None
    assert cost_ceiling(1000) == pytest.approx(1200)
    assert cost_ceiling(1e308) == MAX_DB_INT


def test_huge_budget_is_capped():
    flt = build_facility_filter({'budget': '1.7e308'})
    assert flt.budget == 1.7e308
    assert flt.max_cost == MAX_DB_INT
