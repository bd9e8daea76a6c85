from types import SimpleNamespace

from facilities.services.ranking import rank_facilities, within_budget


def row(name, cost, rating):
    return {'name': name, 'estimated_cost': cost, 'rating': rating}


def names(rows):
    return [r['name'] for r in rows]


def test_within_budget_beats_rating():
    a = row('A', 1000, 3)
    b = row('B', 800, 2)
    # 900 * 1.2 = 1080 so both fit; 700 * 1.2 = 840 only fits B
    assert names(rank_facilities([a, b], 900)) == ['A', 'B']
    assert names(rank_facilities([a, b], 700)) == ['B', 'A']


def test_over_budget_sorted_after_regardless_of_rating():
    a = row('A', 1000, 3)
    b = row('B', 800, 2)
    assert names(rank_facilities([a, b], 900, headroom=1.0)) == ['B', 'A']


def test_rating_descending_within_group():
    rows = [row('low', 100, 3.1), row('high', 100, 4.9), row('mid', 100, 4.0)]
    assert names(rank_facilities(rows, 1000)) == ['high', 'mid', 'low']


def test_ties_keep_input_order():
    rows = [row('first', 500, 4.0), row('second', 400, 4.0), row('third', 300, 4.0)]
    assert names(rank_facilities(rows, 1000)) == ['first', 'second', 'third']


def test_input_is_not_mutated():
    rows = [row('A', 5000, 5.0), row('B', 100, 1.0)]
    ranked = rank_facilities(rows, 1000)
    assert names(rows) == ['A', 'B']
    assert names(ranked) == ['B', 'A']
    assert ranked is not rows


def test_works_on_objects():
    a = SimpleNamespace(name='A', estimated_cost=2000, rating=5)
    b = SimpleNamespace(name='B', estimated_cost=100, rating=1)
    assert [f.name for f in rank_facilities([a, b], 1000)] == ['B', 'A']


def test_without_budget_only_rating_counts():
    rows = [row('A', 99999, 2.0), row('B', 1, 1.0)]
    assert names(rank_facilities(rows, None)) == ['A', 'B']


def test_within_budget_helper():
    assert within_budget(row('A', 1000, 1), 1000)
    assert not within_budget(row('A', 1001, 1), 1000)
    assert within_budget(row('A', 1200, 1), 1000, 1.2)
    assert within_budget(row('A', 1, 1), None)
