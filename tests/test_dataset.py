import pytest

from data import Dataset, Author, Institution, Journal, TrendPoint, dataset


def test_collections_keep_insertion_order() -> None:
    assert [a.id for a in dataset.entities('author')] == ['auth_001', 'auth_002', 'auth_003']
    assert [i.id for i in dataset.entities('institution')] == ['inst_001', 'inst_002', 'inst_003']
    assert [j.id for j in dataset.entities('journal')] == ['jour_001', 'jour_002', 'jour_003']


def test_find_returns_stored_entity() -> None:
    author = dataset.find('author', 'auth_001')
    assert isinstance(author, Author)
    assert author.name == 'Dr. Sarah Chen'
    assert author.metrics['citations'] == 4823


def test_find_is_scoped_to_entity_type() -> None:
    assert dataset.find('journal', 'auth_001') is None


def test_unknown_entity_type_raises_key_error() -> None:
    with pytest.raises(KeyError):
        dataset.entities('publisher')


def test_filter_preserves_order() -> None:
    matches = dataset.filter('institution', lambda inst: inst.metrics['publications'] > 10000)
    assert [m.id for m in matches] == ['inst_001', 'inst_002']


def test_trend_series_keyed_by_entity_and_metric() -> None:
    points = dataset.trend('auth_001', 'publications')
    assert points == [
        TrendPoint(2019, 12), TrendPoint(2020, 15), TrendPoint(2021, 18),
        TrendPoint(2022, 22), TrendPoint(2023, 19),
    ]
    assert dataset.trend('auth_001', 'citations') is None
    assert dataset.tracked_metrics('auth_001') == ['publications']


def test_trend_bounds_are_inclusive() -> None:
    points = dataset.trend('inst_001', 'publications', start_year=2020, end_year=2022)
    assert [p.year for p in points] == [2020, 2021, 2022]


def test_trend_bounds_outside_range_give_empty_list() -> None:
    assert dataset.trend('jour_001', 'publications', start_year=2030) == []


def test_trend_values_are_plain_python_numbers() -> None:
    point = dataset.trend('auth_001', 'publications')[0]
    assert type(point.year) is int
    assert type(point.value) is int


def test_duplicate_trend_years_rejected() -> None:
    with pytest.raises(ValueError, match="unique, ascending"):
        Dataset([], [], [], {('x', 'publications'): [(2020, 1), (2020, 2)]})


def test_descending_trend_years_rejected() -> None:
    with pytest.raises(ValueError, match="unique, ascending"):
        Dataset([], [], [], {('x', 'publications'): [(2021, 1), (2020, 2)]})


def test_stats_counts_collections_and_series() -> None:
    assert dataset.stats() == {'author': 3, 'institution': 3, 'journal': 3, 'trend_series': 3}


def test_to_dict_shapes() -> None:
    author = Author(id='a', name='No Affiliation', metrics={'nested': {'top1': 1}})
    as_dict = author.to_dict()
    assert 'affiliation' not in as_dict
    as_dict['metrics']['nested']['top1'] = 99
    assert author.metrics['nested']['top1'] == 1

    assert Institution(id='i', name='I', country='CH').to_dict()['country'] == 'CH'
    assert Journal(id='j', name='J', publisher='P').to_dict()['publisher'] == 'P'
