import pytest
from fastapi.testclient import TestClient

from data import Dataset, Author
from main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def tied_dataset(monkeypatch):
    """Swap in a dataset where two authors tie on citations and one lacks the metric."""
    authors = [
        Author(id='a1', name='Alpha Tie', metrics={'citations': 100, 'hIndex': 3}),
        Author(id='a2', name='Beta', metrics={'hIndex': 9}),
        Author(id='a3', name='Gamma Tie', metrics={'citations': 100, 'hIndex': 0}),
        Author(id='a4', name='Delta', metrics={'citations': 250, 'hIndex': 0}),
    ]
    replacement = Dataset(authors, [], [], {('a1', 'citations'): [(2020, 40), (2021, 60)]})
    monkeypatch.setattr('queries.functions.dataset', replacement)
    return replacement
