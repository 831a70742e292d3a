"""
Fixture Data - The static scholarly dataset served by the data layer.

Stands in for a real analytics backend; any replacement must keep the same
read-only shape (lookup by id, scan with predicate, ordered series by id).
"""

from typing import Dict, List, Tuple

from .models import Author, Institution, Journal


# =============================================================================
# AUTHORS
# =============================================================================

AUTHORS: List[Author] = [
    Author(
        id='auth_001',
        name='Dr. Sarah Chen',
        affiliation='MIT',
        metrics={
            'publications': 156,
            'citations': 4823,
            'hIndex': 42,
            'fieldWeightedCitationImpact': 2.34,
            'outputsInTopCitationPercentiles': {'top1': 12, 'top5': 28, 'top10': 45},
        },
    ),
    Author(
        id='auth_002',
        name='Prof. James Anderson',
        affiliation='Stanford University',
        metrics={
            'publications': 203,
            'citations': 8912,
            'hIndex': 58,
            'fieldWeightedCitationImpact': 3.12,
            'outputsInTopCitationPercentiles': {'top1': 18, 'top5': 42, 'top10': 67},
        },
    ),
    Author(
        id='auth_003',
        name='Dr. Maria Rodriguez',
        affiliation='Cambridge University',
        metrics={
            'publications': 89,
            'citations': 2134,
            'hIndex': 31,
            'fieldWeightedCitationImpact': 1.87,
            'outputsInTopCitationPercentiles': {'top1': 5, 'top5': 15, 'top10': 23},
        },
    ),
]


# =============================================================================
# INSTITUTIONS
# =============================================================================

INSTITUTIONS: List[Institution] = [
    Institution(
        id='inst_001',
        name='Massachusetts Institute of Technology',
        country='United States',
        metrics={
            'publications': 12456,
            'citations': 342891,
            'collaborationRate': 0.68,
            'fieldWeightedCitationImpact': 2.89,
            'academicCorporateCollaboration': 0.23,
        },
    ),
    Institution(
        id='inst_002',
        name='University of Oxford',
        country='United Kingdom',
        metrics={
            'publications': 15234,
            'citations': 412567,
            'collaborationRate': 0.72,
            'fieldWeightedCitationImpact': 3.12,
            'academicCorporateCollaboration': 0.18,
        },
    ),
    Institution(
        id='inst_003',
        name='ETH Zurich',
        country='Switzerland',
        metrics={
            'publications': 8923,
            'citations': 198234,
            'collaborationRate': 0.65,
            'fieldWeightedCitationImpact': 2.56,
            'academicCorporateCollaboration': 0.31,
        },
    ),
]


# =============================================================================
# JOURNALS
# =============================================================================

JOURNALS: List[Journal] = [
    Journal(
        id='jour_001',
        name='Nature',
        publisher='Springer Nature',
        metrics={'citesPerDoc': 42.3, 'sjr': 14.23, 'snip': 8.92, 'percentCited': 94.2},
    ),
    Journal(
        id='jour_002',
        name='Science',
        publisher='AAAS',
        metrics={'citesPerDoc': 38.7, 'sjr': 13.45, 'snip': 7.81, 'percentCited': 92.8},
    ),
    Journal(
        id='jour_003',
        name='Cell',
        publisher='Elsevier',
        metrics={'citesPerDoc': 35.2, 'sjr': 12.89, 'snip': 7.23, 'percentCited': 91.5},
    ),
]


# =============================================================================
# TRENDS - (entity_id, metric) -> [(year, value), ...] ascending by year
# =============================================================================
# Only publication counts are tracked so far.

TRENDS: Dict[Tuple[str, str], List[Tuple[int, float]]] = {
    ('auth_001', 'publications'): [
        (2019, 12), (2020, 15), (2021, 18), (2022, 22), (2023, 19),
    ],
    ('inst_001', 'publications'): [
        (2019, 11234), (2020, 11892), (2021, 12156), (2022, 12389), (2023, 12456),
    ],
    ('jour_001', 'publications'): [
        (2019, 892), (2020, 923), (2021, 945), (2022, 978), (2023, 1012),
    ],
}
