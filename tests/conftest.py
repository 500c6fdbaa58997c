# statlab - Pytest Configuration
# Shared fixtures and configuration for all tests

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


# =============================================================================
# Synthetic Data Fixtures
# =============================================================================

@pytest.fixture(scope='session')
def synthetic_generator():
    """Session-scoped synthetic data generator."""
    from tests.synthetic_data_generator import SyntheticDataGenerator
    return SyntheticDataGenerator(seed=42)


@pytest.fixture(scope='session')
def survey_rows(synthetic_generator):
    """Session-scoped survey dataset with dirty headers and cells."""
    return synthetic_generator.generate_survey_rows(n_rows=200)


@pytest.fixture(scope='session')
def linear_rows(synthetic_generator):
    """Exact linear relationship y = 2x + 5."""
    return synthetic_generator.generate_linear_rows(n_rows=50)


@pytest.fixture(scope='session')
def separated_groups(synthetic_generator):
    """Two arms with widely separated means."""
    return synthetic_generator.generate_two_group_rows(n_per_group=40, mean_a=50, mean_b=120, std=5)


# =============================================================================
# Edge Case Fixtures
# =============================================================================

@pytest.fixture
def small_rows():
    """The X = [1,2,3,4], Y = [2,4,6,8] dataset."""
    return [
        {"x": 1, "y": 2, "label": "a"},
        {"x": 2, "y": 4, "label": "b"},
        {"x": 3, "y": 6, "label": "a"},
        {"x": 4, "y": 8, "label": "b"},
    ]


@pytest.fixture
def constant_rows():
    """Numeric column without spread plus a two-level label."""
    return [{"value": 7, "group": g} for g in ["a", "b"] * 5]


@pytest.fixture
def text_only_rows():
    """Rows with no numeric content at all."""
    return [{"name": n, "city": c} for n, c in [("Ann", "Oslo"), ("Bo", "Lima"), ("Cy", "Rome")]]


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env overrides do not leak."""
    from statlab.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "edge_case: marks tests for edge case scenarios"
    )
