import pytest

from tests.helpers import SAMPLE


@pytest.fixture
def sample_line():
    return SAMPLE
