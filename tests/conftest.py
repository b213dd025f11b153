import pytest

from occupation_browser.config import Settings
from occupation_browser.schemas.occupation import Occupation
from occupation_browser.services.search_service import SearchIndex


@pytest.fixture
def make_occupation():
    def _make(code="", label="", **fields):
        return Occupation(key_id=fields.pop("key_id", f"k-{code or label}"), code=code, preferred_label=label, **fields)
    return _make


@pytest.fixture
def occupations(make_occupation):
    return [
        make_occupation("2512", "Software developer",
                        description="Designs, writes and tests software.",
                        alternate_designations="programmer\nsoftware engineer",
                        occupation_type="ESCO occupation"),
        make_occupation("2511", "Systems analyst",
                        description="Analyses business systems and their requirements.",
                        occupation_type="ESCO occupation"),
        make_occupation("1330.1", "Software manager",
                        description="Manages a team delivering ICT services.",
                        occupation_type="Local occupation"),
        make_occupation("7115", "Carpenter",
                        description="Builds wooden structures.",
                        occupation_type="ESCO occupation"),
        make_occupation("", "Uncoded tester",
                        description="Tests things without a code."),
    ]


@pytest.fixture
def config():
    return Settings()


@pytest.fixture
def index(occupations, config):
    return SearchIndex(occupations, config)
