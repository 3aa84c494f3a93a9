# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from bocyields import repositories
from bocyields.main import app
from bocyields.models import BOCData
from bocyields.repositories import ObservationRepository


def _obs(d, y2, y3, y5, **extra):
    row = {
        "d": d,
        "BD.CDN.2YR.DQ.YLD": {"v": y2},
        "BD.CDN.3YR.DQ.YLD": {"v": y3},
        "BD.CDN.5YR.DQ.YLD": {"v": y5},
        "BD.CDN.10YR.DQ.YLD": {"v": "2.87"},
    }
    row.update(extra)
    return row


# --- A trimmed copy of the Valet "bond_yields_all" payload ---
@pytest.fixture
def sample_payload():
    return {
        "groupDetail": {
            "label": "Government of Canada benchmark bond yields",
            "description": "Selected benchmark bond yields",
            "link": "https://www.bankofcanada.ca/rates/interest-rates/canadian-bonds/",
        },
        "terms": {"url": "https://www.bankofcanada.ca/terms/"},
        "seriesDetail": {
            "BD.CDN.2YR.DQ.YLD": {
                "label": "2 year",
                "description": "Government of Canada benchmark bond yields - 2 year",
                "dimension": {"key": "d", "name": "date"},
            },
            "BD.CDN.3YR.DQ.YLD": {
                "label": "3 year",
                "description": "Government of Canada benchmark bond yields - 3 year",
                "dimension": {"key": "d", "name": "date"},
            },
            "BD.CDN.5YR.DQ.YLD": {
                "label": "5 year",
                "description": "Government of Canada benchmark bond yields - 5 year",
                "dimension": {"key": "d", "name": "date"},
            },
        },
        "observations": [
            _obs("2022-05-24", "2.57", "2.58", "2.64", **{"BD.CDN.RRB.DQ.YLD": {"v": "0.61"}}),
            _obs("2022-05-25", "2.53", "2.54", "2.60"),
            _obs("2022-05-26", "2.55", "2.55", "2.62"),
        ],
    }


@pytest.fixture
def sample_data(sample_payload):
    return BOCData.model_validate(sample_payload)


@pytest.fixture
def repo(sample_data):
    return ObservationRepository(sample_data)


# --- Replace the startup fetch so the app never touches the network ---
@pytest.fixture
def client(sample_data, monkeypatch):
    monkeypatch.setattr(repositories, "fetch_data", lambda url=None, session=None: sample_data)
    with TestClient(app) as c:
        yield c
