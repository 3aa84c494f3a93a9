import threading
import time

import pytest
from fastapi.testclient import TestClient

from bocyields import main, repositories
from bocyields.fetcher import FetchError
from bocyields.main import app


def _wait_for_health(c, done, timeout=5.0):
    """Poll /healthz until `done(health)` is true."""
    deadline = time.monotonic() + timeout
    while True:
        h = c.get("/healthz").json()
        if done(h) or time.monotonic() > deadline:
            return h
        time.sleep(0.05)


@pytest.fixture
def gate():
    ev = threading.Event()
    yield ev
    ev.set()  # never leave a loader thread waiting


def test_background_load_serves_503_until_ready(monkeypatch, sample_data, gate):
    def slow_fetch(url=None, session=None):
        gate.wait(5)
        return sample_data
    monkeypatch.setattr(main, "PRELOAD_BLOCKING", False)
    monkeypatch.setattr(repositories, "fetch_data", slow_fetch)

    with TestClient(app) as c:
        h = c.get("/healthz").json()
        assert h["data_ready"] is False
        assert h["data_error"] is None
        assert c.get("/observations/2022-05-24").status_code == 503

        gate.set()
        h = _wait_for_health(c, lambda h: h["data_ready"])
        assert h["data_ready"] is True
        assert h["observations"] == 3
        r = c.get("/observations/2022-05-24")
        assert r.status_code == 200
        assert r.json()["BD.CDN.2YR.DQ.YLD"]["v"] == "2.57"


def test_background_load_failure_is_reported(monkeypatch, gate):
    def failing_fetch(url=None, session=None):
        gate.wait(5)
        raise FetchError("invalid response code: 502")
    monkeypatch.setattr(main, "PRELOAD_BLOCKING", False)
    monkeypatch.setattr(repositories, "fetch_data", failing_fetch)

    with TestClient(app) as c:
        assert c.get("/observations/2022-05-24").status_code == 503
        gate.set()
        h = _wait_for_health(c, lambda h: h["data_error"] is not None)
        assert h["data_ready"] is False
        assert "502" in h["data_error"]
        r = c.get("/observations/2022-05-24")
        assert r.status_code == 503
        assert "502" in r.json()["detail"]


@pytest.mark.parametrize("blocking", [True, False])
def test_unexpected_load_error_is_reported(monkeypatch, blocking):
    def broken_fetch(url=None, session=None):
        raise RuntimeError("payload handler exploded")
    monkeypatch.setattr(main, "PRELOAD_BLOCKING", blocking)
    monkeypatch.setattr(repositories, "fetch_data", broken_fetch)

    with TestClient(app) as c:
        h = _wait_for_health(c, lambda h: h["data_error"] is not None)
        assert h["data_ready"] is False
        assert "exploded" in h["data_error"]
