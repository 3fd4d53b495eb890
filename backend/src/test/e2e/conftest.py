"""Shared fixtures for E2E tests.

These tests run feedstore as a real subprocess with an isolated feeds
directory and talk to it over HTTP.

Run with:  pytest -m e2e -v
"""

import os
import subprocess
import sys
import time

import httpx
import pytest

# ---------------------------------------------------------------------------
# Auto-skip E2E tests unless explicitly selected
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    """Skip E2E tests unless -m e2e is specified."""
    marker_expr = config.getoption("-m", default="")
    if "e2e" in marker_expr:
        return
    skip = pytest.mark.skip(reason="E2E tests require: pytest -m e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


E2E_PORT = 18092
BASE_URL = f"http://127.0.0.1:{E2E_PORT}"

# ---------------------------------------------------------------------------
# Session-scoped fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def e2e_feeds_path(tmp_path_factory):
    """Session-scoped feeds directory, created by the service on startup."""
    return tmp_path_factory.mktemp("e2e") / "feeds"


@pytest.fixture(scope="session")
def feedstore_process(e2e_feeds_path):
    """Start feedstore as a subprocess bound to localhost."""
    env = dict(
        os.environ,
        RSS_FEEDS_PATH=str(e2e_feeds_path),
        RSS_HOST="127.0.0.1",
        RSS_PORT=str(E2E_PORT),
    )
    proc = subprocess.Popen(
        [sys.executable, "-m", "feedstore"],
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    ready = False
    for _ in range(30):
        try:
            resp = httpx.get(f"{BASE_URL}/health", timeout=3.0)
            if resp.status_code == 200:
                ready = True
                break
        except (httpx.ConnectError, httpx.ReadTimeout):
            pass
        time.sleep(1)

    if not ready:
        proc.terminate()
        stdout, stderr = proc.communicate(timeout=5)
        pytest.fail(
            f"feedstore did not start within 30s.\n"
            f"stdout: {stdout.decode(errors='replace')[-2000:]}\n"
            f"stderr: {stderr.decode(errors='replace')[-2000:]}"
        )

    yield proc

    proc.terminate()
    try:
        proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        proc.kill()
        proc.wait(timeout=5)


@pytest.fixture(scope="session")
def api_client(feedstore_process):
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        yield client
