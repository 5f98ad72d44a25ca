import sys
from pathlib import Path

import pytest
import pytest_asyncio
from tornado import httpserver, testing

# Ensure repository root is importable for `import campus_robot`
ROOT = Path(__file__).resolve().parent
REPO_ROOT = ROOT.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def fast_robot(monkeypatch):
    """Zero out settle and travel waits so runs finish immediately."""
    monkeypatch.setenv("ROBOT_SETTLE_MS", "0")
    monkeypatch.setenv("ROBOT_TRAVEL_SCALE", "0")
    monkeypatch.delenv("CAMPUS_LOCATIONS_PATH", raising=False)


@pytest_asyncio.fixture
async def live_app(fast_robot):
    """Start the Tornado app on an unused port; yields (base_url, service)."""
    from campus_robot import main

    app = main.make_app()
    server = httpserver.HTTPServer(app)
    sock, port = testing.bind_unused_port()
    server.add_socket(sock)
    try:
        yield f"127.0.0.1:{port}", app.settings["service"]
    finally:
        server.stop()
