import threading
import time

import pytest
import uvicorn

from tests.server import app, free_port

ENV_VARS = ("WEBGET_CHUNK_SIZE", "WEBGET_TIMEOUT", "WEBGET_USER_AGENT")


@pytest.fixture(scope="session")
def base_url():
    port = free_port()
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.time() + 10
    while not server.started:
        if time.time() > deadline:
            raise RuntimeError("test server did not start")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=5)


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test in an empty directory with no WEBGET_* settings."""
    for name in ENV_VARS:
        # setenv first so monkeypatch also removes anything load_dotenv adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
