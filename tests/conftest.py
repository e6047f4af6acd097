import pytest

from todo import logs


@pytest.fixture
def workspace(monkeypatch, tmp_path):
    """Isolated working directory per test.

    The store resolves ./todo.json against the cwd, so chdir is enough to keep
    tests away from any real todo.json.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def store_file(workspace):
    return workspace / "todo.json"


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logs.reset_logging()
