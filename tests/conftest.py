import pytest
from click.testing import CliRunner

from canonpath.core.cwd import FixedWorkingDirectory


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user settings and color forcing out of the tests."""
    for name in ('CANONPATH_CWD', 'CANONPATH_FORMAT', 'CANONPATH_THEME',
                 'CANONPATH_DEBUG', 'FORCE_COLOR', 'NO_COLOR'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_cwd():
    """Working directory provider pinned to /tmp/work."""
    return FixedWorkingDirectory("/tmp/work")


@pytest.fixture
def runner():
    """Click test runner for the command line tool."""
    return CliRunner()


@pytest.fixture
def sample_path_strings():
    """Assorted inputs covering absolute, relative and degenerate paths."""
    return [
        "",
        ".",
        "./",
        "/",
        "//",
        "/..",
        "..",
        "../",
        "../../a/b",
        "a/b/c",
        "a/b/c/",
        "a/../b",
        "a/..",
        "./a/./b/.",
        "/foo/bar/boo/bim/../../fim",
        "/.././.././../////.././",
        "/usr/local/lib/",
        "...",
        "a/.../b",
        "../../foo/bar/../../../../foo/fim/bim/bar/",
    ]
