import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_debug_env(monkeypatch):
    """Keep ARGKIT_DEBUG from leaking in from the developer's shell."""
    monkeypatch.delenv("ARGKIT_DEBUG", raising=False)


@pytest.fixture
def debug_enabled(monkeypatch):
    """Fixture that turns on debug output for the duration of a test."""
    monkeypatch.setenv("ARGKIT_DEBUG", "1")


@pytest.fixture
def sample_arguments():
    """
    Fixture providing an ArgumentSet with a mix of value shapes.

    Usage:
        def test_lookup(sample_arguments):
            assert sample_arguments.get_value("0") == "command"
    """
    from argkit.argument_set import ArgumentSet

    return ArgumentSet(
        {
            "0": "command",
            "1": "42",
            "Name": "Tacitus Kilgore",
            "count": "7",
            "ratio": "2.5",
            "price": "19.99",
            "verbose": "",
            "blank": "   ",
            "word": "fast",
        }
    )


@pytest.fixture
def run_app(capsys):
    """
    Fixture that runs the Application and captures its output.

    Usage:
        def test_cli(run_app):
            code, out, err = run_app(["--", "command"])
    """
    from argkit.application import Application

    def _run(args):
        code = Application().run(args)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
