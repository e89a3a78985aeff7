"""Nox configuration file for running tests and linting.

The ``test_and_lint`` session installs the project through Poetry with every
extra, runs the unit tests under pytest with coverage, and checks ``src`` with
flake8.
"""

# Third-Party
import nox

# Define the Python versions to use for the sessions
python_versions = ["3.12"]

# Define the Nox sessions to run
nox.options.sessions = ["test_and_lint"]

# Reuse existing virtual environments to speed up the process
nox.options.reuse_existing_virtualenvs = True


@nox.session(python=python_versions, venv_backend="venv")
def test_and_lint(session):
    # Install dependencies
    session.run("python", "-m", "pip", "install", "--upgrade", "pip")
    session.install("poetry")
    session.run("poetry", "lock")
    session.run("poetry", "install", "--all-extras")

    # Run tests with coverage
    session.run(
        "poetry",
        "run",
        "pytest",
        "-s",
        "--cov-report",
        "term-missing",
        "--cov=src",
        "tests/unit",
    )

    # Run code linting with flake8
    session.run("poetry", "run", "flake8", "src")
