"""
Flexible test automation with Python for this project.

To run all sessions, run the following command:
$ nox

To run a specific session, run the following command:
$ nox -s <session-name>

To run a session with additional arguments, run the following command:
$ nox -s <session-name> -- <additional-arguments>

To list all available sessions, run the following command:
$ nox -l
"""

import os
import re
from pathlib import Path

import nox
from nox.sessions import Session

# default sessions to run (sorted alphabetically)
nox.options.sessions = ["lint", "python"]

# reuse virtual environment for all sessions
nox.options.reuse_venv = "always"

# use venv as the default virtual environment backend
nox.options.default_venv_backend = "venv"

# do not download missing Python interpreter
nox.options.download_python = "never"


def install_requirements(session: Session) -> None:
    """Install the application package with development and test extras."""
    session.install("-e", ".[dev,test]")


def parse_supported_python_versions() -> list[str]:
    """Parse supported Python versions from pyproject.toml."""
    pyproject = Path("pyproject.toml").read_text()
    versions = re.findall(r'"Programming Language :: Python :: (3\.\d+)"', pyproject)

    return versions


@nox.session()
def lint(session: Session) -> None:
    """Run linters."""
    exc = None
    install_requirements(session)
    cmds = [
        "ruff check fibcompare tests noxfile.py",
        "ruff format --check --diff fibcompare tests noxfile.py",
        "mypy --install-types --non-interactive fibcompare tests noxfile.py",
    ]

    for cmd in cmds:
        try:
            session.run(*cmd.split(), *session.posargs, silent=True)
        except Exception as e:
            exc = e
    if exc:
        raise exc


@nox.session(name="ruff-fix")
def ruff_fix(session: Session) -> None:
    """Run ruff with auto-fix for linting and formatting."""
    exc = None
    install_requirements(session)
    cmds = [
        "ruff check --fix fibcompare tests noxfile.py",
        "ruff format fibcompare tests noxfile.py",
    ]

    for cmd in cmds:
        try:
            session.run(*cmd.split(), *session.posargs, silent=True)
        except Exception as e:
            exc = e
    if exc:
        raise exc


@nox.session(name="python", python=parse_supported_python_versions())
def unit_tests(session: Session) -> None:
    """Run unit tests and generate coverage report."""
    install_requirements(session)
    # disable color output in GitHub Actions
    env = {"TERM": "dumb"} if os.getenv("CI") == "true" else None
    cmd = "pytest --log-level=DEBUG tests/unit"

    if not session.posargs:
        # enable coverage when no pytest positional arguments are passed through
        cmd += " --cov=fibcompare --cov-config=pyproject.toml --cov-report=term --no-cov-on-fail"

    session.run(*cmd.split(), *session.posargs, env=env)
