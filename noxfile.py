"""Nox file."""

import nox


@nox.session()
def tests(session: nox.Session) -> None:
    """Install the package and run the test suite."""
    session.install(".[test]")
    session.run("pytest", *session.posargs)


@nox.session()
def tests_cpu(session: nox.Session) -> None:
    """Run the test suite on CPU only."""
    session.install(".[test]")
    session.run("pytest", "--cpu", *session.posargs)
