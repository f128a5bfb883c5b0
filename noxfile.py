import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

# psycopg2 ships a C extension; a cached wheel can belong to another interpreter.
_C_EXT_PACKAGES = ["psycopg2"]


def _install(session: nox.Session) -> None:
    """Install zencafe with its test group and every extra."""
    session.run("poetry", "install", "--with", "test", "--all-extras", external=True)
    session.run("pip", "install", "--force-reinstall", "--no-cache-dir", *_C_EXT_PACKAGES)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the whole suite."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Aggregates, value rules and the client cart; no API or handlers."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)

