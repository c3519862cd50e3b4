import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

# bcrypt and psycopg2 ship compiled wheels; a cached wheel can target the wrong interpreter.
_C_EXT_PACKAGES = ["psycopg2-binary", "bcrypt"]


def _install(session: nox.Session) -> None:
    """Install the project with its test extra into the nox virtualenv."""
    session.run("poetry", "install", "--all-extras", external=True)
    session.run(
        "pip",
        "install",
        "--force-reinstall",
        "--no-cache-dir",
        *_C_EXT_PACKAGES,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full suite against the in-memory adapters."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain and command-handler tests only (no HTTP layer)."""
    _install(session)
    session.run("pytest", "tests/domain/", "tests/application/", "tests/bdd/")


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_postgres(session: nox.Session) -> None:
    """Run the full suite against PostgreSQL via the `production` overlay in domain.toml."""
    _install(session)
    session.run("pytest", "--env", "production", *session.posargs)
