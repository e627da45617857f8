import nox.sessions

# Nox
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = [
    'tests',
    'tests_pydantic',
]

# Versions
PYTHON_VERSIONS = ['3.9', '3.10', '3.11', '3.12']
PYDANTIC_VERSIONS = [
    # Selective: one latest version from every minor release
    '2.5.3', '2.7.4', '2.9.2', '2.10.6',
]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.sessions.Session, *, overrides: dict[str, str] = {}):
    """ Run all tests """
    session.install('.[test]')

    if overrides:
        session.install(*(f'{name}=={version}' for name, version in overrides.items()))

    # Test
    args = []
    if not overrides:
        args.append('--cov=short_id')

    session.run('pytest', 'tests/', *args)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize('pydantic', PYDANTIC_VERSIONS)
def tests_pydantic(session: nox.sessions.Session, pydantic):
    """ Test against a specific Pydantic version """
    tests(session, overrides={'pydantic': pydantic})
