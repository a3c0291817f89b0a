import pytest

from pokegql.config import Settings


def test_defaults():
    settings = Settings.from_environ({})

    assert settings == Settings()
    assert settings.port == 8080
    assert settings.graphql_path == '/graphql'
    assert settings.upstream_base_url == 'https://pokeapi.co/api/v2'
    assert settings.upstream_timeout is None


def test_environment_overrides():
    settings = Settings.from_environ(
        {
            'PORT': '9000',
            'HOST': '127.0.0.1',
            'GRAPHQL_PATH': '/',
            'UPSTREAM_BASE_URL': 'http://localhost:8000/api/v2',
            'UPSTREAM_TIMEOUT': '2.5',
            'DEBUG': 'true',
            'PLAYGROUND': '0',
            'LOG_LEVEL': 'debug',
        }
    )

    assert settings == Settings(
        host='127.0.0.1',
        port=9000,
        graphql_path='/',
        upstream_base_url='http://localhost:8000/api/v2',
        upstream_timeout=2.5,
        debug=True,
        playground=False,
        log_level='DEBUG',
    )


def test_env_file(tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('PORT=7000\n')

    assert Settings.from_environ({}, env_file=str(env_file)).port == 7000
    assert Settings.from_environ({'PORT': '7001'}, env_file=str(env_file)).port == 7001


def test_missing_env_file_is_ignored(tmp_path):
    assert Settings.from_environ({}, env_file=str(tmp_path / 'missing.env')).port == 8080


def test_invalid_port():
    with pytest.raises(ValueError):
        Settings.from_environ({'PORT': 'eighty'})
