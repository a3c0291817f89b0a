import os
import typing
from dataclasses import dataclass

from starlette.config import Config, environ

from .catalog import DEFAULT_BASE_URL


@dataclass(frozen=True)
class Settings:
    host: str = '0.0.0.0'
    port: int = 8080
    graphql_path: str = '/graphql'
    upstream_base_url: str = DEFAULT_BASE_URL
    upstream_timeout: typing.Optional[float] = None
    debug: bool = False
    playground: bool = True
    log_level: str = 'INFO'

    @classmethod
    def from_environ(cls, environ: typing.Mapping[str, str] = environ, env_file: str = None) -> 'Settings':
        if env_file and not os.path.isfile(env_file):
            env_file = None
        config = Config(env_file, environ=environ)
        return cls(
            host=config('HOST', default=cls.host),
            port=config('PORT', cast=int, default=cls.port),
            graphql_path=config('GRAPHQL_PATH', default=cls.graphql_path),
            upstream_base_url=config('UPSTREAM_BASE_URL', default=cls.upstream_base_url),
            upstream_timeout=config('UPSTREAM_TIMEOUT', cast=float, default=cls.upstream_timeout),
            debug=config('DEBUG', cast=bool, default=cls.debug),
            playground=config('PLAYGROUND', cast=bool, default=cls.playground),
            log_level=config('LOG_LEVEL', default=cls.log_level).upper(),
        )
