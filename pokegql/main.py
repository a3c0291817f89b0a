import logging

import uvicorn

from .applications import GraphQL
from .catalog import CatalogClient
from .config import Settings


def create_app(settings: Settings = None) -> GraphQL:
    settings = settings or Settings.from_environ()
    catalog = CatalogClient(settings.upstream_base_url, timeout=settings.upstream_timeout)
    return GraphQL(
        catalog=catalog,
        path=settings.graphql_path,
        playground=settings.playground,
        debug=settings.debug,
    )


def main() -> None:
    settings = Settings.from_environ(env_file='.env')
    logging.basicConfig(
        level=settings.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    app = create_app(settings)
    logging.getLogger(__name__).info(
        'Server ready at http://%s:%s%s', settings.host, settings.port, settings.graphql_path
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == '__main__':
    main()
