import typing


class CatalogError(Exception):
    """Base error for everything that can go wrong talking to the catalog.

    ``extensions`` is picked up by graphql-core and copied onto the
    ``GraphQLError`` reported to the client.
    """

    code = 'INTERNAL_SERVER_ERROR'

    def __init__(self, message: str, *, url: str = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url

    @property
    def extensions(self) -> typing.Dict[str, typing.Any]:
        return {'code': self.code}


class NotFoundError(CatalogError):
    """A keyed lookup (single pokemon or type) did not succeed."""

    code = 'NOT_FOUND'


class TransportError(CatalogError):
    """The upstream could not be reached."""

    code = 'UPSTREAM_UNAVAILABLE'


class MalformedResponseError(CatalogError):
    """The upstream answered with something we can't reshape."""

    code = 'UPSTREAM_MALFORMED'
