from .applications import GraphQL
from .catalog import CatalogClient
from .errors import CatalogError, MalformedResponseError, NotFoundError, TransportError
from .models import Record, Trait
from .schema import create_schema, type_defs

__version__ = '0.1.0'

__all__ = [
    'GraphQL',
    'CatalogClient',
    'CatalogError',
    'MalformedResponseError',
    'NotFoundError',
    'TransportError',
    'Record',
    'Trait',
    'create_schema',
    'type_defs',
]
