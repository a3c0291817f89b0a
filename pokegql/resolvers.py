import typing

from gql import field_resolver, query
from graphql import GraphQLResolveInfo

from .catalog import CatalogClient
from .models import Record, Trait


def get_catalog(info: GraphQLResolveInfo) -> CatalogClient:
    return info.context['catalog']


# Catalog errors are reported to the client, no need for a stderr traceback.
@query(print_exc=False)
async def get_pokemon(parent: typing.Any, info: GraphQLResolveInfo, name_or_id: str) -> Record:
    return await get_catalog(info).fetch_pokemon(name_or_id)


@query(print_exc=False)
async def list_pokemon(
    parent: typing.Any, info: GraphQLResolveInfo, limit: int = 10, offset: int = 0
) -> typing.List[Record]:
    # explicit nulls fall back to the defaults
    if limit is None:
        limit = 10
    if offset is None:
        offset = 0
    return await get_catalog(info).list_pokemon(limit=limit, offset=offset)


@query(print_exc=False)
async def get_pokemon_by_type(parent: typing.Any, info: GraphQLResolveInfo, type: str) -> typing.List[Record]:
    return await get_catalog(info).pokemon_by_type(type)


@field_resolver('Pokemon', 'abilities')
def resolve_abilities(record: Record, info: GraphQLResolveInfo) -> typing.Tuple[Trait, ...]:
    return record.traits
