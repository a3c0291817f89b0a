from gql import gql, make_schema
from graphql import GraphQLSchema

from . import resolvers  # noqa: F401 (registers the Query and Pokemon resolvers)

type_defs = gql(
    """
  type Pokemon {
    id: Int
    name: String
    height: Int
    weight: Int
    abilities: [Ability]
  }

  type Ability {
    name: String
  }

  type Query {
    getPokemon(nameOrId: String!): Pokemon
    listPokemon(limit: Int = 10, offset: Int = 0): [Pokemon]
    getPokemonByType(type: String!): [Pokemon]
  }
"""
)


def create_schema() -> GraphQLSchema:
    return make_schema(type_defs)
