from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import MalformedResponseError


@dataclass(frozen=True)
class Trait:
    name: Optional[str]


@dataclass(frozen=True)
class Record:
    id: Optional[int]
    name: Optional[str]
    height: Optional[int]
    weight: Optional[int]
    traits: Tuple[Trait, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any, url: str = None) -> 'Record':
        """Flatten a single-pokemon payload from the upstream API.

        Scalars are copied as-is, missing ones become ``None``. ``abilities``
        keeps upstream order and must be a list of ``{"ability": {...}}``.
        """
        if not isinstance(payload, Mapping):
            raise MalformedResponseError('Expected a JSON object for pokemon', url=url)

        abilities = payload.get('abilities')
        if not isinstance(abilities, list):
            raise MalformedResponseError('Pokemon payload has no abilities list', url=url)

        return cls(
            id=payload.get('id'),
            name=payload.get('name'),
            height=payload.get('height'),
            weight=payload.get('weight'),
            traits=tuple(_parse_trait(entry, url) for entry in abilities),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'height': self.height,
            'weight': self.weight,
            'traits': [{'name': trait.name} for trait in self.traits],
        }


def _parse_trait(entry: Any, url: Optional[str]) -> Trait:
    ability = entry.get('ability') if isinstance(entry, Mapping) else None
    if not isinstance(ability, Mapping):
        raise MalformedResponseError('Ability entry has no ability descriptor', url=url)
    return Trait(name=ability.get('name'))
