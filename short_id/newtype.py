""" ShortId: a typed wrapper for short ids """

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import generator


@dataclass(frozen=True, order=True)
class ShortId:
    """ A short id as a value of its own type

    Compares, hashes and sorts exactly like the string it wraps.
    Same caveat as with strings: the sort order of ordered ids only approximates the time they were made at.

    Example:
        id = ShortId.random()
        str(id)  # -> 'X7K9mP2nQwE-Tg'

    With Pydantic:
        class Message(pd.BaseModel):
            id: ShortId

        Message(id='X7K9mP2nQwE-Tg').id  # -> ShortId('X7K9mP2nQwE-Tg')
    """
    # The id itself
    value: str

    @classmethod
    def random(cls) -> ShortId:
        """ Generate a random id """
        return cls(generator.short_id())

    @classmethod
    def ordered(cls) -> ShortId:
        """ Generate an ordered id """
        return cls(generator.short_id_ordered())

    @classmethod
    def random_with_bytes(cls, n: int) -> ShortId:
        """ Generate a random id from `n` bytes """
        return cls(generator.short_id_with_bytes(n))

    @classmethod
    def ordered_with_bytes(cls, n: int) -> ShortId:
        """ Generate an ordered id from `n` bytes """
        return cls(generator.short_id_ordered_with_bytes(n))

    def __str__(self):
        return self.value

    def __len__(self):
        return len(self.value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        """ Pydantic: accept a ShortId, or a string of url-safe characters. Serialize as a string. """
        from pydantic_core import core_schema

        from_str = core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(pattern=r'^[A-Za-z0-9_-]+$'),
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                from_str,
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
