"""Type to JSON Schema resolution.

The assembler never inspects type objects itself; it asks a resolver to turn
a type descriptor into a schema fragment and to unwrap deferred return types.
PydanticSchemaResolver is the default and covers plain Python annotations,
pydantic models, dataclasses and TypedDicts.
"""

import asyncio
import collections.abc
import concurrent.futures
import dataclasses
import inspect
import logging
from typing import Any, Protocol, get_args, get_origin, is_typeddict

from pydantic import BaseModel, TypeAdapter

logger = logging.getLogger(__name__)

REF_TEMPLATE = "#/definitions/{model}"

DEFERRED_ORIGINS = (
    collections.abc.Awaitable,
    asyncio.Future,
    asyncio.Task,
    concurrent.futures.Future,
)


class TypeSchemaResolver(Protocol):
    """What the assembler needs from a type system."""

    definitions: dict[str, dict]

    def resolve(self, type_: Any) -> dict:
        """Return the schema fragment for a type, registering named definitions."""
        ...

    def unwrap_deferred(self, type_: Any) -> tuple[bool, Any]:
        """Return (True, payload type) for a deferred container, else (False, None)."""
        ...


class PydanticSchemaResolver:
    """Resolves Python annotations through pydantic's TypeAdapter.

    Models, dataclasses and TypedDicts become entries in ``definitions`` and
    are referenced as ``#/definitions/<Name>``.
    """

    def __init__(self):
        self.definitions: dict[str, dict] = {}

    def resolve(self, type_: Any) -> dict:
        if type_ is None or type_ is type(None) or type_ is inspect.Parameter.empty:
            return {}

        if _is_named_type(type_):
            # as a list item, pydantic names the type the same way it does when nested
            schema = self._json_schema(list[type_])["items"]
            logger.debug("Resolved %s to %s", type_.__name__, schema)
            return schema
        return self._json_schema(type_)

    def _json_schema(self, type_: Any) -> dict:
        schema = TypeAdapter(type_).json_schema(ref_template=REF_TEMPLATE)
        for name, definition in schema.pop("$defs", {}).items():
            self.definitions[name] = definition
        return schema

    def unwrap_deferred(self, type_: Any) -> tuple[bool, Any]:
        origin = get_origin(type_)
        args = get_args(type_)
        if origin is collections.abc.Coroutine and len(args) == 3:
            return True, args[2]
        if origin in DEFERRED_ORIGINS and len(args) == 1:
            return True, args[0]
        return False, None


def _is_named_type(type_: Any) -> bool:
    if not inspect.isclass(type_):
        return False
    return issubclass(type_, BaseModel) or dataclasses.is_dataclass(type_) or is_typeddict(type_)
