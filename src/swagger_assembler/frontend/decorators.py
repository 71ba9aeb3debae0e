"""Decorators and parameter markers for describing controllers.

    @Route("items")
    @Tags("Items")
    class ItemsController:
        @Get("{item_id}")
        @Response(404, "Not found")
        async def get_item(self, item_id: Annotated[str, Path()]) -> Item:
            ...

Decorators only record metadata; nothing is generated until the scanner
walks the class.
"""

from typing import Any

from pydantic import BaseModel

from swagger_assembler.errors import StructuralMisuseError
from swagger_assembler.models import CUSTOM_VERB, ResponseKind

ROUTE_ATTR = "__swagger_route__"
CLASS_TAGS_ATTR = "__swagger_tags__"
ANNOTATIONS_ATTR = "__swagger_annotations__"

VERB_ORDER = -1
AUXILIARY_ORDER = 0


class Annotation(BaseModel):
    """Metadata recorded by one decorator."""

    kind: str
    args: list[Any] = []
    options: dict[str, Any] = {}
    order: int = AUXILIARY_ORDER


class ParameterMarker:
    """Marks a parameter as body/path/query/header inside ``typing.Annotated``."""

    kind = ""

    def __init__(self, name: str | None = None):
        self.name = name

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})" if self.name else f"{type(self).__name__}()"


class Body(ParameterMarker):
    kind = "body"

    def __init__(self):
        super().__init__(None)


class Path(ParameterMarker):
    kind = "path"


class Query(ParameterMarker):
    kind = "query"


class Header(ParameterMarker):
    kind = "header"


def _record(func, annotation: Annotation):
    if isinstance(func, type) or not callable(func):
        raise StructuralMisuseError(f"{annotation.kind} decorator is only valid on methods.")
    annotations = func.__dict__.setdefault(ANNOTATIONS_ATTR, [])
    # decorators apply bottom-up; keep them in source order
    annotations.insert(0, annotation)
    return func


def Route(value: str | None = None):
    def decorator(cls):
        if not isinstance(cls, type):
            raise StructuralMisuseError("Only valid on class.")
        setattr(cls, ROUTE_ATTR, Annotation(kind="route", args=[value], order=VERB_ORDER))
        return cls

    return decorator


def _verb(kind: str, *args):
    def decorator(func):
        return _record(func, Annotation(kind=kind, args=list(args), order=VERB_ORDER))

    return decorator


def Get(value: str | None = None):
    return _verb("get", value)


def Post(value: str | None = None):
    return _verb("post", value)


def Put(value: str | None = None):
    return _verb("put", value)


def Patch(value: str | None = None):
    return _verb("patch", value)


def Delete(value: str | None = None):
    return _verb("delete", value)


def CustomHttp(verb: str, value: str | None = None):
    return _verb(CUSTOM_VERB, verb, value)


def Response(
    status_code: int,
    description: str | None = None,
    response_type: ResponseKind = ResponseKind.STANDARD,
    example: Any = None,
    type: Any = None,
):
    """Declare a response. ``type`` is the payload type, if any."""

    def decorator(func):
        annotation = Annotation(
            kind="response",
            args=[status_code, description],
            options={"response_type": response_type, "example": example, "type": type},
        )
        return _record(func, annotation)

    return decorator


def Tags(*values: str):
    """Tag one method, or every operation of a class."""

    def decorator(target):
        if isinstance(target, type):
            existing = list(target.__dict__.get(CLASS_TAGS_ATTR, []))
            setattr(target, CLASS_TAGS_ATTR, list(values) + existing)
            return target
        return _record(target, Annotation(kind="tags", args=list(values)))

    return decorator


def Security(security_name: str, scopes: list[str] | None = None, destination_property: str | None = None):
    def decorator(func):
        annotation = Annotation(kind="security", args=[security_name, scopes, destination_property])
        return _record(func, annotation)

    return decorator
