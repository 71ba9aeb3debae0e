"""Event models consumed by the document assembler.

Every front end (the bundled decorator scanner or a third-party adapter)
turns its annotations into these events and feeds them, in order, to
SwaggerBuilder.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

STANDARD_VERBS = ("get", "post", "put", "patch", "delete")
CUSTOM_VERB = "customhttp"
PARAMETER_KINDS = ("body", "path", "query", "header")


class ResponseKind(int, Enum):
    """Role of a declared response. SUCCESS replaces the synthesized 200."""

    STANDARD = 0
    SUCCESS = 1


class MethodParameter(BaseModel):
    """A declared method parameter as reported by the front end."""

    name: str
    type: Any = None  # type descriptor handed to the schema resolver
    is_optional: bool = False
    markers: list[str] = []  # lower-cased annotation names attached to the parameter


class MethodInfo(BaseModel):
    """The method a verb event is attached to."""

    name: str
    is_public: bool = True
    doc: str | None = None
    return_type: Any = None
    parameters: list[MethodParameter] = []
    response_kinds: list[ResponseKind] = []  # kinds of sibling Response annotations


class RouteEvent(BaseModel):
    class_name: str
    path: str | None = None


class VerbEvent(BaseModel):
    """A verb annotation. For CustomHttp, args[0] is the verb name."""

    verb: str  # get / post / put / patch / delete / customhttp
    args: list[str | None] = []
    method: MethodInfo


class ParameterEvent(BaseModel):
    kind: str  # body / path / query / header
    name: str | None = None  # explicit name given to the marker
    parameter: MethodParameter
    description: str | None = None


class ResponseEvent(BaseModel):
    status_code: int
    description: str | None = None
    kind: ResponseKind = ResponseKind.STANDARD
    example: Any = None
    type: Any = None


class TagsEvent(BaseModel):
    tags: list[str]


class SecurityEvent(BaseModel):
    scheme: str
    scopes: Any = None  # sequence of scope strings; anything else means no scopes
    destination: str | None = None
