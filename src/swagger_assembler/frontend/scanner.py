"""Walks decorated controller classes and feeds their events to a SwaggerBuilder.

Ordering per class: the Route event first, then each method in definition
order (verbs, then parameter markers, then responses, tags and security),
then the class-level tags.
"""

import importlib
import inspect
import logging
import re
import types
from collections.abc import Awaitable
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from swagger_assembler.builder.assembler import SwaggerBuilder
from swagger_assembler.config import BuilderOptions
from swagger_assembler.errors import StructuralMisuseError
from swagger_assembler.frontend.decorators import (
    ANNOTATIONS_ATTR,
    CLASS_TAGS_ATTR,
    ROUTE_ATTR,
    VERB_ORDER,
    Annotation,
    ParameterMarker,
)
from swagger_assembler.models import (
    MethodInfo,
    MethodParameter,
    ParameterEvent,
    ResponseEvent,
    ResponseKind,
    RouteEvent,
    SecurityEvent,
    TagsEvent,
    VerbEvent,
)
from swagger_assembler.resolver import TypeSchemaResolver

logger = logging.getLogger(__name__)

PARAM_DOC_RE = re.compile(r"^\s*:param\s+(?:[^:]+\s+)?(\w+):\s*(.*)$")
SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def generate(
    *controllers: type,
    options: BuilderOptions | None = None,
    resolver: TypeSchemaResolver | None = None,
) -> dict:
    """Build the finalized document for the given controller classes."""
    builder = SwaggerBuilder(options=options, resolver=resolver)
    for controller in controllers:
        scan_controller(builder, controller)
    return builder.finalize()


def is_controller(obj: Any) -> bool:
    return inspect.isclass(obj) and ROUTE_ATTR in vars(obj)


def find_controllers(module: types.ModuleType) -> list[type]:
    """Routed classes defined in a module, in definition order."""
    return [
        obj for obj in vars(module).values()
        if is_controller(obj) and obj.__module__ == module.__name__
    ]


def load_target(target: str) -> list[type]:
    """Resolve 'package.module' or 'package.module:ClassName' to controller classes."""
    module_name, _, class_name = target.partition(":")
    module = importlib.import_module(module_name)
    if not class_name:
        controllers = find_controllers(module)
        if not controllers:
            raise StructuralMisuseError(f"No Route decorated classes found in {module_name}.")
        return controllers
    cls = getattr(module, class_name, None)
    if cls is None:
        raise StructuralMisuseError(f"{module_name} has no attribute {class_name}.")
    return [cls]


def scan_controller(builder: SwaggerBuilder, cls: type) -> None:
    """Emit every event of one controller class."""
    if not inspect.isclass(cls):
        raise StructuralMisuseError("Only valid on class.")
    route: Annotation | None = vars(cls).get(ROUTE_ATTR)
    if route is None:
        raise StructuralMisuseError(f"{cls.__name__} is not decorated with Route.")

    builder.declare_route(RouteEvent(class_name=cls.__name__, path=route.args[0]))
    for member in vars(cls).values():
        func = member.__func__ if isinstance(member, (staticmethod, classmethod)) else member
        annotations = getattr(member, ANNOTATIONS_ATTR, None) or getattr(func, ANNOTATIONS_ATTR, None)
        if annotations:
            scan_method(builder, func, annotations)
    builder.finish_class(vars(cls).get(CLASS_TAGS_ATTR))


def scan_method(builder: SwaggerBuilder, func, annotations: list[Annotation]) -> None:
    builder.begin_method()
    ordered = sorted(annotations, key=lambda a: a.order)
    verbs = [a for a in ordered if a.order == VERB_ORDER]
    auxiliary = [a for a in ordered if a.order != VERB_ORDER]
    hints = get_type_hints(func, include_extras=True)
    info = method_info(func, hints, annotations)

    created = [builder.declare_verb(VerbEvent(verb=a.kind, args=a.args, method=info)) for a in verbs]
    if verbs and not any(created):
        return

    descriptions = parameter_descriptions(info.doc)
    for parameter, marker in marked_parameters(func, hints):
        builder.declare_parameter(
            ParameterEvent(
                kind=marker.kind,
                name=marker.name,
                parameter=parameter,
                description=descriptions.get(parameter.name),
            )
        )

    for annotation in auxiliary:
        if annotation.kind == "response":
            status_code, description = annotation.args
            builder.declare_response(
                ResponseEvent(
                    status_code=status_code,
                    description=description,
                    kind=annotation.options.get("response_type", ResponseKind.STANDARD),
                    example=annotation.options.get("example"),
                    type=annotation.options.get("type"),
                )
            )
        elif annotation.kind == "tags":
            builder.declare_tags(TagsEvent(tags=annotation.args))
        elif annotation.kind == "security":
            scheme, scopes, destination = annotation.args
            builder.declare_security(SecurityEvent(scheme=scheme, scopes=scopes, destination=destination))


def method_info(func, hints: dict, annotations: list[Annotation]) -> MethodInfo:
    name = func.__name__
    return MethodInfo(
        name=name,
        is_public=not name.startswith("_"),
        doc=inspect.getdoc(func),
        return_type=_return_type(func, hints),
        parameters=[parameter for parameter, _ in _parameters(func, hints)],
        response_kinds=[
            a.options.get("response_type", ResponseKind.STANDARD) for a in annotations if a.kind == "response"
        ],
    )


def marked_parameters(func, hints: dict) -> list[tuple[MethodParameter, ParameterMarker]]:
    result = []
    for parameter, metadata in _parameters(func, hints):
        for item in metadata:
            if isinstance(item, ParameterMarker):
                result.append((parameter, item))
    return result


def parameter_descriptions(doc: str | None) -> dict[str, str]:
    """Collect ':param name: text' lines from a docstring."""
    descriptions = {}
    for line in (doc or "").splitlines():
        match = PARAM_DOC_RE.match(line)
        if match:
            descriptions[match.group(1)] = match.group(2).strip()
    return descriptions


def _return_type(func, hints: dict):
    returned = hints.get("return")
    if inspect.iscoroutinefunction(func):
        return Awaitable[returned if "return" in hints else Any]
    return returned if "return" in hints else None


def _parameters(func, hints: dict) -> list[tuple[MethodParameter, tuple]]:
    result = []
    signature = inspect.signature(func)
    for index, param in enumerate(signature.parameters.values()):
        if param.kind in SKIPPED_KINDS or (index == 0 and param.name in ("self", "cls")):
            continue
        annotation = hints.get(param.name, Any)
        metadata: tuple = ()
        if get_origin(annotation) is Annotated:
            annotation, *extra = get_args(annotation)
            metadata = tuple(extra)
        annotation, nullable = _strip_none(annotation)
        result.append(
            (
                MethodParameter(
                    name=param.name,
                    type=annotation,
                    is_optional=nullable or param.default is not inspect.Parameter.empty,
                    markers=[_marker_name(item) for item in metadata],
                ),
                metadata,
            )
        )
    return result


def _strip_none(annotation) -> tuple[Any, bool]:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) < len(get_args(annotation)):
            if len(args) == 1:
                return args[0], True
            return Union[tuple(args)], True
    return annotation, False


def _marker_name(item) -> str:
    if isinstance(item, ParameterMarker):
        return item.kind
    return type(item).__name__.lower()
