"""Event-driven Swagger 2.0 document assembly.

SwaggerBuilder consumes annotation events in front-end order:

    route -> verb -> parameters -> responses / tags / security -> finish_class

and keeps a BuilderState for the whole run. Every check fails fast; once an
error is raised the run is over.
"""

import logging

from swagger_assembler.builder.finalizer import finalize, render
from swagger_assembler.builder.parameters import build_parameter, parameter_name
from swagger_assembler.builder.paths import resolve_path, route_path
from swagger_assembler.builder.responses import build_response
from swagger_assembler.builder.security import add_security
from swagger_assembler.builder.state import BuilderState, create_state
from swagger_assembler.builder.tags import merge_tags
from swagger_assembler.config import JSON_MEDIA_TYPE, BuilderOptions
from swagger_assembler.errors import ContractViolationError, PreconditionError, StructuralMisuseError
from swagger_assembler.models import (
    CUSTOM_VERB,
    PARAMETER_KINDS,
    STANDARD_VERBS,
    MethodInfo,
    ParameterEvent,
    ResponseEvent,
    ResponseKind,
    RouteEvent,
    SecurityEvent,
    TagsEvent,
    VerbEvent,
)
from swagger_assembler.resolver import PydanticSchemaResolver, TypeSchemaResolver

logger = logging.getLogger(__name__)

IMPLICIT_PARAMETER_DESCRIPTION = "Ok."


def resolve_verb(event: VerbEvent) -> tuple[str, str | None]:
    """Return (verb, path fragment). CustomHttp carries the verb as its first argument."""
    kind = event.verb.lower()
    if kind == CUSTOM_VERB:
        if not event.args or not event.args[0]:
            raise StructuralMisuseError("CustomHttp decorator requires a verb name.")
        verb = event.args[0].lower()
        fragment = event.args[1] if len(event.args) > 1 else None
    elif kind in STANDARD_VERBS:
        verb = kind
        fragment = event.args[0] if event.args else None
    else:
        raise StructuralMisuseError(f"Unknown HTTP verb decorator {event.verb}.")
    return verb, fragment or ""


def first_doc_line(doc: str | None) -> str | None:
    if not doc:
        return None
    for line in doc.strip().splitlines():
        if line.strip():
            return line.strip()
    return None


class VerbAssembler:
    """Builds one operation per verb event."""

    def __init__(self, state: BuilderState, resolver: TypeSchemaResolver):
        self.state = state
        self.resolver = resolver

    def assemble(self, event: VerbEvent) -> dict | None:
        method = event.method
        if not method.is_public:
            logger.debug("Skipping non-public method %s", method.name)
            return None

        verb, fragment = resolve_verb(event)
        _, path_item = resolve_path(self.state, verb, fragment)

        operation: dict = {
            "operationId": method.name,
            "produces": [JSON_MEDIA_TYPE],
            "description": first_doc_line(method.doc) or method.name,
        }
        path_item[verb] = operation
        self.state.pending_operations.append(operation)

        if ResponseKind.SUCCESS not in method.response_kinds:
            operation["responses"] = self._default_responses(method)

        parameters = operation.setdefault("parameters", [])
        for parameter in method.parameters:
            if parameter.markers:
                # claimed by a parameter marker, or carries an annotation we don't manage
                continue
            parameters.append(
                build_parameter(
                    self.state,
                    self.resolver,
                    "path",
                    parameter.name,
                    parameter.type,
                    IMPLICIT_PARAMETER_DESCRIPTION,
                    not parameter.is_optional,
                )
            )

        self.state.current_operation = operation
        return operation

    def _default_responses(self, method: MethodInfo) -> dict:
        is_deferred, payload = False, None
        if method.return_type is not None:
            is_deferred, payload = self.resolver.unwrap_deferred(method.return_type)
        if not is_deferred:
            raise ContractViolationError("Return type must be a promise")
        return build_response(self.resolver, 200, payload, "")


class SwaggerBuilder:
    """Explicit registration API over one generation run."""

    def __init__(self, options: BuilderOptions | None = None, resolver: TypeSchemaResolver | None = None):
        self.options = options or BuilderOptions()
        self.resolver = resolver or PydanticSchemaResolver()
        self.state = create_state(self.options)
        self.verbs = VerbAssembler(self.state, self.resolver)

    def declare_route(self, event: RouteEvent) -> str:
        """Start a routed class. Returns its base path."""
        self.state.current_path = route_path(event.class_name, event.path)
        self.state.current_path_template = None
        self.state.current_operation = None
        self.state.pending_operations = []
        logger.debug("Route %s -> %s", event.class_name, self.state.current_path)
        return self.state.current_path

    def begin_method(self) -> None:
        """Forget the previous method's operation before a new method's events."""
        self.state.current_operation = None

    def declare_verb(self, event: VerbEvent) -> dict | None:
        """Create the operation for a verb event; None when the method is skipped."""
        return self.verbs.assemble(event)

    def declare_parameter(self, event: ParameterEvent) -> dict:
        operation = self._current_operation("Parameter")
        kind = event.kind.lower()
        if kind not in PARAMETER_KINDS:
            raise StructuralMisuseError(f"Unknown parameter decorator {event.kind}.")
        parameter = build_parameter(
            self.state,
            self.resolver,
            kind,
            parameter_name(kind, event.name, event.parameter.name),
            event.parameter.type,
            event.description,
            not event.parameter.is_optional,
        )
        operation.setdefault("parameters", []).append(parameter)
        return parameter

    def declare_response(self, event: ResponseEvent) -> dict:
        operation = self._current_operation("Response")
        responses = operation.setdefault("responses", {})
        responses.update(build_response(self.resolver, event.status_code, event.type, event.description, event.example))
        return responses

    def declare_tags(self, event: TagsEvent) -> list[str]:
        """Method-level tags: normalize into the current operation's own tags."""
        operation = self._current_operation("Tags")
        return merge_tags(operation, event.tags)

    def declare_security(self, event: SecurityEvent) -> None:
        operation = self._current_operation("Security")
        add_security(
            operation,
            event.scheme,
            event.scopes,
            event.destination,
            default_property=self.options.default_security_property,
        )

    def finish_class(self, tags: list[str] | None = None) -> None:
        """Apply class-level tags to every operation generated for the class."""
        if tags is None:
            self.state.pending_operations = []
            return
        if not self.state.pending_operations:
            raise PreconditionError("Something went wrong - make sure you have generated using verb decorators.")
        for operation in self.state.pending_operations:
            merge_tags(operation, tags)
        logger.debug("Applied class tags %s to %d operations", tags, len(self.state.pending_operations))
        self.state.pending_operations = []

    def finalize(self) -> dict:
        """Return the sorted document with all resolved definitions."""
        document = finalize(self.state, self.resolver)
        logger.info("Generated %d paths, %d definitions", len(document["paths"]), len(document["definitions"]))
        return document

    def render(self, fmt: str = "json") -> str:
        return render(self.finalize(), fmt)

    def _current_operation(self, decorator: str) -> dict:
        if self.state.current_operation is None:
            raise StructuralMisuseError(
                f"{decorator} decorator can only be used in conjunction with a Route or HTTP verb decorator."
            )
        return self.state.current_operation
