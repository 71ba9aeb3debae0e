"""Path computation and (path, verb) registration."""

import logging

from swagger_assembler.builder.state import BuilderState
from swagger_assembler.errors import DuplicateDefinitionError, StructuralMisuseError

logger = logging.getLogger(__name__)


def route_path(class_name: str, segment: str | None = None) -> str:
    """Base path of a routed class: '/' + segment, defaulting to the class name."""
    return "/" + (segment or class_name)


def join_path(base: str, fragment: str | None) -> str:
    """Append a verb-level fragment to a base path, if there is one."""
    return f"{base}/{fragment}" if fragment else base


def resolve_path(state: BuilderState, verb: str, fragment: str | None) -> tuple[str, dict]:
    """Register ``verb`` on the full path and return (path, path item).

    The raw fragment becomes the current path template that path parameters
    are checked against.
    """
    if state.current_path is None:
        raise StructuralMisuseError("HTTP verb decorators can only be used inside a Route decorated class.")

    path = join_path(state.current_path, fragment)
    state.current_path_template = fragment
    paths = state.document.setdefault("paths", {})
    path_item = paths.setdefault(path, {})
    if verb in path_item:
        raise DuplicateDefinitionError("Verb already defined for path")
    logger.debug("Registering %s %s", verb.upper(), path)
    return path, path_item
