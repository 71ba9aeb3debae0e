"""Document finalization: definition merge, key sorting and rendering."""

import copy
import json

import yaml

from swagger_assembler.builder.state import BuilderState
from swagger_assembler.resolver import TypeSchemaResolver

INDENT = 4


def sort_document(obj):
    """Recursively sort mapping keys. List order is kept."""
    if isinstance(obj, dict):
        return {key: sort_document(obj[key]) for key in sorted(obj)}
    if isinstance(obj, list):
        return [sort_document(item) for item in obj]
    return obj


def finalize(state: BuilderState, resolver: TypeSchemaResolver) -> dict:
    """Return a sorted copy of the document with the resolver's definitions."""
    document = copy.deepcopy(state.document)
    document["definitions"] = copy.deepcopy(resolver.definitions)
    return sort_document(document)


def render(document: dict, fmt: str = "json") -> str:
    """Serialize a finalized document as 4-space indented JSON or YAML."""
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=True, indent=INDENT, allow_unicode=True)
    return json.dumps(sort_document(document), indent=INDENT, ensure_ascii=False)
