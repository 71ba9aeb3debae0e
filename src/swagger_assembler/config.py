"""Builder options and base document loading."""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel

DEFAULT_BASE_PATH = "/v1"
DEFAULT_HOST = "localhost:8080"
DEFAULT_TITLE = "Default API"
DEFAULT_VERSION = "0.0.1"
DEFAULT_DESCRIPTION = "Default API description."
DEFAULT_SECURITY_PROPERTY = "security"
JSON_MEDIA_TYPE = "application/json"


class BuilderOptions(BaseModel):
    """Settings for one generation run."""

    base_document: Path | None = None
    base_path: str = DEFAULT_BASE_PATH
    host: str = DEFAULT_HOST
    title: str = DEFAULT_TITLE
    version: str = DEFAULT_VERSION
    description: str = DEFAULT_DESCRIPTION
    default_security_property: str = DEFAULT_SECURITY_PROPERTY


def default_document(options: BuilderOptions) -> dict:
    """Return the skeleton document every run starts from."""
    return {
        "basePath": options.base_path,
        "consumes": [JSON_MEDIA_TYPE],
        "info": {
            "title": options.title,
            "version": options.version,
            "description": options.description,
        },
        "swagger": "2.0",
        "host": options.host,
        "paths": {},
    }


def load_base_document(file_path: Path) -> dict:
    """Load a JSON or YAML base document.

    Raises ValueError if the file can't be parsed or does not hold a mapping.
    """
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        # JSON that isn't valid YAML, e.g. tab indented
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Base document {file_path} is neither valid YAML nor JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Base document {file_path} must contain an object at top level.")
    return data
