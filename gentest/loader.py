"""Flow file loading and dumping (YAML via ruamel.yaml, JSON via json)."""

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from gentest.common.exceptions import FlowDefinitionError, FlowLoadError
from gentest.constants import FILE_EXT_JSON, SUPPORTED_EXTENSIONS
from gentest.flow import Flow

logger = logging.getLogger(__name__)


def _yaml() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    return yaml


def _detect_format(path: Path) -> str:
    extension = path.suffix.lstrip(".").lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise FlowLoadError(
            f"Unsupported flow file extension '.{extension}' "
            f"(expected one of {', '.join(SUPPORTED_EXTENSIONS)})",
            file_path=str(path),
        )
    return extension


def _read_document(path: Path) -> Any:
    fmt = _detect_format(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FlowLoadError(f"Cannot read flow file: {e}", file_path=str(path)) from e

    if fmt == FILE_EXT_JSON:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise FlowLoadError(
                f"Invalid JSON: {e.msg}", file_path=str(path), line=e.lineno
            ) from e

    try:
        return _yaml().load(text)
    except MarkedYAMLError as e:
        line = e.problem_mark.line + 1 if e.problem_mark is not None else None
        raise FlowLoadError(
            f"Invalid YAML: {e.problem}", file_path=str(path), line=line
        ) from e
    except YAMLError as e:
        raise FlowLoadError(f"Invalid YAML: {e}", file_path=str(path)) from e


def _serialize(document: dict[str, Any], fmt: str, path: Path) -> str:
    try:
        if fmt == FILE_EXT_JSON:
            return json.dumps(document, indent=2) + "\n"
        stream = StringIO()
        _yaml().dump(document, stream)
        return stream.getvalue()
    except (TypeError, ValueError, YAMLError) as e:
        raise FlowLoadError(f"Cannot serialize flow: {e}", file_path=str(path)) from e


def load_flow(path: str | Path) -> Flow:
    """
    Load a flow from a YAML or JSON file.

    The document is either a list of step records or a mapping with a
    ``steps`` list and an optional ``name``::

        name: checkout
        steps:
          - name: user
            defaultValue: {id: 7}
          - name: payment
            throws: {type: ConnectionError, message: gateway down}

    Raises:
        FlowLoadError: If the file is missing, malformed or holds invalid steps
    """
    path = Path(path)
    logger.debug("Loading flow from %s", path)
    document = _read_document(path)

    name = None
    if isinstance(document, dict):
        name = document.get("name")
        if "steps" not in document:
            raise FlowLoadError("Flow mapping requires a 'steps' key", file_path=str(path))
        records = document["steps"]
    else:
        records = document

    if records is None:
        records = []
    if not isinstance(records, list):
        raise FlowLoadError(
            f"Flow steps must be a list, got {type(records).__name__}",
            file_path=str(path),
        )

    try:
        flow = Flow.from_records(records, name=name if name is not None else path.stem)
    except FlowDefinitionError as e:
        raise FlowLoadError(
            e.message, file_path=str(path), errors=e.errors, context=e.context
        ) from e

    logger.debug("Loaded flow '%s' with %d step(s)", flow.name, len(flow))
    return flow


def dump_flow(flow: Flow, path: str | Path) -> Path:
    """
    Write a flow to a YAML or JSON file, chosen by extension.

    Exceptions are written as ``{type, message}`` mappings so the file can
    be loaded back with ``load_flow``. The file is left untouched when the
    flow cannot be serialized.

    Raises:
        FlowLoadError: If the extension is unsupported or a default value
            cannot be written in the chosen format
    """
    path = Path(path)
    fmt = _detect_format(path)
    text = _serialize({"name": flow.name, "steps": flow.to_records()}, fmt, path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
