"""
Schema Validation Utilities

Validates question-bank and exam-template JSON documents before they are
turned into models.

Two levels:
- Basic checks (always): required fields, enum values, non-negative points
- Strict mode: full JSON Schema validation with ``jsonschema``
"""

from __future__ import annotations

import json
import math
from importlib.resources import files
from typing import Any, Iterable

import jsonschema

from examtex.errors import SchemaValidationError

_SCHEMAS: dict[str, dict] = {}

_STYLES = ("basic", "advanced", "custom")
_SEAL_LINES = ("left", "right", "alternate", "none")
_PAPER_SIZES = ("a4", "a3")


def _load_schema(name: str) -> dict:
    """Load a packaged schema by name."""
    if name not in _SCHEMAS:
        resource = files(__package__).joinpath(f"{name}.schema.json")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {name}.schema.json")
        _SCHEMAS[name] = json.loads(resource.read_text(encoding="utf-8"))
    return _SCHEMAS[name]


def _require(data: dict[str, Any], required: Iterable[str], path: str = "") -> None:
    missing = [f for f in required if f not in data]
    if missing:
        raise SchemaValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )


def _validate_strict(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema, cls=jsonschema.Draft202012Validator)
    except jsonschema.ValidationError as e:
        raise SchemaValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def validate_question_bank(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate question-bank data.

    Args:
        data: Question bank dictionary
        strict: If True, also validate against the JSON schema

    Raises:
        SchemaValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise SchemaValidationError("Question bank must be a JSON object")
    _require(data, ["id", "name", "questions"])

    questions = data["questions"]
    if not isinstance(questions, list):
        raise SchemaValidationError("questions must be a list", path="questions")
    for i, question in enumerate(questions):
        _validate_question(question, f"questions[{i}]")

    if strict:
        _validate_strict(data, "question_bank")


def _validate_question(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise SchemaValidationError("question must be an object", path=path)
    _require(data, ["type", "content", "points"], path)

    points = data["points"]
    try:
        value = float(points)
    except (TypeError, ValueError):
        raise SchemaValidationError(
            f"Invalid points: {points!r}",
            path=f"{path}.points",
        )
    if not math.isfinite(value):
        raise SchemaValidationError(
            f"Invalid points: {points!r} (must be finite)",
            path=f"{path}.points",
        )
    if value < 0:
        raise SchemaValidationError(
            f"Invalid points: {points} (must be non-negative)",
            path=f"{path}.points",
        )

    options = data.get("options", [])
    if not isinstance(options, list):
        raise SchemaValidationError("options must be a list", path=f"{path}.options")


def validate_exam_template(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate exam-template data.

    Args:
        data: Exam template dictionary
        strict: If True, also validate against the JSON schema

    Raises:
        SchemaValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise SchemaValidationError("Exam template must be a JSON object")
    _require(data, ["id", "name", "sections"])

    for name, allowed in (
        ("style", _STYLES),
        ("seal_line", _SEAL_LINES),
        ("paper_size", _PAPER_SIZES),
    ):
        if name in data and data[name] not in allowed:
            raise SchemaValidationError(
                f"Invalid {name}: {data[name]!r} (expected one of {list(allowed)})",
                path=name,
            )

    sections = data["sections"]
    if not isinstance(sections, list):
        raise SchemaValidationError("sections must be a list", path="sections")
    for i, section in enumerate(sections):
        if not isinstance(section, dict) or "title" not in section:
            raise SchemaValidationError(
                "section must be an object with a title",
                path=f"sections[{i}]",
            )

    if strict:
        _validate_strict(data, "exam_template")
