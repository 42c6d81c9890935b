"""Seed data loading, tree serialization and tree validation.

Seed data is any JSON-compatible mapping in the Employee shape.  Both the
``id``/``children`` and the ``uniqueId``/``subordinates`` key styles are
accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from orgchart.exceptions import SeedValidationError, TreeIntegrityError
from orgchart.models.employee import Employee

logger = logging.getLogger(__name__)

_CHILD_KEYS = ("children", "subordinates")
_mapping_adapter = TypeAdapter(dict[str, Any])
_children_adapter = TypeAdapter(list[dict[str, Any]])

DEFAULT_SEED: dict[str, Any] = {
    "uniqueId": 1,
    "name": "Mark Zuckerberg",
    "subordinates": [
        {
            "uniqueId": 2,
            "name": "Sarah Donald",
            "subordinates": [
                {
                    "uniqueId": 6,
                    "name": "Cassandra Reynolds",
                    "subordinates": [
                        {"uniqueId": 11, "name": "Mary Blue", "subordinates": []},
                        {
                            "uniqueId": 12,
                            "name": "Bob Saget",
                            "subordinates": [
                                {
                                    "uniqueId": 13,
                                    "name": "Tina Teff",
                                    "subordinates": [
                                        {"uniqueId": 14, "name": "Will Turner", "subordinates": []},
                                    ],
                                },
                            ],
                        },
                    ],
                },
            ],
        },
        {
            "uniqueId": 3,
            "name": "Tyler Simpson",
            "subordinates": [
                {"uniqueId": 7, "name": "Harry Tobs", "subordinates": []},
                {"uniqueId": 8, "name": "George Carrey", "subordinates": []},
                {"uniqueId": 9, "name": "Gary Styles", "subordinates": []},
            ],
        },
        {"uniqueId": 4, "name": "Bruce Willis", "subordinates": []},
        {
            "uniqueId": 5,
            "name": "Georgina Flangy",
            "subordinates": [
                {"uniqueId": 10, "name": "Sophie Turner", "subordinates": []},
            ],
        },
    ],
}


def validate_tree(root: Employee) -> int:
    """Check that every node is reachable once and every id is unique.

    Detects duplicate ids, node objects shared between two parents, and
    cycles, without recursing.

    Returns:
        The number of employees in the tree.

    Raises:
        TreeIntegrityError: If the invariant is broken.
    """
    visited_nodes: set[int] = set()
    seen_ids: set[int] = set()
    stack: list[Employee] = [root]
    while stack:
        node = stack.pop()
        if id(node) in visited_nodes:
            raise TreeIntegrityError(
                f"employee {node.id} is reachable more than once (shared node or cycle)"
            )
        visited_nodes.add(id(node))
        if node.id in seen_ids:
            raise TreeIntegrityError(f"duplicate employee id {node.id}")
        seen_ids.add(node.id)
        stack.extend(node.children)
    return len(seen_ids)


def _validate_node(raw: Any) -> tuple[Employee, list[dict[str, Any]]]:
    """Validate one seed node, leaving its children as raw mappings."""
    node = _mapping_adapter.validate_python(raw)
    fields = {key: value for key, value in node.items() if key not in _CHILD_KEYS}
    raw_children = next((node[key] for key in _CHILD_KEYS if key in node), [])
    return Employee.model_validate(fields), _children_adapter.validate_python(raw_children)


def _build_tree(data: Any) -> Employee:
    """Build an Employee tree node by node, without recursing."""
    root, raw_children = _validate_node(data)
    stack: list[tuple[Employee, list[dict[str, Any]]]] = [(root, raw_children)]
    while stack:
        parent, raw_children = stack.pop()
        for raw in raw_children:
            child, grandchildren = _validate_node(raw)
            parent.children.append(child)
            stack.append((child, grandchildren))
    return root


def _parse_json(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SeedValidationError(f"{source} is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise SeedValidationError(f"{source} is nested too deeply to parse") from exc


def load_seed(data: dict[str, Any] | str | Employee) -> Employee:
    """Build a validated Employee tree from seed data.

    Nodes are validated one at a time, so the depth of the hierarchy is
    not bounded by pydantic's nesting limit.

    Args:
        data: A mapping, a JSON string, or an already-built Employee.

    Returns:
        The root employee.

    Raises:
        SeedValidationError: If the data is malformed or breaks the
            uniqueness/acyclicity invariant.
    """
    if isinstance(data, Employee):
        root = data
    else:
        if isinstance(data, str):
            data = _parse_json(data, "seed string")
        try:
            root = _build_tree(data)
        except ValidationError as exc:
            raise SeedValidationError(str(exc)) from exc

    try:
        count = validate_tree(root)
    except TreeIntegrityError as exc:
        raise SeedValidationError(exc.reason) from exc
    logger.debug("Loaded seed rooted at %s with %d employees", root, count)
    return root


def load_seed_file(path: str | Path) -> Employee:
    """Load seed data from a JSON file.

    Raises:
        SeedValidationError: If the file is not valid JSON or not a valid tree.
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    return load_seed(_parse_json(text, str(path)))


def dump_tree(root: Employee) -> dict[str, Any]:
    """Serialize the tree under ``root`` as nested ``id``/``name``/``children``
    mappings, without recursing.
    """
    result = root.model_dump(exclude={"children"})
    result["children"] = []
    stack: list[tuple[Employee, dict[str, Any]]] = [(root, result)]
    while stack:
        node, dumped = stack.pop()
        for child in node.children:
            child_dumped = child.model_dump(exclude={"children"})
            child_dumped["children"] = []
            dumped["children"].append(child_dumped)
            stack.append((child, child_dumped))
    return result


def default_seed() -> Employee:
    """A fresh copy of the reference hierarchy."""
    return load_seed(DEFAULT_SEED)
