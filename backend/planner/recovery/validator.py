"""
Structural validation of parsed model output.

Shallow on purpose: only presence and container shape of the fields a
blueprint cannot work without are checked. Content of ``detailedContext``,
``techStack`` and ``features``, node-id uniqueness and edge references are
left alone here (see ``planner.recovery.audit`` for the non-blocking report).
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from planner.ir.blueprint import Blueprint
from planner.utils.logger import logger

REQUIRED_NODE_FIELDS = ("id", "type", "label", "category")


def default_detailed_context() -> Dict[str, Any]:
    """Fresh, empty-shaped detailedContext."""
    return {
        "projectOverview": "",
        "architectureExplanation": "",
        "nodeDetails": {},
        "edgeDetails": {},
        "fileStructure": {},
        "databaseSchema": {},
        "apiSpecification": {},
        "componentSpecification": {},
        "integrations": [],
        "authentication": {},
        "deployment": {},
    }


def copy_json(value: Any) -> Any:
    """
    Deep copy of parsed JSON data (mappings, lists, scalars).

    Iterative, so nesting depth is bounded only by what the parser accepted.
    """
    if not isinstance(value, (Mapping, list)):
        return value

    root: Any = {} if isinstance(value, Mapping) else [None] * len(value)
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        items = source.items() if isinstance(source, Mapping) else enumerate(source)
        for key, item in items:
            if isinstance(item, Mapping):
                child: Any = {}
                stack.append((item, child))
            elif isinstance(item, list):
                child = [None] * len(item)
                stack.append((item, child))
            else:
                child = item
            target[key] = child

    return root


def find_structural_problem(value: Any) -> Optional[str]:
    """Return why ``value`` is not a blueprint, or None when it is."""
    if not isinstance(value, Mapping):
        return "Not an object"

    if not value.get("projectName"):
        return "Missing projectName"

    workflow = value.get("workflow")
    if not isinstance(workflow, Mapping):
        return "Missing or invalid workflow"

    nodes = workflow.get("nodes")
    if not isinstance(nodes, list):
        return "Missing or invalid workflow.nodes"

    if not nodes:
        return "Empty workflow.nodes array"

    if not isinstance(workflow.get("edges"), list):
        return "Missing or invalid workflow.edges"

    for index, node in enumerate(nodes):
        if not isinstance(node, Mapping):
            return f"Invalid node at index {index}: not an object"
        missing = [f for f in REQUIRED_NODE_FIELDS if not node.get(f)]
        if missing:
            return f"Invalid node at index {index}: missing {', '.join(missing)}"

    return None


def validate_blueprint(value: Any) -> bool:
    return find_structural_problem(value) is None


def normalize_blueprint(value: Any) -> Optional[Dict[str, Any]]:
    """
    Validate and return a normalized deep copy, or None when invalid.

    The input is never modified. A missing or non-object detailedContext
    is replaced by ``default_detailed_context()`` in the copy.
    """
    problem = find_structural_problem(value)
    if problem:
        logger.debug(f"[Validator] {problem}")
        return None

    normalized = copy_json(value)

    if not isinstance(normalized.get("detailedContext"), Mapping):
        logger.debug("[Validator] Missing or invalid detailedContext, using defaults")
        normalized["detailedContext"] = default_detailed_context()

    return normalized


def to_blueprint(value: Any) -> Optional[Blueprint]:
    """Structural gate plus typed conversion; None on either failure."""
    normalized = normalize_blueprint(value)
    if normalized is None:
        return None

    try:
        return Blueprint.model_validate(normalized)
    except ValidationError as e:
        logger.debug(f"[Validator] Typed conversion failed: {e.error_count()} errors")
        return None
