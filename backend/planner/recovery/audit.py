"""
Blueprint Audit - Reports graph problems the structural gate lets through.

Catches issues like:
- Duplicate node IDs
- Edges pointing at nodes that do not exist
- Node types, categories and edge types outside the documented vocabulary

Nothing here rejects a blueprint; the issues travel with the result as
warnings so callers can decide.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from planner.ir.blueprint import EDGE_TYPES, NODE_CATEGORIES, NODE_TYPES, Blueprint


class ValidationSeverity(Enum):
    WARNING = "warning"  # Blueprint renders but the graph is inconsistent
    INFO = "info"        # Outside the documented vocabulary


@dataclass
class ValidationIssue:
    """A single issue found in a blueprint"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    node_id: Optional[str] = None
    edge_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "node_id": self.node_id,
            "edge_id": self.edge_id,
        }


@dataclass
class AuditResult:
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def get_summary(self) -> str:
        info_count = len(self.issues) - len(self.warnings)
        return (
            f"Nodes: {self.stats.get('nodes', 0)} | Edges: {self.stats.get('edges', 0)} | "
            f"Warnings: {len(self.warnings)}, Info: {info_count}"
        )


def _check_duplicate_node_ids(blueprint: Blueprint) -> List[ValidationIssue]:
    counts = Counter(node.id for node in blueprint.workflow.nodes)
    return [
        ValidationIssue(
            severity=ValidationSeverity.WARNING,
            code="DUPLICATE_NODE_ID",
            message=f"Duplicate node ID '{node_id}' appears {count} times",
            node_id=node_id,
        )
        for node_id, count in counts.items()
        if count > 1
    ]


def _check_edge_references(blueprint: Blueprint) -> List[ValidationIssue]:
    issues = []
    node_ids = {node.id for node in blueprint.workflow.nodes}

    for edge in blueprint.workflow.edges:
        if edge.source not in node_ids:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                code="MISSING_SOURCE_NODE",
                message=f"Edge '{edge.id}' source '{edge.source}' is not a node",
                node_id=edge.source,
                edge_id=edge.id,
            ))
        if edge.target not in node_ids:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                code="MISSING_TARGET_NODE",
                message=f"Edge '{edge.id}' target '{edge.target}' is not a node",
                node_id=edge.target,
                edge_id=edge.id,
            ))
    return issues


def _check_vocabulary(blueprint: Blueprint) -> List[ValidationIssue]:
    issues = []
    for node in blueprint.workflow.nodes:
        if node.type not in NODE_TYPES:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="UNKNOWN_NODE_TYPE",
                message=f"Node '{node.id}' has unknown type '{node.type}'",
                node_id=node.id,
            ))
        if node.category not in NODE_CATEGORIES:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="UNKNOWN_NODE_CATEGORY",
                message=f"Node '{node.id}' has unknown category '{node.category}'",
                node_id=node.id,
            ))

    for edge in blueprint.workflow.edges:
        if edge.type is not None and edge.type not in EDGE_TYPES:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="UNKNOWN_EDGE_TYPE",
                message=f"Edge '{edge.id}' has unknown type '{edge.type}'",
                edge_id=edge.id,
            ))
    return issues


def audit_blueprint(blueprint: Blueprint) -> AuditResult:
    issues: List[ValidationIssue] = []
    issues.extend(_check_duplicate_node_ids(blueprint))
    issues.extend(_check_edge_references(blueprint))
    issues.extend(_check_vocabulary(blueprint))

    return AuditResult(
        issues=issues,
        stats={
            "nodes": len(blueprint.workflow.nodes),
            "edges": len(blueprint.workflow.edges),
        },
    )
