"""Tests for the non-blocking blueprint audit"""

from planner.ir.blueprint import Blueprint
from planner.recovery.audit import ValidationSeverity, audit_blueprint


def make_node(id: str, label: str, type: str = "service", category: str = "Backend") -> dict:
    return {"id": id, "type": type, "label": label, "category": category}


def make_blueprint(nodes, edges=None) -> Blueprint:
    return Blueprint.model_validate({
        "projectName": "Audit",
        "workflow": {"nodes": nodes, "edges": edges or []},
    })


def test_clean_blueprint_has_no_issues(blueprint_dict):
    result = audit_blueprint(Blueprint.model_validate(blueprint_dict))

    assert result.issues == []
    assert result.stats == {"nodes": 3, "edges": 2}
    assert result.get_summary() == "Nodes: 3 | Edges: 2 | Warnings: 0, Info: 0"


def test_duplicate_node_ids_are_warnings():
    blueprint = make_blueprint([
        make_node("svc-orders", "Orders"),
        make_node("svc-orders", "Orders Again"),
        make_node("svc-users", "Users"),
    ])

    result = audit_blueprint(blueprint)

    assert [i.code for i in result.warnings] == ["DUPLICATE_NODE_ID"]
    assert result.warnings[0].node_id == "svc-orders"
    assert "appears 2 times" in result.warnings[0].message


def test_dangling_edges_are_warnings():
    blueprint = make_blueprint(
        [make_node("svc-api", "API")],
        [{"id": "e1", "source": "ghost", "target": "svc-missing", "label": "calls"}],
    )

    result = audit_blueprint(blueprint)

    assert [i.code for i in result.warnings] == ["MISSING_SOURCE_NODE", "MISSING_TARGET_NODE"]
    assert all(i.edge_id == "e1" for i in result.warnings)


def test_unknown_vocabulary_is_informational():
    blueprint = make_blueprint(
        [make_node("queue", "Jobs", type="queue", category="Infra"), make_node("svc", "Worker")],
        [{"id": "e1", "source": "svc", "target": "queue", "label": "enqueue", "type": "amqp"}],
    )

    result = audit_blueprint(blueprint)

    assert result.warnings == []
    assert {i.code for i in result.issues} == {
        "UNKNOWN_NODE_TYPE",
        "UNKNOWN_NODE_CATEGORY",
        "UNKNOWN_EDGE_TYPE",
    }
    assert all(i.severity == ValidationSeverity.INFO for i in result.issues)


def test_issue_to_dict():
    blueprint = make_blueprint([make_node("a", "A"), make_node("a", "B")])
    issue = audit_blueprint(blueprint).issues[0]

    assert issue.to_dict() == {
        "severity": "warning",
        "code": "DUPLICATE_NODE_ID",
        "message": "Duplicate node ID 'a' appears 2 times",
        "node_id": "a",
        "edge_id": None,
    }
