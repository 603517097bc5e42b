"""Tests for the individual recovery strategies"""

import json

import pytest

from planner.recovery.strategies import (
    STRATEGIES,
    aggressive_clean,
    balance_closers,
    extract_json_boundary,
    fix_errors_within_boundary,
    repair_structure,
    strip_code_fences,
)


def test_strategy_order():
    assert [name for name, _ in STRATEGIES] == [
        "code_fences",
        "json_boundary",
        "aggressive_clean",
        "common_errors",
        "structural_repair",
    ]


@pytest.mark.parametrize("name,strategy", STRATEGIES)
def test_strategies_are_idempotent_on_well_formed_json(name, strategy, blueprint_json):
    once = strategy(blueprint_json)

    assert strategy(once) == once
    assert json.loads(once) == json.loads(blueprint_json)


# ---- Fence stripping ----

def test_fence_stripping_recovers_inner_text():
    inner = '{"projectName": "X", "workflow": {"nodes": [], "edges": []}}'
    assert strip_code_fences(f"```json\n{inner}\n```") == inner


def test_fence_stripping_is_case_insensitive_for_tag():
    inner = '{"a": 1}'
    assert strip_code_fences(f"```JSON\n{inner}\n```") == inner


def test_fence_stripping_without_language_tag():
    inner = '{"a": 1}'
    assert strip_code_fences(f"```\n{inner}\n```  ") == inner


# ---- Boundary extraction ----

def test_boundary_drops_surrounding_prose():
    text = 'Sure! Here is the plan: {"a": {"b": 1}} Hope it helps.'
    assert extract_json_boundary(text) == '{"a": {"b": 1}}'


@pytest.mark.parametrize("text", ["no braces here", "only { opening", "} reversed {"])
def test_boundary_passes_text_through_without_brace_pair(text):
    assert extract_json_boundary(text) == text


# ---- Aggressive clean ----

def test_aggressive_clean_fixes_comments_commas_and_keys():
    text = """{
        projectName: "X", // the name
        /* block
           comment */
        'count': [1, 2,],
    }"""
    cleaned = aggressive_clean(text)

    assert json.loads(cleaned) == {"projectName": "X", "count": [1, 2]}
    assert "\n" not in cleaned
    assert "  " not in cleaned


# ---- Common errors ----

def test_common_errors_within_boundary():
    text = "Here you go: {'projectName': 'Y', 'items': [{\"a\": 1} {\"b\": 2}],} thanks"
    fixed = fix_errors_within_boundary(text)

    assert json.loads(fixed) == {"projectName": "Y", "items": [{"a": 1}, {"b": 2}]}


def test_common_errors_separates_adjacent_arrays_and_strips_control_chars():
    fixed = fix_errors_within_boundary('{"grid": [[1] [2]],\x07 "ok": true}')
    assert json.loads(fixed) == {"grid": [[1], [2]], "ok": True}


# ---- Structural repair ----

def test_structural_repair_closes_truncated_document():
    truncated = (
        '{"projectName": "Z", "workflow": {"nodes": [{"id": "a", "type": "page", '
        '"label": "Home", "category": "Frontend"}], "edges": []}'
    )
    repaired = repair_structure(truncated)

    assert repaired == truncated + "}"
    assert json.loads(repaired)["projectName"] == "Z"


def test_structural_repair_appends_every_missing_brace():
    repaired = repair_structure('{"a": {"b": 1')
    assert repaired == '{"a": {"b": 1}}'
    assert json.loads(repaired) == {"a": {"b": 1}}


def test_balance_closers_counts_brackets():
    assert balance_closers("[[1") == "[[1]]"
    assert balance_closers("{}") == "{}"
    assert balance_closers("}}") == "}}"
