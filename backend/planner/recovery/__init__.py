"""
Recovery of structured blueprints from unreliable model output.
"""

from planner.recovery.strategies import (
    STRATEGIES,
    aggressive_clean,
    extract_json_boundary,
    fix_errors_within_boundary,
    repair_structure,
    strip_code_fences,
)

from planner.recovery.validator import (
    default_detailed_context,
    find_structural_problem,
    normalize_blueprint,
    to_blueprint,
    validate_blueprint,
)

from planner.recovery.pipeline import (
    RecoveredBlueprint,
    RecoveryPipeline,
    extract_blueprint,
)

from planner.recovery.audit import (
    AuditResult,
    ValidationIssue,
    ValidationSeverity,
    audit_blueprint,
)

__all__ = [
    "STRATEGIES",
    "aggressive_clean",
    "extract_json_boundary",
    "fix_errors_within_boundary",
    "repair_structure",
    "strip_code_fences",
    "default_detailed_context",
    "find_structural_problem",
    "normalize_blueprint",
    "to_blueprint",
    "validate_blueprint",
    "RecoveredBlueprint",
    "RecoveryPipeline",
    "extract_blueprint",
    "AuditResult",
    "ValidationIssue",
    "ValidationSeverity",
    "audit_blueprint",
]
