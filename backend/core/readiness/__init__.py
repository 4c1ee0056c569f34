"""
Course readiness engine.

Structural validation of course records plus the launch-readiness rules
layered on top of it.
"""

from backend.core.readiness.readiness_evaluator import (
    ReadinessReport,
    compute_missing_fields,
    evaluate_readiness,
    is_ready_for_launch,
)
from backend.core.readiness.structural_validator import (
    FieldError,
    StructuralValidationResult,
    missing_field_labels,
    unknown_fields,
    validate_structure,
)

__all__ = [
    "FieldError",
    "ReadinessReport",
    "StructuralValidationResult",
    "compute_missing_fields",
    "evaluate_readiness",
    "is_ready_for_launch",
    "missing_field_labels",
    "unknown_fields",
    "validate_structure",
]
