"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- Exercises: The demonstration routine for each exercise
- CLI: The click command that runs them

Entrypoints are the only place rejections are caught and logged.
"""

from restaurant_core.entrypoints.exercises import (
    EXERCISES,
    exercise2_primitive_quantity,
    exercise4_business_rule_violation,
    exercise5_identity_crisis,
    exercise6_temporal_logic,
    exercise7_currency_confusion,
    exercise8_email_validation,
)

__all__ = [
    "EXERCISES",
    "exercise2_primitive_quantity",
    "exercise4_business_rule_violation",
    "exercise5_identity_crisis",
    "exercise6_temporal_logic",
    "exercise7_currency_confusion",
    "exercise8_email_validation",
]
