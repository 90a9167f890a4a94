from .rules import Rule, ApplicableRule, RULES, get_rule, list_rules
from .natural_deduction import (
    start_proof, check_applicability, applicable_rules,
    apply_rule, extend_proof, validate_proof,
    deletion_blocker, delete_step,
)
