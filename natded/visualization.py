"""
Visualization and reporting utilities.
"""

from typing import Optional

from .core.state import ProofState
from .knowledge_bases import list_knowledge_bases, list_suggested_goals
from .proof.natural_deduction import applicable_rules
from .proof.rules import list_rules
from .examples import EXAMPLES
from .truth_table import classify


def print_proof(state: ProofState):
    """Print the proof as numbered lines, indented by assumption depth."""
    print(f"\n{'='*60}")
    print(f"Goal: {state.goal}")
    if state.premises:
        print(f"Premises: {', '.join(state.premises)}")
    print(f"{'='*60}")
    if not state.steps:
        print("  (no steps)")
    for step in state.steps:
        bar = "| " * step.depth
        print(f"  {step.id:>3}. {bar}{step.formula:<30} {step.justification}")
    print(f"{'='*60}")
    if state.is_complete:
        print("  QED: goal reached with no open assumptions.")
    else:
        print(f"  Open assumption depth: {state.current_depth}. Proof not complete.")


def print_truth_table(formula: str, rows: list):
    """Print a truth table with T/F cells and its classification."""
    variables = list(rows[0].assignment) if rows else []
    header = " ".join(variables)
    print(f"\n{header} | {formula}" if header else f"\n{formula}")
    print("-" * (len(header) + len(formula) + 3))
    for row in rows:
        cells = " ".join(
            ("T" if row.assignment[v] else "F").ljust(len(v)) for v in variables
        )
        result = "T" if row.result else "F"
        print(f"{cells} | {result}" if cells else result)
    print(f"({classify(rows)}, {len(rows)} rows)")


def print_rules(state: Optional[ProofState] = None):
    """Print the rule catalog, marked with whether each can be tried in `state`."""
    print("\nRules:")
    if state is None:
        for rule in list_rules():
            print(f"  {rule.id.value:<15} {rule.name}: {rule.description}")
        return
    for entry in applicable_rules(state):
        mark = "+" if entry.applicable else "-"
        reason = f"  [{entry.reason}]" if entry.reason else ""
        print(f"  {mark} {entry.id.value:<15} {entry.name}: {entry.description}{reason}")


def print_knowledge_bases():
    print("\nKnowledge bases:")
    for kb in list_knowledge_bases():
        premises = ", ".join(kb.premises) if kb.premises else "none"
        print(f"  {kb.id:<14} {kb.name} -- premises: {premises}")


def print_goals():
    print("\nSuggested goals:")
    for goal in list_suggested_goals():
        print(f"  {goal.label:<45} {goal.formula:<10} {goal.description}")


def print_examples():
    print("\nExamples:")
    for example in EXAMPLES:
        print(f"  {example.label:<22} {example.formula:<35} {example.description}")
