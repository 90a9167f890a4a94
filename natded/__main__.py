"""
CLI entry point. Run as: python -m natded [options]

    python -m natded --formula "p | q ^ r"
    python -m natded --kb modus-ponens --goal q --apply "mp 1 2"
    python -m natded --goal "p -> p" --apply "assume p" --apply impl_intro
    python -m natded --rules --kbs --goals --examples

--apply takes "<rule_id> [step ids...] [: formula]" and may be repeated.
For rules that read a formula (assume, or_intro_left, or_intro_right) the
formula may also follow the step ids directly: "or_intro_left 1 q".
"""

import argparse

from .core.errors import FormulaError
from .core.parser import parse_formula_to_markup
from .knowledge_bases import KNOWLEDGE_BASES
from .proof.natural_deduction import start_proof, extend_proof, delete_step, deletion_blocker
from .proof.rules import get_rule, NEEDS_USER_INPUT
from .truth_table import generate_truth_table, MAX_TRUTH_TABLE_VARIABLES
from .visualization import (
    print_proof, print_truth_table, print_rules,
    print_knowledge_bases, print_goals, print_examples,
)


def parse_apply(text: str):
    """'mp 1 2' -> (Rule, [1, 2], None); 'or_intro_left 1 : q' -> (Rule, [1], 'q')."""
    head, sep, tail = text.partition(":")
    words = head.split()
    if not words:
        raise ValueError(f"empty rule in --apply {text!r}")
    rule = get_rule(words[0])
    rest = words[1:]
    ids = []
    while rest and rest[0].isdigit():
        ids.append(int(rest.pop(0)))
    if sep and rest:
        raise ValueError(f"unexpected {' '.join(rest)!r} before ':' in --apply {text!r}")
    user_input = tail.strip() if sep else " ".join(rest)
    if rule.id in NEEDS_USER_INPUT and not user_input:
        raise ValueError(f"{rule.id.value} needs a formula in --apply {text!r}")
    return rule, ids, user_input or None


def main():
    parser = argparse.ArgumentParser(description="Propositional logic and Natural Deduction")
    parser.add_argument("--formula", type=str, default=None,
                        help="Show LaTeX markup and the truth table of a formula")
    parser.add_argument("--max-vars", type=int, default=MAX_TRUTH_TABLE_VARIABLES,
                        help=f"Truth-table variable limit (default {MAX_TRUTH_TABLE_VARIABLES})")
    parser.add_argument("--goal", type=str, default=None, help="Start a proof of this goal")
    parser.add_argument("--kb", choices=list(KNOWLEDGE_BASES.keys()), default=None,
                        help="Knowledge base whose premises the proof starts from")
    parser.add_argument("--apply", action="append", default=[], metavar="RULE",
                        help="Apply a rule, e.g. 'mp 1 2' or 'assume p' (repeatable)")
    parser.add_argument("--delete", type=int, action="append", default=[], metavar="STEP",
                        help="Delete a step (and everything after it) after applying rules")
    parser.add_argument("--rules",    action="store_true", help="List the rule catalog")
    parser.add_argument("--kbs",      action="store_true", help="List knowledge bases")
    parser.add_argument("--goals",    action="store_true", help="List suggested goals")
    parser.add_argument("--examples", action="store_true", help="List example formulas")
    parser.add_argument("--quiet",    action="store_true", help="Less output")
    args = parser.parse_args()

    if (args.apply or args.delete) and args.goal is None:
        parser.error("--apply and --delete need --goal")

    try:
        moves = [parse_apply(text) for text in args.apply]
    except (KeyError, ValueError) as e:
        parser.error(str(e))

    if args.rules and args.goal is None:
        print_rules()
    if args.kbs:
        print_knowledge_bases()
    if args.goals:
        print_goals()
    if args.examples:
        print_examples()

    # --- Formula: markup + truth table ---
    if args.formula is not None:
        rendered = parse_formula_to_markup(args.formula)
        if "error" in rendered:
            print(f"Error: {rendered['error']}")
        else:
            print(f"Markup: {rendered['markup']}")
            try:
                rows = generate_truth_table(args.formula, max_variables=args.max_vars)
            except FormulaError as e:
                print(f"Error: {e}")
            else:
                print_truth_table(args.formula, rows)

    if args.goal is None:
        return

    # --- Proof ---
    try:
        state = start_proof(args.goal, args.kb)
    except FormulaError as e:
        print(f"Invalid goal: {e}")
        return

    if not args.quiet:
        print(f"Proving {args.goal}" + (f" from {args.kb}" if args.kb else ""))

    for rule, ids, user_input in moves:
        new_state = extend_proof(rule, state, ids, user_input, verbose=not args.quiet)
        if new_state is None:
            print(f"Could not apply {rule.name} to steps {ids or '(none)'}. Stopping.")
            break
        state = new_state

    for step_id in args.delete:
        reason = deletion_blocker(state, step_id)
        if reason:
            print(f"Cannot delete step {step_id}: {reason}")
            continue
        state = delete_step(state, step_id)
        if not args.quiet:
            print(f"  [deleted] step {step_id} and everything after it")

    print_proof(state)
    if args.rules or not args.quiet:
        print_rules(state)


if __name__ == "__main__":
    main()
