"""
Natural Deduction: rule applicability, rule application, proof checking.

A proof is a list of steps with nested assumption scopes. `assume` opens a
scope one level deeper; `impl_intro` closes the innermost scope and
concludes "assumption -> last line" one level up. Every other rule works on
the steps the caller selects and stays at the current depth.

All functions here are pure: they take a ProofState and return a new
value. A rule that cannot be applied to the given selection returns None;
nothing here raises for a bad selection.
"""

from dataclasses import replace
from typing import Optional

from ..core.errors import FormulaError
from ..core.formula import Not, And, Implies, to_display_text
from ..core.parser import parse_formula
from ..core.state import RuleId, ProofStep, ProofState, normalize_formula
from ..knowledge_bases import KNOWLEDGE_BASES
from .rules import Rule, ApplicableRule, RULES


# ── Starting a proof ─────────────────────────────────────────────────────────

def start_proof(goal: str, kb_id: Optional[str] = None) -> ProofState:
    """
    Fresh proof of `goal`, with one Premise step per premise of the chosen
    knowledge base (none if kb_id is None).

    Raises FormulaError if the goal does not parse and KeyError for an
    unknown knowledge base.
    """
    parse_formula(goal)
    premises = KNOWLEDGE_BASES[kb_id].premises if kb_id is not None else ()
    steps = tuple(
        ProofStep(id=i + 1, formula=premise, rule_id=RuleId.PREMISE,
                  justification="Premise", depth=0)
        for i, premise in enumerate(premises)
    )
    state = ProofState(goal=goal, premises=premises, steps=steps)
    return replace(state, is_complete=validate_proof(state))


# ── Applicability ────────────────────────────────────────────────────────────

def check_applicability(rule: Rule, state: ProofState) -> ApplicableRule:
    """
    Can `rule` be tried in `state` at all?

    Only the structural preconditions are checked (open assumption, enough
    steps in the innermost scope). Whether a particular selection of steps
    has the right shape is only known when the rule is applied.
    """
    if rule.id is RuleId.ASSUME:
        return ApplicableRule(rule, True)

    if rule.id is RuleId.IMPL_INTRO:
        if state.current_depth > 0:
            return ApplicableRule(rule, True)
        return ApplicableRule(rule, False, "no open assumption to close")

    available = state.steps_at_depth(state.current_depth)
    if len(available) < rule.required_steps:
        return ApplicableRule(
            rule, False,
            f"Need at least {rule.required_steps} step(s) at current depth "
            f"(have {len(available)})",
        )
    return ApplicableRule(rule, True)


def applicable_rules(state: ProofState) -> list:
    """check_applicability for every rule in the catalog, in catalog order."""
    return [check_applicability(rule, state) for rule in RULES]


# ── Rule handlers ────────────────────────────────────────────────────────────
#
# handler(state, selected_ids, user_input) -> ProofStep | None
# A handler may raise FormulaError when a step's text does not parse;
# apply_rule turns that into None.

def _selected(state: ProofState, selected_ids: list, count: int) -> Optional[list]:
    if len(selected_ids) != count:
        return None
    steps = [state.step_by_id(i) for i in selected_ids]
    if any(s is None for s in steps):
        return None
    return steps


def _user_formula(user_input: Optional[str]) -> Optional[str]:
    """The user's formula text, stripped, if it parses; None if blank."""
    if user_input is None or not user_input.strip():
        return None
    text = user_input.strip()
    parse_formula(text)
    return text


def _new_step(state, formula, rule_id, dependencies, justification, depth=None):
    return ProofStep(
        id=state.next_id,
        formula=formula,
        rule_id=rule_id,
        dependencies=tuple(dependencies),
        justification=justification,
        depth=state.current_depth if depth is None else depth,
    )


def _assume(state, selected_ids, user_input):
    formula = _user_formula(user_input)
    if formula is None:
        return None
    return _new_step(state, formula, RuleId.ASSUME, (), "Assumption",
                     depth=state.current_depth + 1)


def _try_modus_ponens(fact: ProofStep, conditional: ProofStep) -> Optional[str]:
    """Consequent of `conditional` if `fact` is its antecedent."""
    try:
        parsed = parse_formula(conditional.formula)
    except FormulaError:
        return None
    if not isinstance(parsed, Implies):
        return None
    if normalize_formula(fact.formula) != normalize_formula(to_display_text(parsed.left)):
        return None
    return to_display_text(parsed.right)


def _modus_ponens(state, selected_ids, user_input):
    steps = _selected(state, selected_ids, 2)
    if steps is None:
        return None
    a, b = steps
    result = _try_modus_ponens(a, b) or _try_modus_ponens(b, a)
    if result is None:
        return None
    i, j = selected_ids
    return _new_step(state, result, RuleId.MP, selected_ids, f"MP ({i}, {j})")


def _modus_tollens(state, selected_ids, user_input):
    # Listed in the catalog but has no derivation: never applies.
    return None


def _and_intro(state, selected_ids, user_input):
    steps = _selected(state, selected_ids, 2)
    if steps is None:
        return None
    a, b = steps
    i, j = selected_ids
    return _new_step(state, f"({a.formula}) ^ ({b.formula})", RuleId.AND_INTRO,
                     selected_ids, f"∧I ({i}, {j})")


def _and_elim(side):
    rule_id = RuleId.AND_ELIM_LEFT if side == "left" else RuleId.AND_ELIM_RIGHT
    tag = "∧E-L" if side == "left" else "∧E-R"

    def handler(state, selected_ids, user_input):
        steps = _selected(state, selected_ids, 1)
        if steps is None:
            return None
        parsed = parse_formula(steps[0].formula)
        if not isinstance(parsed, And):
            return None
        part = parsed.left if side == "left" else parsed.right
        return _new_step(state, to_display_text(part), rule_id, selected_ids,
                         f"{tag} ({selected_ids[0]})")

    return handler


def _or_intro(side):
    rule_id = RuleId.OR_INTRO_LEFT if side == "left" else RuleId.OR_INTRO_RIGHT
    tag = "∨I-L" if side == "left" else "∨I-R"

    def handler(state, selected_ids, user_input):
        steps = _selected(state, selected_ids, 1)
        if steps is None:
            return None
        other = _user_formula(user_input)
        if other is None:
            return None
        known = steps[0].formula
        if side == "left":
            formula = f"({known}) | ({other})"
        else:
            formula = f"({other}) | ({known})"
        return _new_step(state, formula, rule_id, selected_ids,
                         f"{tag} ({selected_ids[0]})")

    return handler


def _double_negation(state, selected_ids, user_input):
    steps = _selected(state, selected_ids, 1)
    if steps is None:
        return None
    parsed = parse_formula(steps[0].formula)
    if not (isinstance(parsed, Not) and isinstance(parsed.operand, Not)):
        return None
    return _new_step(state, to_display_text(parsed.operand.operand),
                     RuleId.DOUBLE_NEG, selected_ids, f"DN ({selected_ids[0]})")


def _impl_intro(state, selected_ids, user_input):
    depth = state.current_depth
    if depth == 0:
        return None
    assumption = next(
        (s for s in reversed(state.steps)
         if s.rule_id is RuleId.ASSUME and s.depth == depth),
        None,
    )
    conclusion = state.last_step
    if assumption is None or conclusion is None or conclusion.depth != depth:
        return None
    return _new_step(
        state,
        f"({assumption.formula}) -> ({conclusion.formula})",
        RuleId.IMPL_INTRO,
        (assumption.id, conclusion.id),
        f"→I ({assumption.id}-{conclusion.id})",
        depth=depth - 1,
    )


_HANDLERS = {
    RuleId.ASSUME:         _assume,
    RuleId.MP:             _modus_ponens,
    RuleId.MT:             _modus_tollens,
    RuleId.AND_INTRO:      _and_intro,
    RuleId.AND_ELIM_LEFT:  _and_elim("left"),
    RuleId.AND_ELIM_RIGHT: _and_elim("right"),
    RuleId.OR_INTRO_LEFT:  _or_intro("left"),
    RuleId.OR_INTRO_RIGHT: _or_intro("right"),
    RuleId.DOUBLE_NEG:     _double_negation,
    RuleId.IMPL_INTRO:     _impl_intro,
}

_unhandled = {r for r in RuleId if r is not RuleId.PREMISE} - set(_HANDLERS)
if _unhandled:
    raise TypeError(f"No handler for rules: {sorted(r.value for r in _unhandled)}")


# ── Application ──────────────────────────────────────────────────────────────

# Rules whose new step moves the proof to a different depth.
_DEPTH_CHANGING = frozenset({RuleId.ASSUME, RuleId.IMPL_INTRO})


def apply_rule(
    rule: Rule,
    state: ProofState,
    selected_step_ids,
    user_input: Optional[str] = None,
    verbose: bool = False,
) -> Optional[ProofStep]:
    """
    Apply `rule` to the selected steps and return the new step, or None if
    the rule does not apply to this selection.

    Args:
        rule:               a catalog Rule
        state:              current ProofState (not modified)
        selected_step_ids:  ids of the steps the rule works on, in order
        user_input:         formula text for assume / or_intro_*
        verbose:            print why a rule failed when a formula would not parse or render

    The new step's id is len(state.steps) + 1.
    """
    handler = _HANDLERS.get(rule.id)
    if handler is None:
        return None
    try:
        return handler(state, list(selected_step_ids), user_input)
    except Exception as e:
        # unparsable step text, or a formula too deep to render
        if verbose:
            print(f"  [not applicable] {rule.name}: {e}")
        return None


def extend_proof(
    rule: Rule,
    state: ProofState,
    selected_step_ids,
    user_input: Optional[str] = None,
    verbose: bool = False,
) -> Optional[ProofState]:
    """
    apply_rule, then build the next snapshot: the new step appended,
    current_depth moved for assume / impl_intro, is_complete re-checked.
    Returns None if the rule does not apply.
    """
    step = apply_rule(rule, state, selected_step_ids, user_input, verbose=verbose)
    if step is None:
        return None
    depth = step.depth if rule.id in _DEPTH_CHANGING else state.current_depth
    new_state = state.with_step(step, current_depth=depth)
    complete = validate_proof(new_state)
    if verbose:
        print(f"  [new] {step.name}  ({step.justification})")
        if complete:
            print("  QED: goal reached with no open assumptions.")
    return replace(new_state, is_complete=complete)


def validate_proof(state: ProofState) -> bool:
    """The proof is done when no assumption is open and the last line is the goal."""
    last = state.last_step
    if last is None:
        return False
    return (state.current_depth == 0 and
            normalize_formula(last.formula) == normalize_formula(state.goal))


# ── Deletion ─────────────────────────────────────────────────────────────────

def deletion_blocker(state: ProofState, step_id: int) -> Optional[str]:
    """Why `step_id` cannot be deleted, or None if it can."""
    step = state.step_by_id(step_id)
    if step is None:
        return f"Step {step_id} does not exist"
    if step.rule_id is RuleId.PREMISE:
        return "Premises cannot be deleted"
    dependents = state.dependents_of(step_id)
    if dependents:
        ids = ", ".join(str(s.id) for s in dependents)
        return f"Step {step_id} is used by step(s) {ids}"
    return None


def delete_step(state: ProofState, step_id: int) -> Optional[ProofState]:
    """
    Drop `step_id` and every step after it. Returns None if the deletion is
    rejected (see deletion_blocker).
    """
    if deletion_blocker(state, step_id) is not None:
        return None
    index = next(i for i, s in enumerate(state.steps) if s.id == step_id)
    kept = state.steps[:index]
    depth = kept[-1].depth if kept else 0
    new_state = replace(state, steps=kept, current_depth=depth, is_complete=False)
    return replace(new_state, is_complete=validate_proof(new_state))
