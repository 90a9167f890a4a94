"""
Knowledge-base registry.

Each knowledge base is a fixed set of starting premises plus goals known to
be provable from them. Choosing one when starting a proof turns its
premises into the first steps of the proof, in order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestedGoal:
    label: str
    formula: str
    description: str


@dataclass(frozen=True)
class KnowledgeBase:
    id: str
    name: str
    description: str
    premises: tuple = ()
    suggested_goals: tuple = ()

    def __repr__(self):
        return f"KnowledgeBase({self.id!r})"


KNOWLEDGE_BASES = {
    "empty": KnowledgeBase(
        id="empty",
        name="Empty",
        description="No premises - prove using only logic",
        premises=(),
        suggested_goals=(
            SuggestedGoal("Identity", "p -> p",
                          "Prove that anything implies itself"),
        ),
    ),
    "modus-ponens": KnowledgeBase(
        id="modus-ponens",
        name="Modus Ponens",
        description="Given p and p→q, derive q",
        premises=("p", "p -> q"),
        suggested_goals=(
            SuggestedGoal("Derive q", "q", "Use Modus Ponens to get q"),
        ),
    ),
    "conjunction": KnowledgeBase(
        id="conjunction",
        name="Conjunction",
        description="Given two propositions",
        premises=("p", "q"),
        suggested_goals=(
            SuggestedGoal("Combine with AND", "p ^ q", "Use ∧ Introduction"),
            SuggestedGoal("Commutative", "q ^ p", "AND is commutative"),
        ),
    ),
    "disjunction": KnowledgeBase(
        id="disjunction",
        name="Disjunction",
        description="Given one proposition",
        premises=("p",),
        suggested_goals=(
            SuggestedGoal("Add OR", "p | q", "Use ∨ Introduction"),
        ),
    ),
    "syllogism": KnowledgeBase(
        id="syllogism",
        name="Hypothetical Syllogism",
        description="Chain of implications",
        premises=("p", "p -> q", "q -> r"),
        suggested_goals=(
            SuggestedGoal("Derive r", "r", "Apply Modus Ponens twice"),
            SuggestedGoal("Direct implication", "p -> r", "Prove transitivity"),
        ),
    ),
    "elimination": KnowledgeBase(
        id="elimination",
        name="Conjunction Elimination",
        description="Given a conjunction",
        premises=("p ^ q",),
        suggested_goals=(
            SuggestedGoal("Extract left", "p", "Use ∧ Elimination (Left)"),
            SuggestedGoal("Extract right", "q", "Use ∧ Elimination (Right)"),
        ),
    ),
}


def list_knowledge_bases() -> list:
    return list(KNOWLEDGE_BASES.values())


def list_suggested_goals() -> list:
    """
    Every suggested goal of every knowledge base, flattened.

    Labels are prefixed with the knowledge base's name and descriptions
    are suffixed with its premises, e.g.
        "Modus Ponens: Derive q"
        "Use Modus Ponens to get q (Premises: p, p -> q)"
    """
    goals = []
    for kb in KNOWLEDGE_BASES.values():
        premises = ", ".join(kb.premises) if kb.premises else "none"
        for goal in kb.suggested_goals:
            goals.append(SuggestedGoal(
                label=f"{kb.name}: {goal.label}",
                formula=goal.formula,
                description=f"{goal.description} (Premises: {premises})",
            ))
    return goals
