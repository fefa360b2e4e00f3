from __future__ import annotations

from .models import PreferenceSet

NOTHING_AVAILABLE = "No recipes are available right now."
_CONJUNCTION = "and"


def _reasons(prefs: PreferenceSet) -> list[str]:
    reasons: list[str] = []
    if prefs.included:
        reasons.append(f"selected ingredients ({', '.join(prefs.included)})")
    if prefs.excluded:
        reasons.append(f"applied exclusions ({', '.join(prefs.excluded)})")
    if prefs.phase is not None:
        reasons.append(f"a caloric target of {prefs.phase.label} calories")
    return reasons


def explain(prefs: PreferenceSet) -> str:
    """
    Describe why a plan came back empty.

    Only the preference set is inspected, so pass the same one that was given
    to ``filter_recipes``.
    """
    reasons = _reasons(prefs)
    if not reasons:
        return NOTHING_AVAILABLE
    if len(reasons) == 1:
        return f"No recipes match {reasons[0]}. Try adjusting your preferences."
    *head, last = reasons
    return (
        f"No recipes match {', '.join(head)} {_CONJUNCTION} {last}. "
        "Try relaxing your restrictions."
    )
