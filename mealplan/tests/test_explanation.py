from __future__ import annotations

from mealplan.recipes.explanation import NOTHING_AVAILABLE, explain
from mealplan.recipes.models import CaloricPhase, PreferenceSet


def test_no_constraints_gives_generic_message():
    assert explain(PreferenceSet()) == NOTHING_AVAILABLE


def test_single_ingredient_constraint():
    msg = explain(PreferenceSet(included=["Pollo", "Quinoa"]))
    assert msg == (
        "No recipes match selected ingredients (Pollo, Quinoa). "
        "Try adjusting your preferences."
    )


def test_single_phase_constraint():
    msg = explain(PreferenceSet(phase=CaloricPhase.high))
    assert msg == "No recipes match a caloric target of 1200+ calories. Try adjusting your preferences."
    assert "ingredients" not in msg
    assert "exclusions" not in msg


def test_two_constraints_joined_with_and():
    msg = explain(PreferenceSet(included=["Pollo"], excluded=["gluten"]))
    assert msg == (
        "No recipes match selected ingredients (Pollo) and applied exclusions (gluten). "
        "Try relaxing your restrictions."
    )


def test_three_constraints_in_fixed_order():
    prefs = PreferenceSet(phase=CaloricPhase.low, excluded=["Lácteos"], included=["Huevo"])
    msg = explain(prefs)
    assert msg == (
        "No recipes match selected ingredients (Huevo), applied exclusions (Lácteos) "
        "and a caloric target of <800 calories. Try relaxing your restrictions."
    )


def test_choices_given_as_set_are_listed_sorted():
    msg = explain(PreferenceSet(included={"Pollo", "Quinoa", "Atún"}, excluded=frozenset({"gluten"})))
    assert msg == (
        "No recipes match selected ingredients (Atún, Pollo, Quinoa) and applied exclusions (gluten). "
        "Try relaxing your restrictions."
    )
