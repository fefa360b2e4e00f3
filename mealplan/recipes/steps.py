"""
Split free-form preparation text into numbered steps.

Steps in the catalog are written inline, e.g. ``"1. Mix well. 2. Bake."``.
A boundary is a run of ASCII digits followed directly by a period.
"""
from __future__ import annotations

from .models import PreparationStep


def _markers(text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` offsets of every ``<digits>.`` marker."""
    found: list[tuple[int, int]] = []
    i, n = 0, len(text)
    while i < n:
        if not ("0" <= text[i] <= "9"):
            i += 1
            continue
        j = i
        while j < n and "0" <= text[j] <= "9":
            j += 1
        if j < n and text[j] == ".":
            found.append((i, j + 1))
            i = j + 1
        else:
            i = j
    return found


def segment(text: str | None) -> list[PreparationStep]:
    """
    Break ``text`` into steps.

    Blank steps are dropped and the rest are renumbered 1..N. Text without any
    marker yields no steps.
    """
    if not text:
        return []
    markers = _markers(text)
    steps: list[PreparationStep] = []
    for idx, (_, body_start) in enumerate(markers):
        body_end = markers[idx + 1][0] if idx + 1 < len(markers) else len(text)
        instruction = text[body_start:body_end].strip()
        if instruction:
            steps.append(
                PreparationStep(step_number=len(steps) + 1, instruction=instruction)
            )
    return steps
