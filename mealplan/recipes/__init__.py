"""
Recipe matching engine.

Responsibilities:
- Model recipes, ingredients and the user's preference set.
- Filter a catalog by allergens, ingredients and caloric phase.
- Explain, in one sentence, which choices left a plan empty.
- Split preparation text into numbered steps for the detail view.
"""
