from __future__ import annotations

from .models import CaloricPhase

# Choices offered by the plan form, primary first then the "show more" list
PRIMARY_INGREDIENTS: list[str] = [
    "Pollo", "Atún", "Huevo", "Aguacate", "Quinoa", "Garbanzos", "Frijol", "Pescado",
]
EXTRA_INGREDIENTS: list[str] = [
    "Almendras", "Yogurt", "Nueces", "Tomate", "Queso", "Mango", "Plátano",
    "Camote", "Coco", "Miel", "Pepino", "Fresas", "Dátiles", "Kale", "Edamame",
    "Granola", "Arándanos", "Frambuesas", "Pan integral", "Ricotta", "Semillas",
    "Maíz", "Uvas", "Cilantro", "Lima", "Lechuga", "Zanahoria",
]

PRIMARY_EXCLUSIONS: list[str] = ["Lácteos", "Gluten", "Nueces", "Pescado", "Huevos"]
EXTRA_EXCLUSIONS: list[str] = ["Vegano", "Sin azúcar", "Bajo en sodio", "Sin frutos secos", "Keto"]


def form_options() -> dict:
    return {
        "ingredients": {"primary": PRIMARY_INGREDIENTS, "extra": EXTRA_INGREDIENTS},
        "exclusions": {"primary": PRIMARY_EXCLUSIONS, "extra": EXTRA_EXCLUSIONS},
        "phases": [{"value": p.value, "label": p.label} for p in CaloricPhase],
    }
