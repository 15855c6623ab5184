# =============================================================================
# fuego_core/data/menu.py
# Dishes offered to the marketing copy generator
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class MenuItem:
    id: int
    name: str
    description: str
    price: float
    category: str
    highlight: bool = False


MENU_HIGHLIGHTS: List[MenuItem] = [
    MenuItem(1, "Prime Tomahawk Gold",
             "Corte nobre de 800g com osso, finalizado na manteiga de ervas e flor de sal.",
             189.90, "carnes", highlight=True),
    MenuItem(2, "Bife de Chorizo Angus",
             "Suculência extrema, grelhado ao ponto do chef. Acompanha batatas rústicas.",
             89.90, "carnes", highlight=True),
    MenuItem(3, "Ravioli de Costela",
             "Massa fresca recheada com costela desfiada, ao molho de vinho tinto.",
             74.90, "massas", highlight=True),
    MenuItem(4, "Provoleta na Brasa",
             "Queijo provolone grelhado com orégano fresco e azeite de oliva.",
             42.90, "entradas"),
    MenuItem(5, "Petit Gâteau de Doce de Leite",
             "Bolo quente com centro cremoso e sorvete de creme.",
             36.90, "sobremesas", highlight=True),
]


def find_menu_item(item_id: int) -> Optional[MenuItem]:
    return next((item for item in MENU_HIGHLIGHTS if item.id == item_id), None)
