"""
ドメイン層

動物の種別・振る舞い・生成ロジックと、税計算・犬舎を提供します。
"""

from .models import Species, Speakable, Movable, Consumable, Animal
from .animals import Dog, Cat, Rabbit
from .factory import create_animal, supported_species, UnsupportedSpeciesError
from .tax import Country
from .kennel import Kennel

__all__ = [
    "Species",
    "Speakable",
    "Movable",
    "Consumable",
    "Animal",
    "Dog",
    "Cat",
    "Rabbit",
    "create_animal",
    "supported_species",
    "UnsupportedSpeciesError",
    "Country",
    "Kennel",
]
