"""
動物ファクトリー

Species から具象クラスへの対応表を 1 か所に持ち、呼び出し側が具象クラスを
知らずに動物を生成できるようにします。
"""

from typing import Any, Dict, List, Optional, Type

from .models import Animal, Species
from .animals import Dog, Cat, Rabbit


class UnsupportedSpeciesError(ValueError):
    """
    未対応の動物種別例外

    ファクトリーに登録されていない種別が渡された場合に送出されます。
    """

    def __init__(self, message: str, species: Optional[Any] = None):
        """
        Args:
            message: エラーメッセージ
            species: 拒否された種別の値
        """
        super().__init__(message)
        self.species = species


_VARIANTS: Dict[Species, Type[Animal]] = {
    Species.DOG: Dog,
    Species.CAT: Cat,
    Species.RABBIT: Rabbit,
}


def supported_species() -> List[Species]:
    """登録済みの種別を定義順に返す"""
    return list(_VARIANTS)


def create_animal(species: Species, name: str) -> Animal:
    """
    種別と名前から動物を生成

    Args:
        species: 動物種別
        name: 名前 (値チェックなし)

    Returns:
        Animal: species に対応する具象クラスのインスタンス

    Raises:
        UnsupportedSpeciesError: 登録されていない種別が渡された場合
    """
    try:
        variant = _VARIANTS[species]
    except (KeyError, TypeError):
        raise UnsupportedSpeciesError(f"Unknown species: {species}", species=species) from None
    return variant(name=name)
