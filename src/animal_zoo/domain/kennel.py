"""犬舎コンテナ"""

from typing import List, Tuple

from .animals import Dog


class Kennel:
    """
    犬だけを保持する犬舎

    登録順を保持し、外部には変更できないタプルとして公開します。
    """

    def __init__(self, address: str):
        """
        Args:
            address: 所在地 (None 不可)
        """
        self._dogs: List[Dog] = []
        self.address = address

    @property
    def address(self) -> str:
        return self._address

    @address.setter
    def address(self, value: str) -> None:
        if value is None:
            raise ValueError("address must not be None")
        self._address = value

    @property
    def dogs(self) -> Tuple[Dog, ...]:
        """登録済みの犬 (登録順)"""
        return tuple(self._dogs)

    def add_dog(self, dog: Dog) -> None:
        """
        犬を登録

        Raises:
            TypeError: Dog 以外が渡された場合
        """
        if not isinstance(dog, Dog):
            raise TypeError(f"Kennel only accepts Dog instances, got {type(dog).__name__}")
        self._dogs.append(dog)
