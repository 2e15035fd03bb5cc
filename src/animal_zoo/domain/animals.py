"""
具象動物クラス

Species ごとに 1 クラスを定義します。種別はクラス定義で固定されるため、
インスタンスの species と振る舞いは常に一致します。
"""

from typing import Literal

from .models import Animal, Species


class Dog(Animal):
    """犬"""

    species: Literal[Species.DOG] = Species.DOG
    legs: int = 4

    def speak(self) -> None:
        print(f"{self.name} says: woof")

    def perform_special_behaviour(self) -> None:
        print(f"{self.name} chases its tail.")


class Cat(Animal):
    """猫"""

    species: Literal[Species.CAT] = Species.CAT
    legs: int = 4

    def speak(self) -> None:
        print(f"{self.name} says: meow")

    def perform_special_behaviour(self) -> None:
        print(f"{self.name} ignores you (classic).")


class Rabbit(Animal):
    """うさぎ"""

    species: Literal[Species.RABBIT] = Species.RABBIT
    legs: int = 4

    def speak(self) -> None:
        print(f"{self.name} says: squeak")

    def perform_special_behaviour(self) -> None:
        print(f"{self.name} nibbles on something...")
