"""
データモデル定義

このモジュールは animal-zoo のドメイン層のデータモデルを定義します:
- Species: 動物種別の閉じた列挙
- Speakable / Movable / Consumable: 振る舞いごとに分離したインターフェース
- Animal: 全動物に共通する識別属性と振る舞い契約を持つ抽象基底モデル
"""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Species(str, Enum):
    """動物種別"""
    DOG = "DOG"
    CAT = "CAT"
    RABBIT = "RABBIT"


class Speakable(ABC):
    """鳴くことができる"""

    @abstractmethod
    def speak(self) -> None:
        pass


class Movable(ABC):
    """移動することができる"""

    @abstractmethod
    def move(self) -> None:
        pass


class Consumable(ABC):
    """食べることができる"""

    @abstractmethod
    def eat(self, food: str) -> None:
        pass


class Animal(BaseModel, Speakable, Movable, Consumable):
    """
    全動物の抽象基底モデル

    speak と perform_special_behaviour は種別ごとの具象クラスで実装します。
    move と eat は脚の本数・名前を使った共通実装を提供します。

    Note:
        - 生成後は変更不可 (frozen)
        - name / legs の値チェックは行わない (空文字列・負値もそのまま受け入れる)
        - 生成は domain.factory.create_animal 経由を想定
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="名前")
    species: Species = Field(..., description="動物種別")
    legs: int = Field(..., description="脚の本数")

    @abstractmethod
    def speak(self) -> None:
        """種別固有の鳴き声を出力"""
        pass

    @abstractmethod
    def perform_special_behaviour(self) -> None:
        """種別固有の特別な振る舞いを出力"""
        pass

    def move(self) -> None:
        """脚の本数を使った汎用の移動表現を出力"""
        print(f"{self.name} moves somehow using {self.legs} legs.")

    def eat(self, food: str) -> None:
        """
        食事を出力

        Args:
            food: 食べ物 (空文字列も許容)
        """
        print(f"{self.name} eats {food}.")
