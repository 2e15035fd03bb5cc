"""具象動物クラス (Dog, Cat, Rabbit) のユニットテスト"""

import pytest
from pydantic import ValidationError

from src.animal_zoo.domain.animals import Dog, Cat, Rabbit
from src.animal_zoo.domain.models import Animal, Species


class TestVariants:
    """具象クラス共通のテストケース"""

    @pytest.mark.parametrize(
        "variant, species",
        [(Dog, Species.DOG), (Cat, Species.CAT), (Rabbit, Species.RABBIT)],
    )
    def test_species_and_legs_are_fixed(self, variant, species):
        """種別と脚の本数がクラスで固定されていること"""
        animal = variant(name="Test")

        assert isinstance(animal, Animal)
        assert animal.species == species
        assert animal.legs == 4

    def test_mismatched_species_is_rejected(self):
        """クラスと異なる種別は指定できないこと"""
        with pytest.raises(ValidationError):
            Dog(name="Loki", species=Species.CAT)

    @pytest.mark.parametrize("variant", [Dog, Cat, Rabbit])
    def test_move_uses_default(self, variant, capsys):
        """move は共通実装のままであること"""
        variant(name="Test").move()
        assert capsys.readouterr().out == "Test moves somehow using 4 legs.\n"


class TestDog:
    """Dog のテストケース"""

    def test_speak(self, capsys):
        """名前と woof を含むこと"""
        Dog(name="Buddy").speak()

        out = capsys.readouterr().out
        assert "Buddy" in out
        assert "woof" in out

    def test_special_behaviour(self, capsys):
        Dog(name="Loki").perform_special_behaviour()
        assert capsys.readouterr().out == "Loki chases its tail.\n"


class TestCat:
    """Cat のテストケース"""

    def test_speak(self, capsys):
        Cat(name="Ziggy").speak()
        assert capsys.readouterr().out == "Ziggy says: meow\n"

    def test_special_behaviour(self, capsys):
        """名前と ignores を含むこと"""
        result = Cat(name="Ziggy").perform_special_behaviour()

        out = capsys.readouterr().out
        assert result is None
        assert "Ziggy" in out
        assert "ignores" in out


class TestRabbit:
    """Rabbit のテストケース"""

    def test_speak(self, capsys):
        Rabbit(name="Sooty").speak()
        assert capsys.readouterr().out == "Sooty says: squeak\n"

    def test_special_behaviour(self, capsys):
        Rabbit(name="Sooty").perform_special_behaviour()
        assert capsys.readouterr().out == "Sooty nibbles on something...\n"

    def test_eat(self, capsys):
        Rabbit(name="Sooty").eat("carrot")
        assert capsys.readouterr().out == "Sooty eats carrot.\n"
