"""犬舎のユニットテスト"""

import pytest

from src.animal_zoo.domain.kennel import Kennel
from src.animal_zoo.domain.animals import Dog, Cat


class TestKennel:
    """Kennel のテストケース"""

    @pytest.fixture
    def kennel(self):
        return Kennel("Somewhere over there")

    def test_initial_state(self, kennel):
        assert kennel.address == "Somewhere over there"
        assert kennel.dogs == ()

    def test_add_dog_preserves_order(self, kennel):
        """登録順に保持されること"""
        buddy = Dog(name="Buddy")
        rex = Dog(name="Rex")

        kennel.add_dog(buddy)
        kennel.add_dog(rex)

        assert kennel.dogs == (buddy, rex)

    def test_dogs_view_is_immutable(self, kennel):
        """公開されるリストは変更できないこと"""
        kennel.add_dog(Dog(name="Buddy"))

        dogs = kennel.dogs
        with pytest.raises(AttributeError):
            dogs.append(Dog(name="Rex"))
        assert len(kennel.dogs) == 1

    def test_add_non_dog_raises(self, kennel):
        """Dog 以外は登録できないこと"""
        with pytest.raises(TypeError):
            kennel.add_dog(Cat(name="Ziggy"))
        with pytest.raises(TypeError):
            kennel.add_dog(None)
        assert kennel.dogs == ()

    def test_address_can_be_changed(self, kennel):
        kennel.address = "Elsewhere"
        assert kennel.address == "Elsewhere"

    def test_address_none_is_rejected(self, kennel):
        with pytest.raises(ValueError):
            kennel.address = None
        with pytest.raises(ValueError):
            Kennel(None)
