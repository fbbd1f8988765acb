import pytest

from genco.recipe_type import RecipeType


def test_new_positive():
    assert RecipeType.from_str("java") is RecipeType.JAVA


def test_unknown_type():
    with pytest.raises(ValueError, match='Unexpected test type "rust"'):
        RecipeType.from_str("rust")


def test_all_types_set_str():
    assert RecipeType.all_types_set_str() == "{java}"