"""
Tests for kitchen configuration, technology selection and execution.
"""

import pytest
from pydantic import ValidationError

from sandwich.core.kitchen import (
    INTERPRETERS,
    Kitchen,
    KitchenConfig,
    KitchenConfigError,
    build_technology,
    cook,
    load_config,
)
from sandwich.core.recipes import RecipeBook, RecipeNotFoundError, club_recipe, my_recipe
from sandwich.core.technology import Op, SandwichTechnology
from sandwich.domain.models import Bread, Component


class TestKitchenConfig:
    """Tests for loading kitchen.yaml."""

    def test_defaults(self):
        """Test the built-in defaults."""
        config = KitchenConfig()
        assert config.interpreter == "real"
        assert config.recipe is None
        assert set(config.pantry) == {*Bread, *Component}
        assert config.fail_at == Op.ADD_COMPONENT

    def test_load_from_yaml(self, tmp_path):
        """Test parsing ingredient and op names from YAML."""
        path = tmp_path / "kitchen.yaml"
        path.write_text(
            "interpreter: stocked\n"
            "recipe: club_recipe\n"
            "pantry: [toast, cheese]\n"
            "fail_at: finish_sandwich\n"
        )

        config = load_config(path)

        assert config.interpreter == "stocked"
        assert config.recipe == "club_recipe"
        assert config.pantry == [Bread.TOAST, Component.CHEESE]
        assert config.fail_at == Op.FINISH_SANDWICH

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that a missing file falls back to defaults."""
        config = load_config(tmp_path / "nope.yaml")
        assert config == KitchenConfig()

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test that an empty file falls back to defaults."""
        path = tmp_path / "kitchen.yaml"
        path.write_text("")
        assert load_config(path) == KitchenConfig()

    def test_env_overrides(self, tmp_path, monkeypatch):
        """Test SANDWICH_CONFIG, SANDWICH_INTERPRETER and SANDWICH_RECIPE."""
        path = tmp_path / "custom.yaml"
        path.write_text("interpreter: real\n")
        monkeypatch.setenv("SANDWICH_CONFIG", str(path))
        monkeypatch.setenv("SANDWICH_INTERPRETER", "crazy")
        monkeypatch.setenv("SANDWICH_RECIPE", "club_recipe")

        config = load_config()

        assert config.interpreter == "crazy"
        assert config.recipe == "club_recipe"

    def test_unknown_ingredient_rejected(self, tmp_path):
        """Test that the pantry only accepts known ingredients."""
        path = tmp_path / "kitchen.yaml"
        path.write_text("pantry: [ham]\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_project_config_loads(self):
        """Test that the shipped kitchen.yaml is valid."""
        assert load_config().interpreter in INTERPRETERS


class TestBuildTechnology:
    """Tests for choosing a technology by name."""

    @pytest.mark.parametrize("name", sorted(INTERPRETERS))
    def test_known_interpreters(self, name):
        """Test that every registered interpreter builds."""
        tech = build_technology(KitchenConfig(interpreter=name))
        assert isinstance(tech, SandwichTechnology)

    def test_unknown_interpreter(self):
        """Test that an unknown name is rejected."""
        with pytest.raises(KitchenConfigError) as exc_info:
            build_technology(KitchenConfig(interpreter="microwave"))
        assert exc_info.value.key == "interpreter"

    def test_stocked_uses_pantry(self):
        """Test that the stocked interpreter sees the configured pantry."""
        config = KitchenConfig(interpreter="stocked", pantry=[Bread.TOAST, Component.TOMATO])
        result = my_recipe(build_technology(config))
        assert result.exception_or_none().ingredient == Component.CHEESE

    def test_faulty_uses_fail_at(self):
        """Test that the faulty interpreter breaks the configured step."""
        config = KitchenConfig(interpreter="faulty", fail_at=Op.START_NEW_SANDWICH)
        result = my_recipe(build_technology(config))
        assert result.exception_or_none().ingredient == Bread.TOAST


class TestKitchen:
    """Tests for selection and execution."""

    def test_cook_function(self, crazy_tech):
        """Test running one recipe on one technology."""
        assert cook(my_recipe, crazy_tech) == my_recipe(crazy_tech)

    def test_cooks_first_recipe(self, crazy_tech):
        """Test that no name cooks the first recipe in the book."""
        result = Kitchen(technology=crazy_tech).cook()
        assert result.get_or_raise().components == (
            Component.TOMATO,
            Component.CHEESE,
            Component.SALT,
        )

    def test_cooks_named_recipe(self, crazy_tech):
        """Test cooking a recipe by name."""
        result = Kitchen(technology=crazy_tech).cook("club_recipe")
        assert result.get_or_raise().top == Bread.BAGUETTE

    def test_custom_book(self, crazy_tech):
        """Test that the kitchen cooks from the book it was given."""
        book = RecipeBook()
        book.register("club", club_recipe)
        assert Kitchen(book, crazy_tech).cook() == club_recipe(crazy_tech)

    def test_empty_book(self, crazy_tech):
        """Test that an empty book cannot be cooked from."""
        with pytest.raises(RecipeNotFoundError):
            Kitchen(RecipeBook(), crazy_tech).cook()

    def test_reports_failure(self, capsys):
        """Test that a failed sandwich is reported."""
        kitchen = Kitchen.from_config(KitchenConfig(interpreter="faulty"))
        result = kitchen.cook()

        assert result.is_failure
        assert "Sandwich failed: Ingredient CHEESE not found!" in capsys.readouterr().out
