"""
Tests for the command-line driver.
"""

from sandwich.main import main


class TestMain:
    """Tests for the printed outcome and exit code."""

    def test_prints_ready_sandwich(self, monkeypatch, capsys):
        """Test the default run."""
        monkeypatch.setenv("SANDWICH_INTERPRETER", "crazy")

        assert main() == 0
        out = capsys.readouterr().out
        assert (
            "sandwich: Success(SandwichReady(body=SandwichBody(bottom=TOAST, "
            "components=[TOMATO, CHEESE, SALT]), top=None))"
        ) in out

    def test_prints_failure(self, monkeypatch, capsys):
        """Test that a failed sandwich is printed and exits non-zero."""
        monkeypatch.setenv("SANDWICH_INTERPRETER", "faulty")

        assert main() == 1
        out = capsys.readouterr().out
        assert (
            "sandwich: Failure(IngredientNotFoundError: Ingredient CHEESE not found!)"
        ) in out

    def test_unknown_interpreter(self, monkeypatch, capsys):
        """Test that a bad interpreter name halts the kitchen."""
        monkeypatch.setenv("SANDWICH_INTERPRETER", "microwave")

        assert main() == 1
        assert "sandwich:" not in capsys.readouterr().out

    def test_unknown_recipe(self, monkeypatch, capsys):
        """Test that a bad recipe name halts the kitchen."""
        monkeypatch.setenv("SANDWICH_RECIPE", "blt")

        assert main() == 1
        assert "sandwich:" not in capsys.readouterr().out
