# -----------------------------------------------------------------------------
# INFRASTRUCTURE LAYER
# -----------------------------------------------------------------------------
# Contains collaborators the core treats as injected capabilities:
# - PantryStorage: In-memory ingredient stock behind IngredientsStorage
# -----------------------------------------------------------------------------

from .storage import IngredientsStorage, PantryStorage

__all__ = ["IngredientsStorage", "PantryStorage"]
