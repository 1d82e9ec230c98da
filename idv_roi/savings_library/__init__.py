# Importing formulas registers every savings component
from . import formulas  # noqa: F401
from .registry import SavingsComponent, get_all_components, get_component

__all__ = ["SavingsComponent", "get_all_components", "get_component"]
