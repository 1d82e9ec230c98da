from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Global registry -- maps component_id -> SavingsComponent, in registration order
_REGISTRY: dict[str, SavingsComponent] = {}


@dataclass(frozen=True)
class SavingsComponent:
    """One additive term of total annual savings."""

    id: str
    label: str
    description: str
    required_inputs: tuple[str, ...]  # CalculationContext field names
    formula_fn: Callable[..., float]
    toggle: Optional[str] = None  # CalculatorInputs field that can switch it off

    def is_enabled(self, inputs) -> bool:
        """A component is off only when its toggle is present and False."""
        if self.toggle is None:
            return True
        return getattr(inputs, self.toggle) is not False


def register_component(
    component_id: str,
    label: str,
    description: str,
    required_inputs: list[str],
    toggle: Optional[str] = None,
) -> Callable:
    """Decorator to register a formula function as a savings component."""

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        _REGISTRY[component_id] = SavingsComponent(
            id=component_id,
            label=label,
            description=description,
            required_inputs=tuple(required_inputs),
            formula_fn=fn,
            toggle=toggle,
        )
        return fn

    return decorator


def get_component(component_id: str) -> Optional[SavingsComponent]:
    """Look up a savings component by ID."""
    return _REGISTRY.get(component_id)


def get_all_components() -> dict[str, SavingsComponent]:
    """Return the full registry (read-only copy)."""
    return dict(_REGISTRY)
