"""Abstract base class for all plan symbol rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each draws one family of symbols (walls, doors, dimensions...)
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from floorplan.models.context import PlanContext, RuleOutput


class PlanRule(ABC):
    """
    Base class for all plan rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order. Priority is
    also paint order: later rules draw on top.
    """

    # Lower priority = runs (and paints) first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'wall.fill')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Wall Fills')."""
        ...

    @abstractmethod
    def applies(self, context: PlanContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: PlanContext) -> RuleOutput:
        """
        Produce shapes, labels and dimension markers for the given context.

        The context provides the projected room, params, options and the
        analysis results (classified walls, topology, centroid).
        Rules must not raise on degenerate elements; they skip them.
        """
        ...
