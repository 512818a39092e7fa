"""Rule registry: stores and resolves plan rules."""

from __future__ import annotations

from floorplan.models.context import PlanContext
from floorplan.rules.base import PlanRule


class RuleRegistry:
    """
    Central registry for all plan rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, PlanRule] = {}

    def register(self, rule: PlanRule) -> None:
        """Register a plan rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> PlanRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[PlanRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: PlanContext) -> list[PlanRule]:
        """
        Return rules that apply to the given context, sorted by priority.

        Respects DisplayOptions.enabled_rules and disabled_rules.
        """
        options = context.options
        candidates = list(self._rules.values())

        # If enabled_rules is specified, only use those
        if options.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in options.enabled_rules]

        # Remove explicitly disabled rules
        if options.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in options.disabled_rules]

        # Filter by applies()
        applicable = [r for r in candidates if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[PlanRule]) -> list[PlanRule]:
        """Topological sort respecting dependencies."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[PlanRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard plan rules."""
    from floorplan.rules.wall.wall_fill import WallFillRule
    from floorplan.rules.opening.door_swing import DoorSwingRule
    from floorplan.rules.opening.window_panes import WindowPaneRule
    from floorplan.rules.furniture.glyphs import FurnitureGlyphRule
    from floorplan.rules.annotation.dimensions import DimensionRule
    from floorplan.rules.annotation.labels import LabelRule

    registry = RuleRegistry()
    registry.register(WallFillRule())
    registry.register(WindowPaneRule())
    registry.register(DoorSwingRule())
    registry.register(FurnitureGlyphRule())
    registry.register(DimensionRule())
    registry.register(LabelRule())
    return registry
