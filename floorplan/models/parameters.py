"""Plan generation parameters and display options."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class Units(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class PlanParams(BaseModel):
    """Drawing constants. Lengths in drawing units unless named *_m or *thickness."""
    scale: float = 100.0                    # Drawing units per meter
    exterior_wall_thickness: float = 0.254  # Meters (10")
    interior_wall_thickness: float = 0.15   # Meters (6")
    corner_extension: float = 0.3           # End extension, x half-thickness
    junction_grid: float = 0.1              # Endpoint snapping grid
    exterior_max_connections: int = 2
    all_exterior_max_walls: int = 4         # Rooms this small are all perimeter
    dimension_offset: float = 40.0
    tick_length: float = 7.0
    label_gap: float = 6.0                  # Extra outward push for dimension text
    label_padding: float = 6.0
    dimension_font_size: float = 10.0
    min_dimension_length: float = 0.5       # Meters
    door_swing_ratio: float = 0.9
    door_open_confidence: float = 0.7
    window_pane_spacing: float = 30.0
    min_window_thickness: float = 0.05      # Meters
    bounds_padding: float = 50.0
    label_min_zoom: float = 0.7


class DisplayOptions(BaseModel):
    """User-facing toggles. Changing any of these rebuilds the scene."""
    show_dimensions: bool = True
    show_overall_dimensions: bool = False
    show_labels: bool = True
    show_door_state: bool = False           # Closed doors drawn as slabs
    units: Units = Units.IMPERIAL
    enabled_rules: list[str] = []           # Empty = use all registered defaults
    disabled_rules: list[str] = []          # Explicitly disable specific rules
