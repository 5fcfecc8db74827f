from .draw import forest_layout, draw_incidence_forest

__all__ = [
    "forest_layout",
    "draw_incidence_forest",
]
