"""Theme definitions for comparison graphs."""

from matchup_graph.themes.dark import DARK_THEME
from matchup_graph.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
