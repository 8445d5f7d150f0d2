"""UserTheme domain entity: selected preset, custom color overrides, dark mode flag."""
from typing import Dict, Optional

DEFAULT_PRESET = 'indigo-purple'


class UserTheme:
    def __init__(self, current_preset: str = DEFAULT_PRESET, custom_colors: Optional[Dict[str, str]] = None,
                 is_dark_mode: bool = False):
        self.current_preset = current_preset or DEFAULT_PRESET
        self.custom_colors = dict(custom_colors) if custom_colors else {}
        self.is_dark_mode = bool(is_dark_mode)

    def __str__(self) -> str:
        mode = "dark" if self.is_dark_mode else "light"
        return f"{self.current_preset} ({mode}) - {len(self.custom_colors)} custom color(s)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        custom = d.get('customColors') or {}
        return UserTheme(
            current_preset=d.get('currentPreset') or DEFAULT_PRESET,
            custom_colors={k: v for k, v in custom.items() if isinstance(v, str) and v},
            is_dark_mode=d.get('isDarkMode', False),
        )

    def to_dict(self):
        return {
            "currentPreset": self.current_preset,
            "customColors": dict(self.custom_colors),
            "isDarkMode": self.is_dark_mode,
        }
