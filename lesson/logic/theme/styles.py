"""Theme presets and CSS variable computation.

Pure functions only: ``style_declarations(theme)`` returns what the page has
to apply, the template does the applying.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from lesson.domain.Theme import UserTheme

__all__ = ["THEME_PRESETS", "DARK_MODE_COLORS", "get_preset", "effective_colors",
           "background_gradient", "style_declarations"]

THEME_PRESETS: List[Dict[str, Any]] = [
    {
        "id": "indigo-purple", "name": "Indigo Purple", "description": "Professional and modern",
        "colors": {"primary": "#6366f1", "secondary": "#8b5cf6", "accent": "#ec4899", "background": "#f1f5f9",
                   "surface": "#ffffff", "text": "#1e293b", "textSecondary": "#64748b"},
    },
    {
        "id": "ocean-blue", "name": "Ocean Blue", "description": "Calm and serene",
        "colors": {"primary": "#0ea5e9", "secondary": "#06b6d4", "accent": "#0891b2", "background": "#f0f9ff",
                   "surface": "#ffffff", "text": "#0c4a6e", "textSecondary": "#0369a1"},
    },
    {
        "id": "emerald-green", "name": "Emerald Green", "description": "Fresh and natural",
        "colors": {"primary": "#10b981", "secondary": "#059669", "accent": "#047857", "background": "#f0fdf4",
                   "surface": "#ffffff", "text": "#064e3b", "textSecondary": "#065f46"},
    },
    {
        "id": "sunset-orange", "name": "Sunset Orange", "description": "Warm and energetic",
        "colors": {"primary": "#f97316", "secondary": "#ea580c", "accent": "#dc2626", "background": "#fff7ed",
                   "surface": "#ffffff", "text": "#7c2d12", "textSecondary": "#9a3412"},
    },
    {
        "id": "rose-pink", "name": "Rose Pink", "description": "Elegant and feminine",
        "colors": {"primary": "#f43f5e", "secondary": "#e11d48", "accent": "#be185d", "background": "#fdf2f8",
                   "surface": "#ffffff", "text": "#831843", "textSecondary": "#9d174d"},
    },
    {
        "id": "slate-gray", "name": "Slate Gray", "description": "Minimal and clean",
        "colors": {"primary": "#64748b", "secondary": "#475569", "accent": "#334155", "background": "#f8fafc",
                   "surface": "#ffffff", "text": "#1e293b", "textSecondary": "#475569"},
    },
]

DARK_MODE_COLORS: Dict[str, str] = {
    "background": "#0f172a",
    "surface": "#1e293b",
    "text": "#f1f5f9",
    "textSecondary": "#cbd5e1",
}

_FALLBACK_GRADIENT = "linear-gradient(135deg, #f1f5f9 0%, #e2e8f0 25%, #cbd5e1 50%, #94a3b8 75%, #64748b 100%)"


def get_preset(preset_id: str) -> Optional[Dict[str, Any]]:
    return next((p for p in THEME_PRESETS if p["id"] == preset_id), None)


def effective_colors(theme: UserTheme) -> Dict[str, str]:
    """Preset colors, then custom overrides, then dark mode overrides."""
    preset = get_preset(theme.current_preset) or THEME_PRESETS[0]
    colors = dict(preset["colors"])
    colors.update({k: v for k, v in theme.custom_colors.items() if k in colors})
    if theme.is_dark_mode:
        colors.update(DARK_MODE_COLORS)
    return colors


def background_gradient(background_color: str) -> str:
    background_color = background_color or ''
    hex_value = background_color.lstrip('#')
    if not background_color.startswith('#') or len(hex_value) != 6:
        return _FALLBACK_GRADIENT
    try:
        r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return _FALLBACK_GRADIENT
    lighter = f"rgb({min(255, r + 20)}, {min(255, g + 20)}, {min(255, b + 20)})"
    darker = f"rgb({max(0, r - 20)}, {max(0, g - 20)}, {max(0, b - 20)})"
    return (f"linear-gradient(135deg, {lighter} 0%, {background_color} 25%, {darker} 50%, "
            f"{background_color} 75%, {darker} 100%)")


def style_declarations(theme: UserTheme) -> Dict[str, Any]:
    colors = effective_colors(theme)
    variables = {f"--color-{key}": value for key, value in colors.items()}
    variables["--background-gradient"] = background_gradient(colors["background"])
    return {"variables": variables, "body_class": "dark" if theme.is_dark_mode else ""}
