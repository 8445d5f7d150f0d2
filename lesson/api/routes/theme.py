import logging

from fastapi import APIRouter

from lesson.domain.Theme import UserTheme
from lesson.infra.Theme_Repository import reading_theme, saving_theme
from lesson.infra.paths import THEME_FILE
from lesson.logic.theme.styles import THEME_PRESETS, get_preset, style_declarations
from lesson.utilities.validators import ThemeInput

router = APIRouter(prefix="/api/theme")
logger = logging.getLogger(__name__)


def load_theme() -> UserTheme:
    return reading_theme(THEME_FILE)


@router.get("")
def get_theme():
    return load_theme().to_dict()


@router.put("")
def update_theme(payload: ThemeInput):
    theme = UserTheme.from_dict(payload.model_dump())
    if get_preset(theme.current_preset) is None:
        logger.warning("Unknown theme preset %s; first preset will be used for colors", theme.current_preset)
    saving_theme(theme, THEME_FILE)
    return theme.to_dict()


@router.get("/presets")
def list_presets():
    return THEME_PRESETS


@router.get("/styles")
def get_styles():
    return style_declarations(load_theme())
