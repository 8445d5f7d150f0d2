"""Theme repository helpers (file persistence of the user's theme)."""

import json
import logging
from pathlib import Path
from typing import Union

from lesson.domain.Theme import UserTheme
from lesson.infra.paths import THEME_FILE

logger = logging.getLogger(__name__)


def reading_theme(path: Union[str, Path, None] = None) -> UserTheme:
    """Load the saved theme; defaults when the file is missing or unreadable."""
    path = Path(path) if path else THEME_FILE
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return UserTheme.from_dict(json.load(f))
    except FileNotFoundError:
        return UserTheme()
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in theme file {path}: {e}")
        return UserTheme()


def saving_theme(theme: UserTheme, path: Union[str, Path, None] = None):
    path = Path(path) if path else THEME_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(theme.to_dict(), f, ensure_ascii=False, indent=2)
