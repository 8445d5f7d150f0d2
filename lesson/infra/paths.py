from lesson.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
SUBJECTS_FILE = DATA_DIR / 'subjects.json'
THEME_FILE = DATA_DIR / 'theme.json'
# Client-side copy used by the gateway when the remote API is unreachable
LOCAL_SUBJECTS_FILE = DATA_DIR / 'local_subjects.json'

__all__ = ['DATA_DIR', 'SUBJECTS_FILE', 'THEME_FILE', 'LOCAL_SUBJECTS_FILE']
