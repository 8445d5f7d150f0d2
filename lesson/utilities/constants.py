from typing import Final

WEEKDAYS: Final[tuple[str, ...]] = ("monday", "tuesday", "wednesday", "thursday", "friday")

# Tailwind-ish color names; index chosen from the subject name
COLOR_PALETTE: Final[tuple[str, ...]] = (
    "indigo", "sky", "emerald", "amber", "rose", "violet", "teal", "orange",
)

COMMON_SUBJECTS: Final[tuple[str, ...]] = (
    "Bible & Pray",
    "Mathematics",
    "English",
    "Filipino",
    "Science",
    "AP (Geography)",
    "English Literature",
    "English Communication",
    "Filipino Reading",
    "Mental Math",
    "Physical Education",
    "Music and Arts",
    "Health",
    "Character Education",
    "Nature Study",
    "Art Appreciation",
    "Poetry Memory Work",
    "Bible Memory Work",
    "Leisure Reading",
    "Sketching / Drawing",
)

COMMON_TIMES: Final[tuple[str, ...]] = (
    "08:30", "08:50", "09:20", "09:25", "09:40", "09:55",
    "10:15", "10:25", "10:40", "10:55", "11:10", "11:40",
    "13:00", "13:10", "13:20", "13:30", "13:35",
)

CSV_HEADERS: Final[tuple[str, ...]] = ("time",) + WEEKDAYS
