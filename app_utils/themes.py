# app_utils/themes.py

THEMES = {
    "dark": {
        "emoji": "🕶️",
        "name": "Dark",
        "background": "#242424",
        "title": "#FFFFFF",
        "subtitle": "#AAAAAA",
    },
    "light": {
        "emoji": "💡",
        "name": "Light",
        "background": "#FFFFFF",
        "title": "#000000",
        "subtitle": "#808080",
    },
}

CELL_COLORS = {
    "countdown": "#FF4500",
    "habit": "#4CD964",
    "empty": "#E5E5EA",
}

DEFAULT_THEME = "light"


def get_theme(theme_name: str):
    return THEMES.get(theme_name, THEMES[DEFAULT_THEME])


def theme_option(theme_name: str) -> str:
    t = THEMES[theme_name]
    return f"{t['emoji']} {t['name']}"


def cell_color(kind: str, filled: bool) -> str:
    return CELL_COLORS[kind] if filled else CELL_COLORS["empty"]
