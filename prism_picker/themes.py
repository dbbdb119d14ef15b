"""
PRISM — Bundled Themes
Extra Textual themes registered at startup so more catalog entries load.
"""

from textual.theme import Theme

# Shown while no catalog theme is active; listed in no catalog
BASE_THEME = "prism-base"

BUNDLED_THEMES: list[Theme] = [
    Theme(
        name=BASE_THEME,
        primary="#8a8a8a",
        secondary="#6e6e6e",
        accent="#a8a8a8",
        foreground="#d0d0d0",
        background="#202020",
        surface="#2a2a2a",
        panel="#333333",
        success="#8fa88f",
        warning="#b8a878",
        error="#b87878",
        dark=True,
    ),
    # Tokyo Night variant with the Nebula accent set
    Theme(
        name="nebula",
        primary="#7aa2f7",
        secondary="#bb9af7",
        accent="#7dcfff",
        foreground="#c0caf5",
        background="#1a1b26",
        surface="#24283b",
        panel="#1f2335",
        success="#9ece6a",
        warning="#e0af68",
        error="#f7768e",
        dark=True,
        variables={
            "text-muted": "#565f89",
            "border": "#3b4261",
        },
    ),
    # Low-contrast Zenburn palette
    Theme(
        name="zenburn",
        primary="#8CD0D3",
        secondary="#94BFF3",
        warning="#E3CEAB",
        error="#CC9393",
        success="#7F9F7F",
        accent="#DC8CC3",
        foreground="#DCDCCC",
        background="#3F3F3F",
        surface="#2B2B2B",
        panel="#242424",
        dark=True,
        variables={
            "input-selection-background": "#5F5F5F 40%",
        },
    ),
    Theme(
        name="midnight-ember",
        primary="#ff9e64",
        secondary="#e06c75",
        accent="#ffd580",
        foreground="#e6e1dc",
        background="#0f0d0c",
        surface="#1c1816",
        panel="#262120",
        success="#98c379",
        warning="#e5c07b",
        error="#ff5f56",
        dark=True,
    ),
    Theme(
        name="paper",
        primary="#3b5bdb",
        secondary="#7048e8",
        accent="#d9480f",
        foreground="#212529",
        background="#fdfcf8",
        surface="#f3f1ea",
        panel="#e9e6dc",
        success="#2b8a3e",
        warning="#e67700",
        error="#c92a2a",
        dark=False,
    ),
    Theme(
        name="high-contrast",
        primary="#ffff00",
        secondary="#00ffff",
        accent="#ff00ff",
        foreground="#ffffff",
        background="#000000",
        surface="#000000",
        panel="#1a1a1a",
        success="#00ff00",
        warning="#ffaa00",
        error="#ff0000",
        dark=True,
        variables={
            "border": "#ffffff",
            "block-cursor-text-style": "bold reverse",
        },
    ),
    Theme(
        name="phosphor",
        primary="#33ff33",
        secondary="#22bb22",
        accent="#99ff99",
        foreground="#33ff33",
        background="#001100",
        surface="#002200",
        panel="#003300",
        success="#66ff66",
        warning="#ccff33",
        error="#ff3333",
        dark=True,
    ),
    Theme(
        name="sepia",
        primary="#8b5a2b",
        secondary="#a0522d",
        accent="#b8860b",
        foreground="#3e2f1c",
        background="#f4ecd8",
        surface="#eadfc4",
        panel="#dfd2b0",
        success="#556b2f",
        warning="#cd853f",
        error="#a52a2a",
        dark=False,
    ),
]
