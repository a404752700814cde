"""
Configuration constants for the dessert clicker.

Share text, notices, and a few UI values live here so the rest of the code
imports them instead of repeating literals. Pure Python, dependency-free.
"""

from typing import Final, Tuple


class Config:
    """Namespace container for app constants. Not meant to be instantiated."""

    # Share text ({sold} and {revenue} are substituted)
    SHARE_TEXT: Final[str] = (
        "Nom nom nom! I have clicked {sold} desserts, "
        "for a total of ${revenue} #AndroidDessertClicker"
    )
    SHARE_MIME_TYPE: Final[str] = "text/plain"
    SHARING_NOT_AVAILABLE: Final[str] = "Sharing Not Available"

    # Catalog source override (path to a JSON list of desserts)
    CATALOG_ENV_VAR: Final[str] = "DESSERT_CLICKER_CATALOG"

    # UI
    APP_TITLE: Final[str] = "Dessert Clicker"
    DESKTOP_WINDOW_SIZE: Final[Tuple[int, int]] = (420, 780)
    TOAST_SECONDS: Final[float] = 2.5   # fallback notice duration

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is not instantiable")
