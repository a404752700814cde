# main.py
from __future__ import annotations

from kivy.core.window import Window
from kivy.logger import Logger
from kivy.uix.screenmanager import ScreenManager
from kivy.utils import platform

# Prefer KivyMD; fallback to Kivy App
HAS_MD = True
try:
    from kivymd.app import MDApp as _BaseApp
except ImportError:
    from kivy.app import App as _BaseApp  # type: ignore[assignment]
    HAS_MD = False

from models.dessert import DessertUiState
from services.catalog import resolve_catalog
from services.config import Config
from services.state import ClickerState
from ui.components import DessertScreen, KivyShareTarget


class DessertClickerApp(_BaseApp):
    title = Config.APP_TITLE

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.state = ClickerState.instance(resolve_catalog())
        self.screen: DessertScreen | None = None

    # ---------- App lifecycle ----------
    def build(self):
        if HAS_MD:
            self.theme_cls.theme_style = "Light"  # type: ignore[attr-defined]
            self.theme_cls.primary_palette = "Pink"  # type: ignore[attr-defined]
        if platform not in ("android", "ios"):
            Window.size = Config.DESKTOP_WINDOW_SIZE

        sm = ScreenManager()
        self.screen = DessertScreen(self.state, KivyShareTarget(), name="dessert")
        sm.add_widget(self.screen)
        self._wire_observer()
        Logger.info(f"DessertClicker: {len(self.state.catalog)} desserts in catalog")
        return sm

    # ---------- Observer ----------
    def _wire_observer(self) -> None:
        def _obs(state: DessertUiState) -> None:
            if self.screen:
                self.screen.render(state)
        self.state.subscribe(_obs)


def main() -> None:
    DessertClickerApp().run()


if __name__ == "__main__":
    main()
