# ui/components.py
from __future__ import annotations

from typing import Optional

from kivy.clock import Clock
from kivy.core.window import Window
from kivy.logger import Logger
from kivy.metrics import dp
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.utils import platform

from models.dessert import DessertUiState
from services.config import Config
from services.share import share_sold_desserts
from services.state import ClickerState

# ---------------------------------------------------------------------------
# KivyMD detection + fallbacks
# ---------------------------------------------------------------------------
HAS_MD = False
try:
    from kivymd.uix.boxlayout import MDBoxLayout
    from kivymd.uix.button import MDRaisedButton
    from kivymd.uix.label import MDLabel as _MDLabel
    from kivymd.uix.screen import MDScreen
    from kivymd.toast import toast as _md_toast
    HAS_MD = True
except ImportError:
    # Plain Kivy widgets so the app still runs without KivyMD installed
    MDBoxLayout = BoxLayout      # type: ignore
    MDRaisedButton = Button      # type: ignore
    _MDLabel = Label             # type: ignore
    MDScreen = Screen            # type: ignore
    _md_toast = None             # type: ignore

MDLabel = _MDLabel


# ---------------------------------------------------------------------------
# Notices
# ---------------------------------------------------------------------------
def show_toast(msg: str) -> None:
    """Show a transient message (KivyMD toast, or a window-title flash)."""
    if _md_toast is not None:
        _md_toast(msg)
        return
    old = Window.title
    Window.title = msg
    Clock.schedule_once(lambda *_: setattr(Window, "title", old), Config.TOAST_SECONDS)


# ---------------------------------------------------------------------------
# Share target
# ---------------------------------------------------------------------------
class KivyShareTarget:
    """
    ShareTarget backed by the Android share sheet.

    Off Android there is no share handler, so present_share_chooser()
    reports False and the caller falls back to a notice.
    """

    def present_share_chooser(self, text: str) -> bool:
        if platform != "android":
            return False
        # pyjnius ships inside the python-for-android build only
        from jnius import JavaException, autoclass, cast

        try:
            Intent = autoclass("android.content.Intent")
            JString = autoclass("java.lang.String")
            PythonActivity = autoclass("org.kivy.android.PythonActivity")

            send = Intent()
            send.setAction(Intent.ACTION_SEND)
            send.putExtra(Intent.EXTRA_TEXT, cast("java.lang.CharSequence", JString(text)))
            send.setType(Config.SHARE_MIME_TYPE)
            PythonActivity.mActivity.startActivity(Intent.createChooser(send, None))
            return True
        except JavaException as e:
            # ActivityNotFoundException and friends
            Logger.warning(f"Share: chooser failed: {e}")
            return False

    def show_notice(self, message: str) -> None:
        show_toast(message)


# ---------------------------------------------------------------------------
# Screens
# ---------------------------------------------------------------------------
class DessertScreen(MDScreen):
    """
    Single clicker screen: the dessert button, sales counters, and a share
    button. Redraws from each state snapshot published by the holder.
    """

    def __init__(self, holder: ClickerState, share_target: Optional[KivyShareTarget] = None,
                 **kwargs) -> None:
        super().__init__(**kwargs)
        self.holder = holder
        self.share_target = share_target or KivyShareTarget()

        col = MDBoxLayout(orientation="vertical", padding=dp(16), spacing=dp(12))
        self.dessert_btn = Button(text="", font_size="28sp")
        self.dessert_btn.bind(on_release=lambda *_: self.on_dessert_click())
        self.price_label = MDLabel(text="", halign="center", size_hint_y=None, height=dp(28))
        self.sold_label = MDLabel(text="", halign="center", size_hint_y=None, height=dp(28))
        self.revenue_label = MDLabel(text="", halign="center", size_hint_y=None, height=dp(28))
        share_btn = MDRaisedButton(text="Share", size_hint=(1, None), height=dp(48))
        share_btn.bind(on_release=lambda *_: self.on_share())

        col.add_widget(self.dessert_btn)
        col.add_widget(self.price_label)
        col.add_widget(self.sold_label)
        col.add_widget(self.revenue_label)
        col.add_widget(share_btn)
        self.add_widget(col)

        self.render(holder.snapshot())

    def render(self, state: DessertUiState) -> None:
        dessert = state.current_dessert
        self.dessert_btn.text = dessert.name
        self.price_label.text = f"${dessert.price} each"
        self.sold_label.text = f"Desserts sold: {state.desserts_sold}"
        self.revenue_label.text = f"Total revenue: ${state.revenue}"

    def on_dessert_click(self) -> None:
        self.holder.on_dessert_clicked()

    def on_share(self) -> None:
        share_sold_desserts(self.holder.snapshot(), self.share_target)
