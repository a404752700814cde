"""
Share the sales summary through whatever the platform offers.

The platform side is a ShareTarget: it presents a "send text" chooser and
shows transient notices. When it reports that nothing can handle the share,
a notice is shown instead and the caller carries on.
"""

from __future__ import annotations

import logging
from typing import Protocol

from models.dessert import DessertUiState
from services.config import Config

logger = logging.getLogger(__name__)


class ShareTarget(Protocol):
    def present_share_chooser(self, text: str) -> bool:
        """Show a chooser for sending text; False if no handler exists."""
        ...

    def show_notice(self, message: str) -> None:
        """Show a short-lived message to the user."""
        ...


def compose_share_text(desserts_sold: int, revenue: int) -> str:
    """
    Fill the share template with both counters.

    Examples:
        >>> compose_share_text(6, 35)
        'Nom nom nom! I have clicked 6 desserts, for a total of $35 #AndroidDessertClicker'
    """
    return Config.SHARE_TEXT.format(sold=desserts_sold, revenue=revenue)


def dispatch_share(text: str, target: ShareTarget) -> bool:
    """
    Ask the target to present a share chooser for text.

    Returns:
        bool: True if a chooser was presented; False if sharing is not
        available, in which case a notice has been shown instead.
    """
    if target.present_share_chooser(text):
        return True
    logger.warning("No share handler available")
    target.show_notice(Config.SHARING_NOT_AVAILABLE)
    return False


def share_sold_desserts(state: DessertUiState, target: ShareTarget) -> bool:
    """Share the sold count and revenue of a state snapshot."""
    return dispatch_share(compose_share_text(state.desserts_sold, state.revenue), target)
