"""Tests for composing and dispatching the share text."""

import logging

from models.dessert import Dessert, DessertUiState
from services.config import Config
from services.share import compose_share_text, dispatch_share, share_sold_desserts


def test_compose_share_text_fills_both_values():
    assert compose_share_text(6, 35) == (
        "Nom nom nom! I have clicked 6 desserts, for a total of $35 #AndroidDessertClicker"
    )


def test_compose_share_text_uses_template():
    assert compose_share_text(0, 0) == Config.SHARE_TEXT.format(sold=0, revenue=0)


def test_dispatch_share_presents_chooser(share_target):
    assert dispatch_share("hello", share_target) is True
    assert share_target.shared == ["hello"]
    assert share_target.notices == []


def test_dispatch_share_without_handler_shows_notice(unavailable_share_target, caplog):
    with caplog.at_level(logging.WARNING, logger="services.share"):
        result = dispatch_share("hello", unavailable_share_target)

    assert result is False
    assert unavailable_share_target.notices == [Config.SHARING_NOT_AVAILABLE]
    assert "No share handler" in caplog.text


def test_share_sold_desserts_uses_snapshot_counters(share_target):
    state = DessertUiState(revenue=35, desserts_sold=6, current_dessert=Dessert("Donut", 10, 5))

    assert share_sold_desserts(state, share_target) is True
    assert share_target.shared == [compose_share_text(6, 35)]


def test_share_after_clicks(holder, share_target):
    for _ in range(6):
        holder.on_dessert_clicked()

    share_sold_desserts(holder.snapshot(), share_target)

    assert "6 desserts" in share_target.shared[0]
    assert "$35" in share_target.shared[0]
