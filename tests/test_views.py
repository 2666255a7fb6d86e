"""Tests for voidstats/views.py - the mode select menu."""

from unittest.mock import AsyncMock, MagicMock, PropertyMock, patch

import discord
import pytest

from voidstats.states import LookupState
from voidstats.stats import MODES
from voidstats.views import ModeSelectView, build_mode_options


class TestBuildModeOptions:
    def test_one_option_per_mode_in_order(self):
        options = build_mode_options()

        assert [o.value for o in options] == list(MODES)
        assert [o.label for o in options] == list(MODES.values())

    def test_overall_is_default(self):
        defaults = [o.value for o in build_mode_options() if o.default]

        assert defaults == ["overall"]

    def test_selected_mode_is_default(self):
        defaults = [o.value for o in build_mode_options("rush") if o.default]

        assert defaults == ["rush"]

    def test_unknown_mode_marks_nothing(self):
        assert not any(o.default for o in build_mode_options("armed"))


@pytest.mark.asyncio
async def test_view_holds_single_select():
    view = ModeSelectView(MagicMock(), "Foo")

    assert view.children == [view.mode_select]
    assert view.mode_select.custom_id == "mode_select"
    assert view.mode_select.placeholder == "Select Mode"
    assert view.state is LookupState.INTERACTIVE


@pytest.mark.asyncio
async def test_set_selected_moves_default():
    view = ModeSelectView(MagicMock(), "Foo")

    view.set_selected("lucky")

    assert view.selected == "lucky"
    assert [o.value for o in view.mode_select.options if o.default] == ["lucky"]


@pytest.mark.asyncio
async def test_select_callback_delegates_to_controller():
    controller = MagicMock()
    controller.handle_select = AsyncMock()
    view = ModeSelectView(controller, "Foo")
    interaction = MagicMock()

    with patch.object(
        type(view.mode_select), "values", new_callable=PropertyMock, return_value=["castle"]
    ):
        await view.on_select(interaction)

    controller.handle_select.assert_awaited_once_with(interaction, view, "castle")


@pytest.mark.asyncio
async def test_timeout_strips_menu():
    view = ModeSelectView(MagicMock(), "Foo")
    view.message = MagicMock()
    view.message.edit = AsyncMock()

    await view.on_timeout()

    assert view.children == []
    assert view.state is LookupState.EXPIRED
    view.message.edit.assert_awaited_once_with(view=view)


@pytest.mark.asyncio
async def test_timeout_ignores_deleted_message():
    view = ModeSelectView(MagicMock(), "Foo")
    view.message = MagicMock()
    view.message.edit = AsyncMock(
        side_effect=discord.NotFound(MagicMock(status=404, reason="Not Found"), "Unknown Message")
    )

    await view.on_timeout()

    assert view.state is LookupState.EXPIRED


@pytest.mark.asyncio
async def test_timeout_without_message():
    view = ModeSelectView(MagicMock(), "Foo")

    await view.on_timeout()

    assert view.state is LookupState.EXPIRED
