from unittest.mock import AsyncMock, Mock

import disnake
import pytest

from ui.errors import OutOfRange
from ui.paged import ArrayPageProvider, ListPageProvider, PagedMenu, PageContext

pytestmark = pytest.mark.asyncio

OWNER_ID = 111111111111111112


def make_interaction(user_id=OWNER_ID, done=False):
    interaction = Mock()
    interaction.user.id = user_id
    interaction.response.is_done = Mock(return_value=done)
    interaction.response.edit_message = AsyncMock()
    interaction.response.send_message = AsyncMock()
    interaction.edit_original_message = AsyncMock()
    return interaction


@pytest.fixture
def owner():
    user = Mock()
    user.id = OWNER_ID
    return user


@pytest.fixture
def provider():
    return ArrayPageProvider([f"Item {i}" for i in range(25)], items_per_page=10)


async def test_initial_state(owner, provider):
    menu = PagedMenu(owner, provider)
    assert menu.current_page_index == 0
    assert menu.page_context == PageContext(0, 3)
    assert menu.first_page.disabled
    assert menu.previous_page.disabled
    assert not menu.next_page.disabled
    assert not menu.last_page.disabled


async def test_bad_start_index(owner, provider):
    with pytest.raises(OutOfRange):
        PagedMenu(owner, provider, start_index=3)
    with pytest.raises(OutOfRange):
        PagedMenu(owner, provider, start_index=-1)


async def test_navigation(owner, provider):
    menu = PagedMenu(owner, provider)
    interaction = make_interaction()

    await menu.go_to_page(2, interaction)
    assert menu.current_page_index == 2
    assert menu.next_page.disabled
    assert menu.last_page.disabled
    assert not menu.previous_page.disabled

    kwargs = interaction.response.edit_message.call_args.kwargs
    assert kwargs["view"] is menu
    assert kwargs["embed"].footer.text == "Page 3/3"
    assert kwargs["embed"].description.startswith("21. Item 20")


async def test_navigation_after_response(owner, provider):
    menu = PagedMenu(owner, provider)
    interaction = make_interaction(done=True)

    await menu.go_to_page(1, interaction)
    interaction.edit_original_message.assert_awaited_once()
    interaction.response.edit_message.assert_not_awaited()


async def test_out_of_range_navigation_is_ignored(owner, provider):
    menu = PagedMenu(owner, provider, start_index=2)
    interaction = make_interaction()

    await menu.go_to_page(3, interaction)
    await menu.go_to_page(-1, interaction)
    assert menu.current_page_index == 2
    interaction.response.edit_message.assert_not_awaited()


async def test_buttons(owner, provider):
    menu = PagedMenu(owner, provider)
    interaction = make_interaction()

    await menu.next_page.callback(interaction)
    assert menu.current_page_index == 1
    await menu.last_page.callback(interaction)
    assert menu.current_page_index == 2
    await menu.previous_page.callback(interaction)
    assert menu.current_page_index == 1
    await menu.first_page.callback(interaction)
    assert menu.current_page_index == 0


async def test_stop(owner, provider):
    menu = PagedMenu(owner, provider)
    interaction = make_interaction()

    await menu.stop_menu.callback(interaction)
    assert menu.is_finished()
    interaction.response.edit_message.assert_awaited_once_with(view=None)


async def test_interaction_check(owner, provider):
    menu = PagedMenu(owner, provider)

    assert await menu.interaction_check(make_interaction())

    stranger = make_interaction(user_id=OWNER_ID + 1)
    assert not await menu.interaction_check(stranger)
    stranger.response.send_message.assert_awaited_once()
    assert "belongs to someone else" in stranger.response.send_message.call_args.args[0]
    assert stranger.response.send_message.call_args.kwargs["ephemeral"]


async def test_send_to(owner, provider):
    menu = PagedMenu(owner, provider)
    destination = Mock()
    destination.send = AsyncMock(return_value="message")

    message = await menu.send_to(destination)
    assert message == "message"
    assert menu.message == "message"
    kwargs = destination.send.call_args.kwargs
    assert kwargs["view"] is menu
    assert kwargs["content"] is None
    assert kwargs["embed"].footer.text == "Page 1/3"
    assert menu.next_page in menu.children


async def test_single_page_has_no_navigation(owner):
    menu = PagedMenu(owner, ListPageProvider(["only page"]))
    destination = Mock()
    destination.send = AsyncMock()

    await menu.send_to(destination)
    assert destination.send.call_args.kwargs["content"] == "only page"
    assert menu.children == [menu.stop_menu]


async def test_timeout_removes_view(owner, provider):
    menu = PagedMenu(owner, provider)
    await menu.on_timeout()  # never sent, nothing to edit

    menu.message = Mock()
    menu.message.edit = AsyncMock(side_effect=disnake.HTTPException(Mock(status=404, reason="Not Found"), "gone"))
    await menu.on_timeout()
    menu.message.edit.assert_awaited_once_with(view=None)
