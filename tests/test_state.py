"""Tests for committing internal state through dispatch."""

from unittest.mock import MagicMock

from textual_toggle import StateChanged, ToggleState, use_toggle


class TestCommit:
    """Tests for what an uncontrolled commit notifies."""

    def test_posts_state_changed(self):
        widget = MagicMock()
        handle = use_toggle(widget)

        handle.toggle()

        widget.post_message.assert_called_once()
        message = widget.post_message.call_args.args[0]
        assert isinstance(message, StateChanged)
        assert message.old_value == ToggleState(on=False)
        assert message.new_value == ToggleState(on=True)
        assert message.toggle is handle

    def test_watchers_run_in_order(self):
        calls = []
        handle = use_toggle(MagicMock())
        handle.watch(lambda old, new: calls.append(("first", new.on)))
        handle.watch(lambda old, new: calls.append(("second", new.on)))

        handle.toggle()

        assert calls == [("first", True), ("second", True)]

    def test_no_notification_if_same_state(self):
        changes = []
        widget = MagicMock()
        handle = use_toggle(widget, initial_on=True)
        handle.watch(lambda old, new: changes.append((old, new)))

        handle.reset()  # Equal state, nothing committed
        assert changes == []
        widget.post_message.assert_not_called()

        handle.toggle()
        assert changes == [(ToggleState(on=True), ToggleState(on=False))]

    def test_watchers_see_committed_state(self):
        seen = []
        handle = use_toggle(MagicMock())
        handle.watch(lambda old, new: seen.append(handle.state))

        handle.toggle()

        assert seen == [ToggleState(on=True)]

    def test_controlled_dispatch_commits_nothing(self):
        changes = []
        widget = MagicMock()
        handle = use_toggle(widget, on=True, on_change=MagicMock())
        handle.watch(lambda old, new: changes.append(new))

        handle.toggle()
        handle.reset()

        assert changes == []
        widget.post_message.assert_not_called()

    def test_repr(self):
        handle = use_toggle(MagicMock(), initial_on=True, name="power")

        assert "True" in repr(handle)
        assert "power" in repr(handle)
        assert "uncontrolled" in repr(handle)
