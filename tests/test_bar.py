from datetime import timedelta

import pytest

from stakeholder.exceptions import InvalidTemplateField
from stakeholder.progress import BarStatus, ProgressBar, ProgressConfig


@pytest.fixture
def make_bar(terminal, clock):
    def factory(max_value=10, template="{pos}/{len}", **config):
        return ProgressBar(
            max_value,
            template,
            terminal=terminal,
            config=ProgressConfig(**config),
            clock=clock,
        )
    return factory


def test_template_parsed_lazily(make_bar):
    bar = make_bar(template="{nope}")
    assert bar.status is BarStatus.CREATED

    with pytest.raises(InvalidTemplateField):
        bar.render()


def test_invalid_template_draws_nothing(make_bar, terminal):
    bar = make_bar(template="{pos} {percent}")

    with pytest.raises(InvalidTemplateField):
        bar.set_position(0)

    assert terminal.segments == []
    assert terminal.cursor_visible


def test_set_position_shows_item_done(make_bar, terminal):
    bar = make_bar()
    bar.set_position(4)

    assert bar.value == 5
    assert bar.status is BarStatus.ACTIVE
    assert terminal.current_line == "5/10"
    assert terminal.column == 0


def test_reaching_max_finishes(make_bar, terminal):
    bar = make_bar(max_value=5)
    for i in range(5):
        bar.set_position(i)

    assert bar.is_finished
    assert terminal.cursor_visible
    assert terminal.current_line.strip() == ""


def test_position_past_max_is_clamped(make_bar):
    bar = make_bar(max_value=3)
    bar.set_position(10)

    assert bar.value == 3
    assert bar.is_finished


def test_cursor_hidden_while_active(make_bar, terminal):
    bar = make_bar()
    bar.set_position(0)
    assert not terminal.cursor_visible

    bar.finish()
    assert terminal.cursor_visible


def test_cursor_untouched_when_not_hiding(make_bar, terminal):
    bar = make_bar(hide_cursor=False)
    bar.set_position(0)
    assert terminal.cursor_visible


def test_write_line_leaves_no_residue(make_bar, terminal):
    bar = make_bar(template="[{bar:20.green/blue}] {pos}/{len}")
    bar.set_position(3)
    width = bar.state.max_rendered_width

    bar.write_line("ok")

    assert terminal.plain_lines() == ["ok"]
    assert len(terminal.lines[-1]) >= width
    assert terminal.column == 0


def test_bar_redraws_below_written_line(make_bar, terminal):
    bar = make_bar()
    bar.set_position(1)
    bar.write_line("hello")
    bar.set_position(2)

    assert terminal.plain_lines() == ["hello"]
    assert terminal.current_line == "3/10"


def test_finish_is_idempotent(make_bar, terminal):
    bar = make_bar()
    bar.set_position(0)
    bar.finish()
    drawn = list(terminal.segments)

    bar.finish()
    bar.finish_and_clear()

    assert terminal.segments == drawn
    assert bar.is_finished


def test_set_position_ignored_after_finish(make_bar, terminal):
    bar = make_bar()
    bar.set_position(0)
    bar.finish()
    drawn = list(terminal.segments)

    bar.set_position(5)

    assert bar.value == 1
    assert terminal.segments == drawn


def test_context_manager_finishes(make_bar, terminal):
    with make_bar() as bar:
        bar.set_position(2)
        assert not bar.is_finished

    assert bar.is_finished
    assert terminal.cursor_visible


def test_context_manager_finishes_on_error(make_bar, terminal):
    with pytest.raises(RuntimeError):
        with make_bar() as bar:
            bar.set_position(2)
            raise RuntimeError("boom")

    assert bar.is_finished
    assert terminal.cursor_visible


def test_eta_zero_after_first_item_then_finishes(make_bar, terminal, clock):
    bar = make_bar(max_value=5, template="{eta}")

    bar.set_position(0)

    assert bar.value == 1
    assert bar.state.eta() == timedelta(0)
    assert terminal.current_line == "00:00:00"

    clock.advance(3)
    bar.set_position(4)
    assert bar.is_finished
