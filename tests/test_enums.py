import pytest

from rustlings.lessons.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), quit_requested=False)
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(x=10, y=15))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit_requested is True
    assert capsys.readouterr().out == "hello world\n"


def test_default_state():
    state = State()
    assert state.color == (0, 0, 0)
    assert state.position == Point(0, 0)
    assert state.quit_requested is False


def test_move_replaces_position():
    state = State()
    state.process(Move(x=10, y=30))
    state.process(Move(x=10, y=15))
    assert state.position == Point(10, 15)


def test_messages_compare_by_value():
    assert ChangeColor(200, 255, 255) == ChangeColor(200, 255, 255)
    assert Echo("hello world") != Echo("goodbye")
    assert Quit() == Quit()


def test_unknown_message_is_rejected():
    state = State()
    with pytest.raises(TypeError):
        state.process("Quit")
    assert state.quit_requested is False