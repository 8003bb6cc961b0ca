import pytest

from wndframe.keycodes import Key, MouseButton


def test_documented_values():
    assert Key(32) is Key.SPACE
    assert Key(257) is Key.ENTER
    assert Key(87) is Key.W
    assert Key(348) is Key.MENU


@pytest.mark.parametrize("letter", [chr(c) for c in range(ord("A"), ord("Z") + 1)])
def test_letters_match_ascii(letter):
    assert Key(ord(letter)).name == letter


@pytest.mark.parametrize("digit", range(10))
def test_digits_match_ascii(digit):
    assert Key(ord(str(digit))).name == f"DIGIT_{digit}"


def test_function_keys_are_consecutive():
    names = [Key(290 + i).name for i in range(25)]
    assert names == [f"F{n}" for n in range(1, 26)]


def test_keypad_digits_are_consecutive():
    names = [Key(320 + i).name for i in range(10)]
    assert names == [f"KP_{n}" for n in range(10)]


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST
    assert MouseButton.LAST is MouseButton.BUTTON_8