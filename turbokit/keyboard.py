"""Keyboard state: which keys are held, which went down this frame, and typed text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from turbokit.keycodes import KeyCode

KeyLike = Union[KeyCode, str]


def _key(value: KeyLike) -> KeyCode:
    if isinstance(value, KeyCode):
        return value
    if isinstance(value, str):
        try:
            return KeyCode(value)
        except ValueError:
            raise ValueError(f"unknown key code {value!r}") from None
    raise TypeError(f"expected a KeyCode or key name, got {type(value).__name__}")


def _ordered_keys(values: Iterable[KeyLike]) -> tuple[KeyCode, ...]:
    return tuple(dict.fromkeys(_key(value) for value in values))


def text_for(keys: Iterable[KeyLike], shift: bool) -> str:
    """The text typed by pressing ``keys`` in order, skipping keys that type nothing."""
    return "".join(
        char for char in (_key(key).as_char(shift) for key in keys) if char is not None
    )


class Keyboard:
    """A snapshot of the keyboard for one frame.

    ``pressed`` holds the keys that are down; ``just_pressed`` holds the keys
    that went down this frame, in the order they went down. A key that was
    just pressed also counts as pressed. Keys may be given as :class:`KeyCode`
    members or by their names, such as ``"KeyA"``.
    """

    def __init__(
        self,
        pressed: Iterable[KeyLike] = (),
        just_pressed: Iterable[KeyLike] = (),
    ) -> None:
        self._just_pressed = _ordered_keys(just_pressed)
        self._pressed = frozenset(_ordered_keys(pressed)) | frozenset(self._just_pressed)

    def __repr__(self) -> str:
        pressed = sorted(key.value for key in self._pressed)
        just = [key.value for key in self._just_pressed]
        return f"Keyboard(pressed={pressed!r}, just_pressed={just!r})"

    def is_pressed(self, key: KeyLike) -> bool:
        """Whether ``key`` is held down."""
        return _key(key) in self._pressed

    def is_just_pressed(self, key: KeyLike) -> bool:
        """Whether ``key`` went down this frame."""
        return _key(key) in self._just_pressed

    def _either(self, left: KeyCode, right: KeyCode) -> bool:
        return left in self._pressed or right in self._pressed

    def alt_any(self) -> bool:
        """Whether either Alt key is held."""
        return self._either(KeyCode.ALT_LEFT, KeyCode.ALT_RIGHT)

    def control_any(self) -> bool:
        """Whether either Control key is held."""
        return self._either(KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT)

    def super_any(self) -> bool:
        """Whether either Super key is held."""
        return self._either(KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT)

    def shift_any(self) -> bool:
        """Whether either Shift key is held."""
        return self._either(KeyCode.SHIFT_LEFT, KeyCode.SHIFT_RIGHT)

    def chars(self) -> list[str]:
        """Characters typed this frame.

        Nothing is typed while Control, Super or Alt is held. Shift or Caps
        Lock selects the shifted character.
        """
        if self.control_any() or self.super_any() or self.alt_any():
            return []
        shift = self.shift_any() or KeyCode.CAPS_LOCK in self._pressed
        return [
            char
            for char in (key.as_char(shift) for key in self._just_pressed)
            if char is not None
        ]

    def text(self) -> str:
        """The characters typed this frame, as one string."""
        return "".join(self.chars())