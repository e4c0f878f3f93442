"""Physical key codes and their mapping onto typed characters."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class KeyCode(Enum):
    """A physical or logical key such as "KeyA", "Enter" or "ArrowLeft"."""

    BACKQUOTE = "Backquote"
    BACKSLASH = "Backslash"
    BRACKET_LEFT = "BracketLeft"
    BRACKET_RIGHT = "BracketRight"
    COMMA = "Comma"
    DIGIT_0 = "Digit0"
    DIGIT_1 = "Digit1"
    DIGIT_2 = "Digit2"
    DIGIT_3 = "Digit3"
    DIGIT_4 = "Digit4"
    DIGIT_5 = "Digit5"
    DIGIT_6 = "Digit6"
    DIGIT_7 = "Digit7"
    DIGIT_8 = "Digit8"
    DIGIT_9 = "Digit9"
    EQUAL = "Equal"
    INTL_BACKSLASH = "IntlBackslash"
    INTL_RO = "IntlRo"
    INTL_YEN = "IntlYen"
    KEY_A = "KeyA"
    KEY_B = "KeyB"
    KEY_C = "KeyC"
    KEY_D = "KeyD"
    KEY_E = "KeyE"
    KEY_F = "KeyF"
    KEY_G = "KeyG"
    KEY_H = "KeyH"
    KEY_I = "KeyI"
    KEY_J = "KeyJ"
    KEY_K = "KeyK"
    KEY_L = "KeyL"
    KEY_M = "KeyM"
    KEY_N = "KeyN"
    KEY_O = "KeyO"
    KEY_P = "KeyP"
    KEY_Q = "KeyQ"
    KEY_R = "KeyR"
    KEY_S = "KeyS"
    KEY_T = "KeyT"
    KEY_U = "KeyU"
    KEY_V = "KeyV"
    KEY_W = "KeyW"
    KEY_X = "KeyX"
    KEY_Y = "KeyY"
    KEY_Z = "KeyZ"
    MINUS = "Minus"
    PERIOD = "Period"
    QUOTE = "Quote"
    SEMICOLON = "Semicolon"
    SLASH = "Slash"
    ALT_LEFT = "AltLeft"
    ALT_RIGHT = "AltRight"
    BACKSPACE = "Backspace"
    CAPS_LOCK = "CapsLock"
    CONTEXT_MENU = "ContextMenu"
    CONTROL_LEFT = "ControlLeft"
    CONTROL_RIGHT = "ControlRight"
    ENTER = "Enter"
    SUPER_LEFT = "SuperLeft"
    SUPER_RIGHT = "SuperRight"
    SHIFT_LEFT = "ShiftLeft"
    SHIFT_RIGHT = "ShiftRight"
    SPACE = "Space"
    TAB = "Tab"
    CONVERT = "Convert"
    KANA_MODE = "KanaMode"
    LANG1 = "Lang1"
    LANG2 = "Lang2"
    LANG3 = "Lang3"
    LANG4 = "Lang4"
    LANG5 = "Lang5"
    NON_CONVERT = "NonConvert"
    DELETE = "Delete"
    END = "End"
    HELP = "Help"
    HOME = "Home"
    INSERT = "Insert"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ARROW_UP = "ArrowUp"
    NUM_LOCK = "NumLock"
    NUMPAD_0 = "Numpad0"
    NUMPAD_1 = "Numpad1"
    NUMPAD_2 = "Numpad2"
    NUMPAD_3 = "Numpad3"
    NUMPAD_4 = "Numpad4"
    NUMPAD_5 = "Numpad5"
    NUMPAD_6 = "Numpad6"
    NUMPAD_7 = "Numpad7"
    NUMPAD_8 = "Numpad8"
    NUMPAD_9 = "Numpad9"
    NUMPAD_ADD = "NumpadAdd"
    NUMPAD_BACKSPACE = "NumpadBackspace"
    NUMPAD_CLEAR = "NumpadClear"
    NUMPAD_CLEAR_ENTRY = "NumpadClearEntry"
    NUMPAD_COMMA = "NumpadComma"
    NUMPAD_DECIMAL = "NumpadDecimal"
    NUMPAD_DIVIDE = "NumpadDivide"
    NUMPAD_ENTER = "NumpadEnter"
    NUMPAD_EQUAL = "NumpadEqual"
    NUMPAD_HASH = "NumpadHash"
    NUMPAD_MEMORY_ADD = "NumpadMemoryAdd"
    NUMPAD_MEMORY_CLEAR = "NumpadMemoryClear"
    NUMPAD_MEMORY_RECALL = "NumpadMemoryRecall"
    NUMPAD_MEMORY_STORE = "NumpadMemoryStore"
    NUMPAD_MEMORY_SUBTRACT = "NumpadMemorySubtract"
    NUMPAD_MULTIPLY = "NumpadMultiply"
    NUMPAD_PAREN_LEFT = "NumpadParenLeft"
    NUMPAD_PAREN_RIGHT = "NumpadParenRight"
    NUMPAD_STAR = "NumpadStar"
    NUMPAD_SUBTRACT = "NumpadSubtract"
    ESCAPE = "Escape"
    FN = "Fn"
    FN_LOCK = "FnLock"
    PRINT_SCREEN = "PrintScreen"
    SCROLL_LOCK = "ScrollLock"
    PAUSE = "Pause"
    BROWSER_BACK = "BrowserBack"
    BROWSER_FAVORITES = "BrowserFavorites"
    BROWSER_FORWARD = "BrowserForward"
    BROWSER_HOME = "BrowserHome"
    BROWSER_REFRESH = "BrowserRefresh"
    BROWSER_SEARCH = "BrowserSearch"
    BROWSER_STOP = "BrowserStop"
    EJECT = "Eject"
    LAUNCH_APP1 = "LaunchApp1"
    LAUNCH_APP2 = "LaunchApp2"
    LAUNCH_MAIL = "LaunchMail"
    MEDIA_PLAY_PAUSE = "MediaPlayPause"
    MEDIA_SELECT = "MediaSelect"
    MEDIA_STOP = "MediaStop"
    MEDIA_TRACK_NEXT = "MediaTrackNext"
    MEDIA_TRACK_PREVIOUS = "MediaTrackPrevious"
    POWER = "Power"
    SLEEP = "Sleep"
    AUDIO_VOLUME_DOWN = "AudioVolumeDown"
    AUDIO_VOLUME_MUTE = "AudioVolumeMute"
    AUDIO_VOLUME_UP = "AudioVolumeUp"
    WAKE_UP = "WakeUp"
    META = "Meta"
    HYPER = "Hyper"
    TURBO = "Turbo"
    ABORT = "Abort"
    RESUME = "Resume"
    SUSPEND = "Suspend"
    AGAIN = "Again"
    COPY = "Copy"
    CUT = "Cut"
    FIND = "Find"
    OPEN = "Open"
    PASTE = "Paste"
    PROPS = "Props"
    SELECT = "Select"
    UNDO = "Undo"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    F25 = "F25"
    F26 = "F26"
    F27 = "F27"
    F28 = "F28"
    F29 = "F29"
    F30 = "F30"
    F31 = "F31"
    F32 = "F32"
    F33 = "F33"
    F34 = "F34"
    F35 = "F35"

    @classmethod
    def all(cls) -> tuple[KeyCode, ...]:
        """Every key code, in declaration order."""
        return tuple(cls)

    def as_char(self, shift: bool) -> Optional[str]:
        """The character this key types, or None if it types none."""
        fixed = _FIXED_CHARS.get(self)
        if fixed is not None:
            return fixed
        pair = _SHIFTABLE_CHARS.get(self)
        if pair is None:
            return None
        return pair[1] if shift else pair[0]


def _shiftable() -> dict[KeyCode, tuple[str, str]]:
    table: dict[KeyCode, tuple[str, str]] = {}
    for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
        table[KeyCode[f"KEY_{letter}"]] = (letter.lower(), letter)
    for digit, shifted in zip("0123456789", ")!@#$%^&*("):
        table[KeyCode[f"DIGIT_{digit}"]] = (digit, shifted)
    table.update(
        {
            KeyCode.BACKQUOTE: ("`", "~"),
            KeyCode.MINUS: ("-", "_"),
            KeyCode.EQUAL: ("=", "+"),
            KeyCode.BRACKET_LEFT: ("[", "{"),
            KeyCode.BRACKET_RIGHT: ("]", "}"),
            KeyCode.BACKSLASH: ("\\", "|"),
            KeyCode.SEMICOLON: (";", ":"),
            KeyCode.QUOTE: ("'", '"'),
            KeyCode.COMMA: (",", "<"),
            KeyCode.PERIOD: (".", ">"),
            KeyCode.SLASH: ("/", "?"),
        }
    )
    return table


def _fixed() -> dict[KeyCode, str]:
    table = {
        KeyCode.SPACE: " ",
        KeyCode.ENTER: "\n",
        KeyCode.TAB: "\t",
        KeyCode.NUMPAD_ADD: "+",
        KeyCode.NUMPAD_SUBTRACT: "-",
        KeyCode.NUMPAD_MULTIPLY: "*",
        KeyCode.NUMPAD_DIVIDE: "/",
        KeyCode.NUMPAD_DECIMAL: ".",
        KeyCode.NUMPAD_EQUAL: "=",
    }
    for digit in "0123456789":
        table[KeyCode[f"NUMPAD_{digit}"]] = digit
    return table


_SHIFTABLE_CHARS = _shiftable()
_FIXED_CHARS = _fixed()