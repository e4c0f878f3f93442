# turbokit

Small, dependency-free building blocks for game code:

- `turbokit.random` – a `Random` class built on any 32-bit source, with
  typed integers, floats in `[0, 1]`, unbiased `between`, `within_range`,
  `shuffle` and `pick`.
- `turbokit.keycodes` – the `KeyCode` enum and its mapping onto typed
  characters.
- `turbokit.keyboard` – a `Keyboard` snapshot that turns the keys pressed
  this frame into text, plus `text_for`.
- `turbokit.encoding` – standard (padded) and URL-safe (unpadded) base64.
- `turbokit.client` – `ProgramFile`, `ProgramEvent`, `QueryResult` and
  `DocumentQueryResult` for reading program data.

## Install

    pip install turbokit

## Random numbers

```python
from turbokit.random import Random

rng = Random()                 # draws from the system's secure source
roll = rng.between(1, 6)       # 1..=6, no modulo bias
chance = rng.f64()             # 0.0..=1.0, both ends included
card = rng.pick(["a", "b", "c"])
deck = list(range(52))
rng.shuffle(deck)              # in place
```

`Random(source)` accepts any callable that returns an unsigned 32-bit
integer, which makes results reproducible in tests. `between` takes two
integers in the 64-bit signed or unsigned domain, or two floats; it raises
`ValueError` when `lower > upper` and `TypeError` for booleans or
non-numbers. `within_range(start, stop)` returns a value in `[start, stop)`
and returns `start` for an empty range.

## Keyboard text

```python
from turbokit.keyboard import Keyboard, text_for
from turbokit.keycodes import KeyCode

kb = Keyboard(pressed={KeyCode.SHIFT_LEFT, KeyCode.KEY_A}, just_pressed=[KeyCode.KEY_A])
kb.text()                        # "A"
kb.is_pressed("ShiftLeft")       # True; keys may be given by name
text_for(["KeyH", "KeyI"], shift=False)  # "hi"
KeyCode.DIGIT_1.as_char(shift=True)       # "!"
```

No text is typed while Control, Super or Alt is held; Shift or Caps Lock
selects the shifted character.

## Base64

```python
from turbokit.encoding import encode, decode, encode_url_safe, decode_url_safe

encode(b"hi")           # "aGk="
decode("aGk=")          # b"hi"
encode_url_safe(b"hi")  # "aGk"
decode_url_safe("aGk")  # b"hi"
```

Both decoders raise `ValueError` on invalid or non-canonical input.

## Program data

```python
from turbokit.client import (
    DocumentQueryResult, ProgramFile, build_query,
    query_result_from_response, split_program_path,
)

build_query([("stream", "true")])          # "stream=true"
split_program_path("game/saves/slot1")    # ("game", "saves/slot1")

result = query_result_from_response(0, raw_json_bytes, None, ProgramFile)
doc = DocumentQueryResult("game/saves/slot1", result)
value = doc.parse(lambda contents: contents.decode("utf-8"))
```

A status of 1 marks the result as loading and 2 as a network failure;
an error message in the response takes precedence over a parse error.

## What it does not do

turbokit does not connect to a game runtime or a server: it reads no real
input devices, sends and receives nothing over the network, and stores
nothing. The client types only parse and build the data that such a host
would exchange.

## Running the tests

    pip install -e .[test]
    pytest