"""Error handling: catching InvalidArgumentType and the PathError base class."""

from __future__ import annotations

import lexpath
from lexpath import InvalidArgumentType, PathError

if __name__ == "__main__":
    # --- InvalidArgumentType for non-text paths ---
    try:
        lexpath.join("a", 1)  # type: ignore[arg-type]
    except InvalidArgumentType as exc:
        print(f"InvalidArgumentType: {exc}")

    # --- It is also a TypeError ---
    try:
        lexpath.parse(42)  # type: ignore[arg-type]
    except TypeError as exc:
        print(f"\nTypeError ({type(exc).__name__}): {exc}")

    # --- Catch any lexpath error with the base class ---
    for record in ["not-a-record", {"root": 1, "base": "x"}]:
        try:
            lexpath.format(record)  # type: ignore[arg-type]
        except PathError as exc:
            print(f"\nPathError ({type(exc).__name__}): {exc}")

    # --- format() ignores root ---
    print(f"\nformat(root='/', base='x') -> {lexpath.format({'root': '/', 'base': 'x'})!r}")

    print("\nDone!")
