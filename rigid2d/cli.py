"""Interactive tool that relates vectors and twists across three frames."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .geometry import Transform2D, Twist2D, Vector2D, deg2rad

__all__ = ["main"]

_RULE = "----------------------"
_FRAMES = "abc"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_number(tokens: Iterator[str]) -> float:
    for token in tokens:
        text = token.strip("[]")
        if not text:
            continue
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None
    raise ValueError("unexpected end of input")


def _ask(tokens: Iterator[str], out: TextIO, prompt: str) -> float:
    print(prompt, file=out)
    return _read_number(tokens)


def _read_transform(tokens: Iterator[str], out: TextIO) -> Transform2D:
    deg = _ask(tokens, out, "Enter angle in degrees")
    x = _ask(tokens, out, "Enter x component")
    y = _ask(tokens, out, "Enter y component")
    return Transform2D(Vector2D(x, y), deg2rad(deg))


def _read_vector(tokens: Iterator[str], out: TextIO) -> Vector2D:
    x = _ask(tokens, out, "Enter x component")
    y = _ask(tokens, out, "Enter y component")
    return Vector2D(x, y)


def _read_twist(tokens: Iterator[str], out: TextIO) -> Twist2D:
    w = _ask(tokens, out, "Enter angular component")
    vx = _ask(tokens, out, "Enter linear velocity x component")
    vy = _ask(tokens, out, "Enter linear velocity y component")
    return Twist2D(w, vx, vy)


def _read_frame(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return token[0]


def _run(tokens: Iterator[str], out: TextIO) -> None:
    print(_RULE, file=out)
    print("Enter T_ab", file=out)
    tab = _read_transform(tokens, out)
    print("Enter T_bc", file=out)
    tbc = _read_transform(tokens, out)
    print(_RULE, file=out)

    tcb = tbc.inv()
    tba = tab.inv()
    tac = tab * tbc
    tca = tcb * tba

    print(_RULE, file=out)
    for name, tf in (
        ("T_ab", tab),
        ("T_ba", tba),
        ("T_bc", tbc),
        ("T_cb", tcb),
        ("T_ac", tac),
        ("T_ca", tca),
    ):
        print(f"{name}: {tf}", file=out)
    print(_RULE, file=out)
    print(_RULE, file=out)

    # views[source][target] maps a quantity given in source into target
    views: dict[str, dict[str, Transform2D | None]] = {
        "a": {"a": None, "b": tba, "c": tca},
        "b": {"a": tab, "b": None, "c": tcb},
        "c": {"a": tac, "b": tbc, "c": None},
    }

    print("Enter a vector", file=out)
    vector = _read_vector(tokens, out)
    print("Enter the frame: 'a', 'b', 'c'", file=out)
    frame = _read_frame(tokens)
    view = views.get(frame)
    if view is not None:
        for target in _FRAMES:
            tf = view[target]
            shown = vector if tf is None else tf(vector)
            print(f"Vector in frame {target}: {shown}", file=out)

    print(_RULE, file=out)
    print(_RULE, file=out)

    print("Enter a twist", file=out)
    twist = _read_twist(tokens, out)
    if view is not None:
        for target in _FRAMES:
            tf = view[target]
            shown = twist if tf is None else tf(twist)
            print(f"Twist in frame {target}: {shown}", file=out)
    print(_RULE, file=out)


def main(argv: list[str] | None = None) -> int:
    """Read two transforms, a vector and a twist, and show them in every frame."""
    parser = argparse.ArgumentParser(
        prog="rigid2d",
        description="Relate vectors and twists across frames a, b and c.",
    )
    parser.parse_args(argv)
    try:
        _run(_tokens(sys.stdin), sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())