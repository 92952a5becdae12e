"""An integer bit field of network interface flags."""

from __future__ import annotations

import enum


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16


def is_up(v: Flags) -> bool:
    """Report whether the interface is up."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return ``v`` with the up flag cleared."""
    return Flags(int(v) & ~Flags.UP.value)


def set_broadcast(v: Flags) -> Flags:
    """Return ``v`` with the broadcast flag set."""
    return Flags(int(v) | Flags.BROADCAST.value)


def is_cast(v: Flags) -> bool:
    """Report whether broadcast or multicast is enabled."""
    return int(v) & (Flags.BROADCAST | Flags.MULTICAST).value != 0