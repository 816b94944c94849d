from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cuboid import Cuboid


class ReactorError(Exception): ...


class InvalidCuboid(ReactorError, ValueError):
    def __init__(self, cuboid: Cuboid):
        super().__init__(f"Invalid cuboid {tuple(cuboid)}: min exceeds max.")
        self.cuboid = cuboid


class UnknownIdentifier(ReactorError, KeyError):
    def __init__(self, identifier: int):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self):
        return f"No cuboid stored under id {self.identifier}."


class VolumeOverflow(ReactorError, OverflowError):
    def __init__(self, volume: int, field: str):
        super().__init__(f"{field} volume {volume} does not fit in 64 bits.")
        self.volume = volume
        self.field = field
