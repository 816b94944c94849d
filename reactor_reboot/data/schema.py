from typing import Literal

from msgspec import Struct, json

from ..core.errors import VolumeOverflow

FlagName = Literal["on", "off"]
Bounds = tuple[int, int, int, int, int, int]  # x_min, x_max, y_min, y_max, z_min, z_max

INT64_MAX = 2**63 - 1


class Step(Struct):
    flag: FlagName
    cuboid: Bounds


Steps = list[Step]


class Report(Struct):
    steps: int
    cuboids: int
    total: int
    limit: str | None = None
    clipped: int | None = None


def encode_report(report: Report) -> bytes:
    for field in ("total", "clipped"):
        volume = getattr(report, field)
        if volume is not None and volume > INT64_MAX:
            raise VolumeOverflow(volume, field)
    return json.encode(report)
