from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path
from zipfile import ZipFile, is_zipfile

from click import UsageError
from msgspec import DecodeError, json

from ..core.cuboid import Cuboid
from ..core.reactor import Command, Flag
from .parser import parse_steps
from .schema import Steps

# prevent infinite loop on infinite input (like `yes | reactor-reboot`)
MAX_PIPE_SIZE = 100 * 1024 * 1024  # 100 MB

_decoder = json.Decoder(Steps)


def load(path: Path | None) -> list[Command]:
    src = _load_source(path)
    data = _read_source(src)
    return decode(data, as_json=_looks_like_json(path, data))


def decode(data: bytes, *, as_json: bool = False) -> list[Command]:
    if as_json:
        return _decode_json(data)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        raise UsageError("Input is not valid UTF-8 text.")
    return parse_steps(text)


def _decode_json(data: bytes) -> list[Command]:
    try:
        steps = _decoder.decode(data)
    except DecodeError as e:
        raise UsageError(f"Input data does not match expected format: {e}")

    commands = []
    for i, step in enumerate(steps):
        cuboid = Cuboid(*step.cuboid)
        if not cuboid.is_valid:
            raise UsageError(
                f"Step {i}: range with min greater than max: {cuboid}"
            )
        commands.append(Command(Flag(step.flag), cuboid))
    return commands


def _looks_like_json(path: Path | None, data: bytes) -> bool:
    if path and path.suffix == ".json":
        return True
    return data.lstrip()[:1] == b"["


def _load_source(path: Path | None) -> Path | BytesIO:
    if path:
        return path

    if sys.stdin.isatty():
        raise UsageError(
            "Missing input: Either provide file path with --in, or pipe content to stdin.",
        )

    return BytesIO(sys.stdin.buffer.read(MAX_PIPE_SIZE))


def _read_source(src: Path | BytesIO) -> bytes:
    if is_zipfile(src):
        return _unzip(src)

    if isinstance(src, Path):
        return src.read_bytes()

    return src.getvalue()


def _unzip(src: Path | BytesIO) -> bytes:
    with ZipFile(src) as zf:
        files = [n for n in zf.namelist() if not n.endswith("/")]
        if len(files) != 1:
            raise UsageError("Expected exactly one file inside the zip archive.")
        return zf.read(files[0])
