"""Cyclic redundancy check over lists of bits."""

from __future__ import annotations

from collections.abc import Iterable


def _bits(values: Iterable[int], name: str) -> list[int]:
    bits = list(values)
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"{name} must contain only 0 and 1")
    return bits


def _generator(values: Iterable[int]) -> list[int]:
    generator = _bits(values, "generator")
    if not generator:
        raise ValueError("generator must not be empty")
    return generator


def _divide(message: list[int], generator: list[int], steps: int) -> list[int]:
    work = list(message)
    for i in range(steps):
        if work[i] >= generator[0]:
            for offset, bit in enumerate(generator):
                work[i + offset] ^= bit
    return work


def crc_remainder(frame: Iterable[int], generator: Iterable[int]) -> list[int]:
    """Return the CRC bits of ``frame`` for the given generator polynomial."""
    bits = _bits(frame, "frame")
    divisor = _generator(generator)
    width = len(divisor) - 1
    work = _divide(bits + [0] * width, divisor, len(bits))
    return work[len(bits) :]


def encode(frame: Iterable[int], generator: Iterable[int]) -> list[int]:
    """Return ``frame`` followed by its CRC bits."""
    bits = _bits(frame, "frame")
    return bits + crc_remainder(bits, generator)


def check(frame: Iterable[int], generator: Iterable[int]) -> bool:
    """Return whether a received frame, CRC included, divides without remainder."""
    bits = _bits(frame, "frame")
    divisor = _generator(generator)
    width = len(divisor) - 1
    if len(bits) < width:
        raise ValueError("frame is shorter than the CRC")
    work = _divide(bits, divisor, len(bits) - width)
    return not any(work[len(bits) - width :])