from __future__ import annotations

"""Coordinate-derived noise, independent of any random stream or call order."""

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _stable_hash(*args: int) -> int:
    """Fold integers into one 64-bit value. Same inputs, same output, in every process."""
    x = 0x345678ABCDEF1234
    for a in args:
        a &= _MASK64
        a ^= a >> 33
        a = (a * 0xFF51AFD7ED558CCD) & _MASK64
        a ^= a >> 33
        x ^= a
        x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    return x


def cell_noise(x: int, y: int, seed: int = 1337) -> float:
    """
    Stable pseudo-random value in [0, 1) for cell (x, y) under ``seed``.

    Each seed is a separate texture stream: trees, houses and peaks use
    different seeds so their patterns do not line up.
    """
    h = _stable_hash(x, y, seed)
    # final avalanche so nearby cells do not share high bits
    h ^= h >> 29
    h = (h * 0xBF58476D1CE4E5B9) & _MASK64
    h ^= h >> 32
    return (h >> 11) / float(1 << 53)


__all__ = ["cell_noise"]
