from __future__ import annotations

"""Configuration dataclass for layout generation."""

from dataclasses import dataclass


@dataclass
class LayoutSettings:
    seed: int | None = None
    rows: int = 30
    cols: int = 30
    # cells this close to the edge are never painted by region growth
    margin: int = 2
    # top-left square kept free for the UI and start anchoring
    safe_zone: int = 3
    override_chance: float = 0.05
    drop_chance: float = 0.05

    mountain_count: int = 6
    mountain_size: tuple[int, int] = (15, 40)
    mountain_bias: float = 0.70

    village_size: int = 110
    village_bias: float = 0.85
    village_margin: int = 5
    village_attempts: int = 50
    village_mountain_distance: float = 8.0

    drought_count: int = 5
    drought_size: tuple[int, int] = (10, 25)
    drought_bias: float = 0.60

    smooth_iterations: int = 4
    mountain_threshold: int = 3

    max_big_houses: int = 2
    max_small_houses: int = 8
    big_house_spacing: float = 8.0
    small_from_big_spacing: float = 5.0
    small_house_spacing: float = 3.0
    small_house_threshold: float = 0.3

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("rows and cols must be >= 1")
        if self.margin < 0 or self.safe_zone < 0:
            raise ValueError("margin and safe_zone must be >= 0")
        if 2 * self.margin >= min(self.rows, self.cols):
            raise ValueError("margin leaves no paintable interior")
        for name in ("override_chance", "drop_chance", "mountain_bias", "village_bias", "drought_bias"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0]")
        for name in ("mountain_size", "drought_size"):
            low, high = getattr(self, name)
            if low < 1 or high < low:
                raise ValueError(f"{name} must be a (min, max) pair with 1 <= min <= max")
        if self.smooth_iterations < 0:
            raise ValueError("smooth_iterations must be >= 0")
        if self.max_big_houses < 0 or self.max_small_houses < 0:
            raise ValueError("house counts must be >= 0")


__all__ = ["LayoutSettings"]
