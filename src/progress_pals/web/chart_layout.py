"""Pixel geometry for the inline SVG weight chart."""

from dataclasses import dataclass

from ..analytics.chart import YAxis


@dataclass(frozen=True)
class ChartLayout:
    """Maps kg values and point indexes onto SVG coordinates."""

    y_axis: YAxis
    point_count: int
    width: int = 640
    height: int = 300
    left: int = 50
    right: int = 20
    top: int = 10
    bottom: int = 30

    @property
    def plot_width(self) -> int:
        return self.width - self.left - self.right

    @property
    def plot_height(self) -> int:
        return self.height - self.top - self.bottom

    def y(self, kg: float) -> float:
        span = self.y_axis.max - self.y_axis.min
        return round(self.top + (self.y_axis.max - kg) / span * self.plot_height, 1)

    def x(self, index: int) -> float:
        if self.point_count <= 1:
            return round(self.left + self.plot_width / 2, 1)
        return round(self.left + index / (self.point_count - 1) * self.plot_width, 1)

    def band_height(self, low_kg: float, high_kg: float) -> float:
        """Height in pixels of the band between two weights."""
        return round(self.y(low_kg) - self.y(high_kg), 1)

    def visible_ticks(self) -> list[int]:
        return [t for t in self.y_axis.ticks if self.y_axis.min <= t <= self.y_axis.max]
