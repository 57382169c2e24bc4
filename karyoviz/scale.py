# karyoviz/scale.py
import math
from dataclasses import dataclass, fields, replace
from loguru import logger

@dataclass(frozen=True)
class GlyphLayout:
    canvas_height: int = 300
    glyph_width: int = 18
    glyph_separation: int = 14
    cap_size: int = 10
    cap_curvature: int = 12
    legend_width: int = 160
    legend_height: int = 200

    @classmethod
    def from_config(cls, config):
        """Builds a layout from the config keys that name layout fields; other keys are left to their owners."""
        known = {f.name for f in fields(cls)}
        return replace(cls(), **{k: int(v) for k, v in (config or {}).items() if k in known})

@dataclass(frozen=True)
class Scale:
    pixels_per_bp: float
    canvas_width: int
    canvas_height: int
    cap_size: int

    def pixel_height(self, size): return math.floor(size * self.pixels_per_bp)

    def to_pixels(self, position): return math.floor(position * self.pixels_per_bp)

def compute_scale(summary, layout):
    # Width doubles the glyph width per bar rather than adding the separation.
    width = math.floor((layout.glyph_width + layout.glyph_width) * summary.bar_count + layout.legend_width)
    ppbp = (layout.canvas_height - 2 * layout.cap_size) / summary.reference_size
    logger.debug(f'Canvas {width}x{layout.canvas_height}px at {ppbp:.3g} px/bp.')
    return Scale(ppbp, width, layout.canvas_height, layout.cap_size)
