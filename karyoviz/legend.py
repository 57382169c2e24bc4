# karyoviz/legend.py
import math
from dataclasses import dataclass

# Hit count legend colors; index 0 is reserved for zero-count positions.
LEGEND_COLORS = ('#fff', '#3288bd', '#66c2a5', '#abdda4', '#e6f598', '#fee08b', '#fdae61', '#f46d43', '#d53e4f')

# Giesma staining colors indexed by band color code.
GIESMA_COLORS = (
    '#527280',  # acen
    '#ffffff',  # gneg
    '#c8c88c',  # gvar
    '#e6e6e6',  # gpos25
    '#c8c8c8',  # gpos33
    '#b4b4b4',  # gpos50
    '#8c8c8c',  # gpos66
    '#646464',  # gpos75
    '#323232',  # gpos100
    '#ffffff',  # n/a
    '#823c5a',  # stalk
)
UNMAPPED_COLOR = 'white'

@dataclass(frozen=True)
class LegendBucket:
    color: str
    label: str

def bucket_width(max_magnitude, color_count):
    return math.ceil(max_magnitude / (color_count - 1))

def compute_legend(max_magnitude, colors=LEGEND_COLORS):
    """Splits [1, max_magnitude] into len(colors)-1 ranges; the last range always ends at max_magnitude."""
    if len(colors) < 2: raise ValueError(f'A legend needs at least two colors, got {len(colors)}.')
    width = bucket_width(max_magnitude, len(colors))
    buckets, range_start = [LegendBucket(colors[0], '0')], 1
    for color in colors[1:-1]:
        buckets.append(LegendBucket(color, f'{range_start}-{range_start + width - 1}'))
        range_start += width
    buckets.append(LegendBucket(colors[-1], f'{range_start}-{max_magnitude}'))
    return tuple(buckets)

def color_index(count, width):
    if width == 0: return 0
    return math.ceil(count / width)

def hit_color(count, width, legend):
    idx = color_index(count, width)
    return legend[idx].color if 0 <= idx < len(legend) else UNMAPPED_COLOR

def giesma_color(color_code):
    return GIESMA_COLORS[color_code] if 0 <= color_code < len(GIESMA_COLORS) else UNMAPPED_COLOR
