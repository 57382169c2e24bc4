# karyoviz/__init__.py
from .errors import KaryotypeError, InvalidDatasetError, UnknownModeError
from .karyotype import KaryotypeView, Mode, ViewState, create
from .legend import compute_legend, LegendBucket
from .scale import GlyphLayout, compute_scale
from .summary import DatasetSummary, summarize
from .tooltip import bubble_path

__version__ = '1.0.0'
