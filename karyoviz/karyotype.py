# karyoviz/karyotype.py
from dataclasses import dataclass
from enum import Enum
from loguru import logger
from .errors import UnknownModeError
from .legend import LEGEND_COLORS, compute_legend, bucket_width
from .renderer import GlyphRenderer
from .scale import GlyphLayout, compute_scale
from .summary import summarize
from .surface import SvgHost

class Mode(str, Enum):
    ALL = 'all'
    NRPH = 'nrph'
    GIESMA = 'giesma'

@dataclass(frozen=True)
class ViewState:
    mode: Mode
    legend: tuple
    bucket_width: int

class KaryotypeView:
    """
    Karyotype of a genome drawn as one SVG surface inside a host container.

    The dataset is read but never modified. Maxima and canvas dimensions are fixed at
    construction; every mode switch throws away the previous surface and draws a new one.
    """

    def __init__(self, container, dataset, host=None, layout=None, legend_colors=LEGEND_COLORS, on_select=None):
        self.container, self.dataset = container, dataset
        self.host = host or SvgHost()
        self.layout = layout or GlyphLayout()
        self.legend_colors = tuple(legend_colors)
        self.on_select = on_select
        self.summary = summarize(dataset)
        self.scale = compute_scale(self.summary, self.layout)
        self.state, self.svg, self.tooltip = None, None, None
        self.switch_visualization(Mode.ALL)

    @property
    def current_mode(self): return self.state.mode if self.state else None

    def _resolve(self, requested):
        """Returns the mode actually shown and the magnitude its legend is built from."""
        if requested == Mode.ALL: return Mode.ALL, self.summary.max_hit_magnitude
        if requested == Mode.NRPH: return Mode.NRPH, self.summary.max_nrph_hit_magnitude
        if self.summary.has_staining_data: return Mode.GIESMA, 0
        logger.warning('No contig has Giesma bands; showing all hits instead.')
        return Mode.ALL, self.summary.max_hit_magnitude

    def switch_visualization(self, mode):
        """Shows 'all', 'nrph' or 'giesma' and returns the mode actually displayed."""
        try: requested = Mode(mode)
        except ValueError: raise UnknownModeError(f'Unknown visualization \'{mode}\'; expected one of {[m.value for m in Mode]}.') from None
        if requested == self.current_mode: return self.current_mode

        shown, max_magnitude = self._resolve(requested)
        state = ViewState(shown, compute_legend(max_magnitude, self.legend_colors), bucket_width(max_magnitude, len(self.legend_colors)))
        if self.svg is not None: self.host.detach(self.svg)
        renderer = GlyphRenderer(self.host, self.dataset, self.layout, self.scale, state, self.on_select)
        self.svg, self.tooltip, self.state = renderer.render(), renderer.tooltip, state
        self.container.append(self.svg)
        logger.info(f'Showing \'{shown.value}\' view ({len(self.dataset["singleton_contigs"])} contigs, legend max {max_magnitude}).')
        return shown

def create(container, dataset, **kwargs):
    return KaryotypeView(container, dataset, **kwargs)
