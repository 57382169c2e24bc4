# karyoviz/tooltip.py
from loguru import logger

TOOLTIP_ATTR = 'data-tooltip-text'
HIDDEN_STYLE, VISIBLE_STYLE = 'opacity: 0;', 'opacity: 100;'
# Bubble geometry: corner radius, body height, text padding, full height incl. tail, tail offset, control offset, tail width.
R, H, PADDING, FH, OFF, C, S = 5, 25, 20, 30, 5, 5, 5
POINTER_DX, POINTER_DY = 8, 34

def _n(v): return f'{v:g}'

def bubble_path(FH, H, W, R, C, S, off):
    """
    Outline of a W x H rounded box with a tail pointing down to y=FH.

        |----------W-----------|
         6____________________7      -  -
        /                      \\     |  |
        5                      8     |  |
        |                      |     H  |
        4                      9     |  FH
        \\                      /     |  |
         3--2  11------------10      _  |
            | /              |--|       |
             1                R         _
       |----|---|
         off  S

    C is the quadratic control offset (C <= R).
    """
    return (f'M {_n(R + off)},{_n(FH)} '
            f'V {_n(H)} '
            f'L {_n(R)},{_n(H)} '
            f'Q {_n(R - C)},{_n(H - (R - C))},0,{_n(H - R)} '
            f'V {_n(R)} '
            f'Q {_n(R - C)},{_n(R - C)},{_n(R)},0 '
            f'H {_n(W - R)} '
            f'Q {_n(W - (R - C))},0,{_n(W)},{_n(R)} '
            f'V {_n(H - R)} '
            f'Q {_n(W - (R - C))},{_n(H - (R - C))},{_n(W - R)},{_n(H)} '
            f'H {_n(R + off + S)} '
            f'L {_n(R + off)},{_n(FH)} z')

class Tooltip:
    """Hover bubble for hit rectangles. Hidden until the pointer moves over a rectangle."""

    def __init__(self, host, svg, on_select=None):
        self.host, self.svg, self.on_select = host, svg, on_select
        self.group = host.create_element('g')
        self.group.set('style', HIDDEN_STYLE)
        self.path = self.group.append(host.create_element('path'))
        self.path.set('style', 'fill: white; stroke: black;')
        self.text = self.group.append(host.create_element('text'))
        self.text.set('x', 8); self.text.set('y', 18)

    @property
    def visible(self): return self.group.get('style') == VISIBLE_STYLE

    def attach(self, rect):
        rect.add_event_listener('mousemove', self.on_pointer_move)
        rect.add_event_listener('mouseout', self.on_pointer_leave)
        rect.add_event_listener('mousedown', self.on_pointer_down)

    def on_pointer_move(self, evt):
        ctm = self.host.get_screen_ctm(self.svg)
        x = (evt.client_x - ctm.e - POINTER_DX) / ctm.a
        y = (evt.client_y - ctm.f - POINTER_DY) / ctm.d
        self.text.text = evt.target.get(TOOLTIP_ATTR, '')
        width = self.host.computed_text_length(self.text) + PADDING
        self.group.set('transform', f'translate({_n(x)} {_n(y)})')
        self.path.set('d', bubble_path(FH, H, width, R, C, S, OFF))
        self.group.set('style', VISIBLE_STYLE)

    def on_pointer_leave(self, evt): self.group.set('style', HIDDEN_STYLE)

    def on_pointer_down(self, evt):
        descriptor = evt.target.get(TOOLTIP_ATTR, '')
        logger.info(f'{descriptor} selected')
        if self.on_select: self.on_select(descriptor)
