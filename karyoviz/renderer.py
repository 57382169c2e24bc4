# karyoviz/renderer.py
from loguru import logger
from .legend import hit_color, giesma_color
from .surface import SVG_NS
from .tooltip import Tooltip, TOOLTIP_ATTR

CONTIG_STROKE = '#95B3D7'
LEGEND_TITLE = 'Hit Count (per Mb)'
SWATCH_SIZE, SWATCH_GAP = 18, 2

class GlyphRenderer:
    """Draws one complete surface for the current view state. A new renderer is used for every mode switch."""

    def __init__(self, host, dataset, layout, scale, view_state, on_select=None):
        self.host, self.dataset, self.layout, self.scale, self.state = host, dataset, layout, scale, view_state
        self.on_select = on_select
        self.svg = host.create_element('svg')
        self.tooltip = None

    def _add(self, tag, **attrs):
        node = self.host.create_element(tag)
        for k, v in attrs.items(): node.set(k.replace('_', '-'), v)
        return self.svg.append(node)

    def render(self):
        self.svg.set('xmlns', SVG_NS)
        self.svg.set('width', self.scale.canvas_width); self.svg.set('height', self.scale.canvas_height)
        self.tooltip = Tooltip(self.host, self.svg, self.on_select)
        start_x = 0
        for contig in self.dataset['singleton_contigs']:
            self.draw_contig(contig, start_x)
            start_x += self.layout.glyph_width + self.layout.glyph_separation
        if self.state.mode != 'giesma': self.draw_legend(start_x)
        # Tooltip goes last so it paints above the glyphs.
        self.svg.append(self.tooltip.group)
        return self.svg

    def draw_contig(self, contig, x):
        width, height = self.layout.glyph_width, self.scale.pixel_height(contig['size'])
        y1 = self.scale.canvas_height - self.scale.cap_size - height
        y2 = self.scale.canvas_height - self.scale.cap_size
        logger.debug(f'Drawing {contig["name"]} at x={x}, {height}px tall.')
        for edge_x in (x, x + width): self._add('line', x1=edge_x, x2=edge_x, y1=y1, y2=y2, stroke=CONTIG_STROKE)
        mid = int(x + width / 2)
        for cap_y, bulge in ((y1, -self.layout.cap_curvature), (y2, self.layout.cap_curvature)):
            self._add('path', d=f'M {x},{cap_y} Q {mid},{cap_y + bulge},{x + width},{cap_y}', style=f'fill: white; stroke: {CONTIG_STROKE};')

        clusters = contig['nrph_hit_clusters'] if self.state.mode == 'nrph' else contig['hit_clusters']
        for start, end, count in clusters:
            top, bottom = self.scale.to_pixels(start), self.scale.to_pixels(end)
            color = 'white' if self.state.mode == 'giesma' else hit_color(count, self.state.bucket_width, self.state.legend)
            rect = self._add('rect', x=x + 1, y=y1 + top, width=width - 2, height=bottom - top, fill=color)
            rect.set(TOOLTIP_ATTR, f'{contig["name"]}:{start}-{end} count:{count}')
            self.tooltip.attach(rect)

        if self.state.mode == 'giesma':
            for start, end, code in contig.get('giesma_bands') or []:
                top, bottom = self.scale.to_pixels(start), self.scale.to_pixels(end)
                self._add('rect', x=x, y=self.scale.canvas_height - height + top, width=width, height=bottom - top, fill=giesma_color(code))

    def draw_legend(self, x):
        lw, lh = self.layout.legend_width, self.layout.legend_height
        top = self.scale.canvas_height - lh
        # Mask out a strip of the frame's top edge for the title.
        mask = self._add('mask', id='legendmask')
        for attrs in ({'x': x, 'y': top, 'width': lw, 'height': lh, 'style': 'fill: white;'},
                      {'x': x + 10, 'y': top, 'width': lw - 25, 'height': 20, 'style': 'fill: black;'}):
            node = mask.append(self.host.create_element('rect'))
            for k, v in attrs.items(): node.set(k, v)
        self._add('rect', x=x, y=top, width=lw, height=lh, rx=8, ry=8, style='fill: white; stroke: #ddd;', mask='url(#legendmask)')
        self._add('text', x=x + 14, y=top + 6).text = LEGEND_TITLE

        row_y = top + 16
        for bucket in self.state.legend:
            self._add('rect', x=x + 20, y=row_y, width=SWATCH_SIZE, height=SWATCH_SIZE, style=f'fill: {bucket.color}; stroke: #ddd;')
            self._add('text', x=x + 20 + SWATCH_SIZE, y=row_y + SWATCH_SIZE - 2).text = f': {bucket.label}'
            row_y += SWATCH_SIZE + SWATCH_GAP
