# karyoviz/surface.py
"""A small in-process SVG host: element nodes, pointer events, screen transform and text measurement."""
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from loguru import logger

SVG_NS = 'http://www.w3.org/2000/svg'
TOOLTIP_FONT_SIZE = 16

@dataclass(frozen=True)
class Matrix:
    a: float = 1.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

@dataclass
class PointerEvent:
    type: str
    client_x: float = 0.0
    client_y: float = 0.0
    target: object = None

class SvgNode:
    def __init__(self, tag, namespace=SVG_NS):
        self.tag, self.namespace = tag, namespace
        self.element = ET.Element(tag)
        self.children, self.parent = [], None
        self._listeners = {}

    def set(self, name, value): self.element.set(name, str(value))

    def get(self, name, default=None): return self.element.get(name, default)

    @property
    def text(self): return self.element.text or ''

    @text.setter
    def text(self, value): self.element.text = value

    def append(self, child):
        if child.parent is not None: child.parent.remove(child)
        self.children.append(child); self.element.append(child.element)
        child.parent = self
        return child

    def remove(self, child):
        self.children.remove(child); self.element.remove(child.element)
        child.parent = None

    def iter(self, tag=None):
        if tag is None or self.tag == tag: yield self
        for child in self.children: yield from child.iter(tag)

    def add_event_listener(self, event_type, callback): self._listeners.setdefault(event_type, []).append(callback)

    def listener_count(self): return sum(len(cbs) for node in self.iter() for cbs in node._listeners.values())

    def remove_event_listeners(self):
        """Drops every listener registered on this node and its descendants."""
        for node in self.iter(): node._listeners.clear()

    def dispatch(self, event):
        if event.target is None: event.target = self
        for callback in list(self._listeners.get(event.type, [])): callback(event)

class Container(SvgNode):
    """The host-owned parent a view attaches its surface to."""
    def __init__(self, tag='div'): super().__init__(tag, namespace=None)

def matplotlib_text_width(text, font_size=TOOLTIP_FONT_SIZE):
    if not text: return 0.0
    from matplotlib.font_manager import FontProperties
    from matplotlib.textpath import TextPath
    return float(TextPath((0, 0), text, prop=FontProperties(family='sans-serif', size=font_size)).get_extents().width)

class SvgHost:
    """Creates nodes and answers the geometry queries a browser would normally answer."""
    def __init__(self, screen_ctm=None, text_measurer=None):
        self.screen_ctm = screen_ctm or Matrix()
        self.text_measurer = text_measurer or matplotlib_text_width

    def create_element(self, tag, namespace=SVG_NS): return SvgNode(tag, namespace)

    def get_screen_ctm(self, node): return self.screen_ctm

    def computed_text_length(self, node): return self.text_measurer(node.text)

    def detach(self, node):
        if node.parent is not None: node.parent.remove(node)
        node.remove_event_listeners()
        logger.debug(f'Detached <{node.tag}> surface.')

def to_svg_string(node):
    return ET.tostring(node.element, encoding='unicode')
