# karyoviz/file_io.py
import os, json, yaml
from loguru import logger
from .scale import GlyphLayout
from .surface import to_svg_string

CONFIG_KEYS = {f for f in GlyphLayout.__dataclass_fields__} | {'legend_colors', 'mode'}
DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'config', 'karyoviz.yaml')

def load_config(config_path):
    if os.path.exists(config_path):
        with open(config_path, 'r') as f: return yaml.safe_load(f) or {}
    return {}

def merged_config(*paths):
    """Layers config files in order; later files win. Missing files are skipped."""
    config = {}
    for path in paths:
        if not path: continue
        for key, value in load_config(path).items():
            if key not in CONFIG_KEYS: logger.warning(f'Ignoring unknown config key \'{key}\' in {path}.'); continue
            config[key] = value
    return config

def read_dataset(file_path):
    """Reads a karyotype dataset stored as JSON (or YAML) in the same shape the view consumes."""
    with open(file_path, 'r', encoding='utf-8') as f:
        if file_path.endswith(('.yaml', '.yml')): data = yaml.safe_load(f)
        else: data = json.load(f)
    if not isinstance(data, dict) or 'singleton_contigs' not in data:
        raise ValueError(f'\'{file_path}\' has no \'singleton_contigs\' list.')
    logger.info(f'Loaded {len(data["singleton_contigs"])} contig(s) from {os.path.basename(file_path)}')
    return data

def write_svg(svg, out_path):
    out_dir = os.path.dirname(out_path)
    if out_dir: os.makedirs(out_dir, exist_ok=True)
    with open(out_path, 'w', encoding='utf-8') as f: f.write(to_svg_string(svg))
    logger.success(f'Wrote karyotype SVG to {out_path}')
