# karyoviz/main.py
import argparse, os, sys
import pandas as pd
from loguru import logger
from . import file_io, __version__
from .errors import KaryotypeError
from .karyotype import KaryotypeView, Mode
from .legend import LEGEND_COLORS
from .scale import GlyphLayout
from .summary import summarize
from .surface import Container

def setup_logging(): logger.remove(); logger.add(sys.stderr, format='<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>')

def contig_table(dataset):
    rows = [{'name': c['name'], 'size': c['size'], 'hit_clusters': len(c['hit_clusters']),
             'max_hits': max((iv[2] for iv in c['hit_clusters']), default=0),
             'nrph_hit_clusters': len(c['nrph_hit_clusters']),
             'max_nrph_hits': max((iv[2] for iv in c['nrph_hit_clusters']), default=0),
             'giesma_bands': len(c.get('giesma_bands') or [])} for c in dataset['singleton_contigs']]
    return pd.DataFrame(rows)

def render(args):
    dataset = file_io.read_dataset(args.input)
    layout = GlyphLayout.from_config(vars(args))
    container = Container()
    view = KaryotypeView(container, dataset, layout=layout, legend_colors=getattr(args, 'legend_colors', None) or LEGEND_COLORS)
    mode = args.mode or Mode.ALL.value
    shown = view.switch_visualization(mode)
    if shown != mode: logger.warning(f'Requested \'{mode}\' view but \'{shown.value}\' was drawn.')
    file_io.write_svg(view.svg, args.output)

def summary(args):
    dataset = file_io.read_dataset(args.input)
    stats = summarize(dataset)
    print(contig_table(dataset).to_string(index=False))
    print(f'\nmax hit count: {stats.max_hit_magnitude}\nmax NRPH hit count: {stats.max_nrph_hit_magnitude}\n'
          f'Giesma bands: {"yes" if stats.has_staining_data else "no"}\nreference contig size: {stats.reference_size} bp')

def main(argv=None):
    setup_logging()
    config = file_io.merged_config(file_io.DEFAULT_CONFIG, 'karyoviz.yaml')
    parser = argparse.ArgumentParser(description=f'karyoviz v{__version__}', formatter_class=argparse.RawTextHelpFormatter)
    subparsers = parser.add_subparsers(dest='command', required=True)
    p_render = subparsers.add_parser('render', help='Draw a karyotype SVG from a dataset file.', formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    p_render.add_argument('-i', '--input', required=True, help='Dataset file (JSON or YAML).')
    p_render.add_argument('-o', '--output', default='karyotype.svg')
    p_render.add_argument('--mode', choices=[m.value for m in Mode], help='Visualization to draw.')
    p_render.add_argument('--config', help='YAML file overriding layout and legend colors.')
    p_render.set_defaults(func=render, **config)
    p_summary = subparsers.add_parser('summary', help='Print per-contig statistics for a dataset file.')
    p_summary.add_argument('-i', '--input', required=True, help='Dataset file (JSON or YAML).')
    p_summary.set_defaults(func=summary)

    args = parser.parse_args(argv)
    if getattr(args, 'config', None):
        if not os.path.exists(args.config): logger.critical(f'Config file not found: {args.config}'); sys.exit(1)
        p_render.set_defaults(**file_io.merged_config(args.config))
        args = parser.parse_args(argv)
    try: args.func(args)
    except FileNotFoundError as e: logger.critical(f'File not found: {e.filename}'); sys.exit(1)
    except (KaryotypeError, ValueError) as e: logger.critical(f'FATAL: {e}'); sys.exit(1)
    logger.success('karyoviz finished.')

if __name__ == '__main__': main()
