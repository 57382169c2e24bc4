# karyoviz/summary.py
from dataclasses import dataclass
import numpy as np
from loguru import logger
from .errors import InvalidDatasetError

@dataclass(frozen=True)
class DatasetSummary:
    max_hit_magnitude: int
    max_nrph_hit_magnitude: int
    has_staining_data: bool
    reference_size: int
    bar_count: int

def _max_count(contig, key):
    intervals = contig.get(key)
    if intervals is None: raise InvalidDatasetError(f'Contig \'{contig.get("name")}\' has no \'{key}\' list.')
    for start, end, count in intervals:
        if start > end: raise InvalidDatasetError(f'{contig["name"]}:{start}-{end} in \'{key}\' ends before it starts.')
        if count < 0: raise InvalidDatasetError(f'{contig["name"]}:{start}-{end} in \'{key}\' has a negative count ({count}).')
    return int(np.max([iv[2] for iv in intervals], initial=0))

def summarize(dataset):
    """Scans every contig once and collects the maxima used for scaling and legends."""
    contigs = dataset.get('singleton_contigs') or []
    if not contigs: raise InvalidDatasetError('Dataset contains no contigs to display.')
    max_hit, max_nrph, has_bands = 0, 0, False
    for contig in contigs:
        if contig.get('size') is None or contig['size'] <= 0:
            raise InvalidDatasetError(f'Contig \'{contig.get("name")}\' must have a positive size, got {contig.get("size")}.')
        if contig.get('giesma_bands'): has_bands = True
        max_hit = max(max_hit, _max_count(contig, 'hit_clusters'))
        max_nrph = max(max_nrph, _max_count(contig, 'nrph_hit_clusters'))

    reference_size = max(c['size'] for c in contigs)
    if contigs[0]['size'] != reference_size:
        logger.warning(f'Contigs are not sorted by size; scaling to the largest contig ({reference_size} bp) instead of \'{contigs[0]["name"]}\'.')
    bar_count = len(contigs) + (1 if dataset.get('remaining_genome_contig') is not None else 0)
    summary = DatasetSummary(max_hit, max_nrph, has_bands, reference_size, bar_count)
    logger.info(f'Summarized {len(contigs)} contig(s): max hits {max_hit}, max NRPH hits {max_nrph}, Giesma bands {"present" if has_bands else "absent"}.')
    return summary
