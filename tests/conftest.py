import os

import matplotlib
import pytest

from karyoviz.surface import Container, SvgHost

os.environ.setdefault("MPLBACKEND", "Agg")
matplotlib.use(os.environ.get("MPLBACKEND", "Agg"), force=True)


def fixed_width(text):
    """Pretend every character is 7px wide."""
    return 7.0 * len(text)


@pytest.fixture
def host():
    return SvgHost(text_measurer=fixed_width)


@pytest.fixture
def container():
    return Container()


@pytest.fixture
def chr1():
    return {
        "name": "chr1",
        "size": 1000,
        "hit_clusters": [[100, 200, 5], [300, 400, 50]],
        "nrph_hit_clusters": [],
    }


@pytest.fixture
def dataset(chr1):
    return {"singleton_contigs": [chr1], "remaining_genome_contig": None}


@pytest.fixture
def banded_dataset():
    return {
        "singleton_contigs": [
            {
                "name": "chr1",
                "size": 2000,
                "hit_clusters": [[1, 100, 3], [500, 900, 12]],
                "nrph_hit_clusters": [[500, 900, 4]],
                "giesma_bands": [[1, 1000, 0], [1001, 2000, 8]],
            },
            {
                "name": "chr2",
                "size": 1000,
                "hit_clusters": [[10, 20, 1]],
                "nrph_hit_clusters": [],
                "giesma_bands": [[1, 1000, 42]],
            },
        ],
        "remaining_genome_contig": None,
    }
