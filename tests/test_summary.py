"""Tests for dataset summarizing and validation."""

import pytest

from karyoviz.errors import InvalidDatasetError
from karyoviz.summary import summarize


class TestMaxima:
    """Maxima are taken over every contig's cluster lists."""

    def test_max_hit_magnitudes(self, banded_dataset):
        summary = summarize(banded_dataset)
        assert summary.max_hit_magnitude == 12
        assert summary.max_nrph_hit_magnitude == 4

    def test_empty_cluster_lists_give_zero(self, chr1):
        chr1["hit_clusters"] = []
        summary = summarize({"singleton_contigs": [chr1]})
        assert summary.max_hit_magnitude == 0
        assert summary.max_nrph_hit_magnitude == 0

    def test_staining_presence(self, dataset, banded_dataset):
        assert summarize(dataset).has_staining_data is False
        assert summarize(banded_dataset).has_staining_data is True

    def test_empty_band_lists_are_not_staining_data(self, chr1):
        chr1["giesma_bands"] = []
        assert summarize({"singleton_contigs": [chr1]}).has_staining_data is False


class TestReference:
    """Reference size and bar count."""

    def test_reference_is_first_contig_when_sorted(self, banded_dataset):
        summary = summarize(banded_dataset)
        assert summary.reference_size == 2000
        assert summary.bar_count == 2

    def test_unsorted_input_uses_largest_contig(self, banded_dataset):
        banded_dataset["singleton_contigs"].reverse()
        assert summarize(banded_dataset).reference_size == 2000
        # The caller's list is left as given.
        assert banded_dataset["singleton_contigs"][0]["name"] == "chr2"

    def test_remaining_genome_contig_adds_a_bar(self, dataset):
        dataset["remaining_genome_contig"] = {"name": "rest", "size": 10}
        assert summarize(dataset).bar_count == 2


class TestValidation:
    """Malformed datasets fail at construction."""

    def test_no_contigs(self):
        with pytest.raises(InvalidDatasetError):
            summarize({"singleton_contigs": []})

    def test_non_positive_size(self, chr1):
        chr1["size"] = 0
        with pytest.raises(InvalidDatasetError):
            summarize({"singleton_contigs": [chr1]})

    def test_reversed_interval(self, chr1):
        chr1["hit_clusters"] = [[200, 100, 1]]
        with pytest.raises(InvalidDatasetError):
            summarize({"singleton_contigs": [chr1]})

    def test_negative_count(self, chr1):
        chr1["nrph_hit_clusters"] = [[1, 10, -1]]
        with pytest.raises(InvalidDatasetError):
            summarize({"singleton_contigs": [chr1]})

    def test_missing_cluster_list(self, chr1):
        del chr1["nrph_hit_clusters"]
        with pytest.raises(InvalidDatasetError):
            summarize({"singleton_contigs": [chr1]})
