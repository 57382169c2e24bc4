"""Tests for the karyoviz command line."""

import json

import pytest

from karyoviz import main


@pytest.fixture
def dataset_file(tmp_path, monkeypatch, banded_dataset):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "karyotype.json"
    path.write_text(json.dumps(banded_dataset))
    return path


def test_render_writes_svg(dataset_file, tmp_path):
    out = tmp_path / "k.svg"
    main.main(["render", "-i", str(dataset_file), "-o", str(out)])
    markup = out.read_text()
    assert markup.startswith("<svg")
    assert 'width="232"' in markup
    assert "Hit Count (per Mb)" in markup


def test_render_giesma(dataset_file, tmp_path):
    out = tmp_path / "k.svg"
    main.main(["render", "-i", str(dataset_file), "-o", str(out), "--mode", "giesma"])
    markup = out.read_text()
    assert "#823c5a" not in markup
    assert "#527280" in markup
    assert "Hit Count" not in markup


def test_render_with_config(dataset_file, tmp_path):
    config = tmp_path / "wide.yaml"
    config.write_text("glyph_width: 20\nlegend_width: 100\n")
    out = tmp_path / "k.svg"
    main.main(["render", "-i", str(dataset_file), "-o", str(out), "--config", str(config)])
    assert 'width="180"' in out.read_text()


def test_missing_input_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main.main(["render", "-i", str(tmp_path / "missing.json")])
    assert exc.value.code == 1


def test_invalid_dataset_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"singleton_contigs": []}))
    with pytest.raises(SystemExit):
        main.main(["render", "-i", str(path)])


def test_summary_table(dataset_file, capsys):
    main.main(["summary", "-i", str(dataset_file)])
    out = capsys.readouterr().out
    assert "chr1" in out and "chr2" in out
    assert "max hit count: 12" in out
    assert "Giesma bands: yes" in out
