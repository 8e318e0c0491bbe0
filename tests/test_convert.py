from __future__ import annotations

from brogue_scanner.data import FileFormat, convert_catalog, convert_catalogs, is_valid_csv_format, iter_records

from conftest import HEADER, catalog_text, write_utf16


def test_convert_preserves_cells(utf16_catalog, tmp_path):
    out = convert_catalog(utf16_catalog, tmp_path / "out" / "catalog.csv")

    raw = out.read_bytes()
    assert raw.decode("utf-8") == catalog_text()
    assert is_valid_csv_format(out, FileFormat.UTF8)
    assert len(raw) < len(utf16_catalog.read_bytes())


def test_convert_small_chunks(utf16_catalog, tmp_path):
    out = convert_catalog(utf16_catalog, tmp_path / "catalog.csv", chunksize=2)
    before = list(iter_records(utf16_catalog, FileFormat.UTF16))
    assert list(iter_records(out, FileFormat.UTF8)) == before


def test_convert_header_only(tmp_path):
    src = write_utf16(tmp_path / "in" / "empty.csv", HEADER + "\n")
    out = convert_catalog(src, tmp_path / "out" / "empty.csv")
    assert out.read_text(encoding="utf-8") == HEADER + "\n"


def test_convert_catalogs_skips_invalid_files(split_catalogs, tmp_path, capsys):
    bad = write_utf16(split_catalogs / "c_bad.csv", "seed,depth\n1,1\n")
    paths = sorted(split_catalogs.iterdir())

    written = convert_catalogs(paths, tmp_path / "utf8")
    assert [p.name for p in written] == ["a_seeds_1_2.csv", "b_seeds_3_4.csv"]
    out = capsys.readouterr().out
    assert f"Skipping {bad}" in out
    assert "✓ Converted 2 catalog(s)" in out


def test_convert_catalogs_skips_ragged_rows(tmp_path, capsys):
    ragged = write_utf16(tmp_path / "in" / "ragged.csv", catalog_text([1]) + "CE 1.12,2,1,1,food,mango,,,,,,,,extra\n")

    assert convert_catalogs([ragged], tmp_path / "utf8") == []
    assert not (tmp_path / "utf8" / "ragged.csv").exists()
    assert f"Skipping {ragged}" in capsys.readouterr().out
