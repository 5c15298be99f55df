# tests/unit/test_bom_gids.py
from pathlib import Path

import pytest

from bomstats.adapters.ownership.bom_gids import BomGidsTable
from bomstats.domain.errors import (
    InvalidOwnershipTableError,
    UnknownOwnershipGroupError,
)


def test_parses_labels_and_gids():
    table = BomGidsTable.from_lines(["CASM\t1,2,3\n", "Tree of Life\t4\n"])
    assert table.label_for(1) == "CASM"
    assert table.label_for(3) == "CASM"
    assert table.label_for(4) == "TreeofLife"
    assert len(table) == 4
    assert table.labels() == {"CASM", "TreeofLife"}


def test_last_seen_label_wins():
    table = BomGidsTable.from_lines(["A\t1,2", "B\t2"])
    assert table.label_for(1) == "A"
    assert table.label_for(2) == "B"


def test_unknown_gid_raises():
    table = BomGidsTable.from_lines(["A\t1"])
    with pytest.raises(UnknownOwnershipGroupError) as exc:
        table.label_for(99)
    assert exc.value.gid == 99
    assert "99" in str(exc.value)


@pytest.mark.parametrize(
    "line",
    [
        "A",  # one column
        "A\t1\t2",  # three columns
        "",  # blank
    ],
)
def test_wrong_column_count_is_fatal(line):
    with pytest.raises(InvalidOwnershipTableError):
        BomGidsTable.from_lines(["Good\t1", line])


@pytest.mark.parametrize("gids", ["x", "1,,2", "1,-2", "", "²", "١٢", "1,٣"])
def test_non_numeric_gid_is_fatal(gids):
    with pytest.raises(InvalidOwnershipTableError) as exc:
        BomGidsTable.from_lines([f"A\t{gids}"])
    assert exc.value.line_number == 1


def test_from_path(tmp_path: Path, write_bom_gids):
    p = write_bom_gids("Human Genetics\t100,101\nCellular Genetics\t200\n")
    table = BomGidsTable.from_path(p)
    assert table.label_for(101) == "HumanGenetics"
    assert table.label_for(200) == "CellularGenetics"


def test_from_path_rejects_non_utf8(tmp_path: Path):
    p = tmp_path / "bom.gids"
    p.write_bytes(b"L\xff\t5\n")
    with pytest.raises(InvalidOwnershipTableError) as exc:
        BomGidsTable.from_path(p)
    assert "not UTF-8" in str(exc.value)
