from pathlib import Path
from typer.testing import CliRunner
from bomstats.cli.app import app

runner = CliRunner()

OLD = 1_000_000_000  # 2001, comfortably older than any --age used here


def test_cli_dirstats_roundtrip(tmp_path: Path, stats_line, write_stats, write_bom_gids):
    dump = write_stats(
        [
            stats_line("/lustre/t/a/x.bam", size=300, gid=5, mtime=OLD, ctime=OLD),
            stats_line("/lustre/t/b/y.bam", size=200, gid=6, mtime=OLD, ctime=OLD),
            stats_line("/lustre/t/b", kind="d", gid=6, mtime=OLD, ctime=OLD),
        ]
    )
    bom_gids = write_bom_gids("Blaxter Lab\t5,6\n")
    prefix = tmp_path / "out"

    r = runner.invoke(
        app,
        ["dirstats", "-b", str(bom_gids), "-a", "7", "-o", str(prefix), str(dump)],
    )
    assert r.exit_code == 0, r.output

    target = Path(f"{prefix}.BlaxterLab.tsv")
    assert f"Wrote {target}" in r.stdout
    assert target.read_text().splitlines() == [
        "/\t2\t500",
        "/lustre\t2\t500",
        "/lustre/t\t2\t500",
        "/lustre/t/a\t1\t300",
        "/lustre/t/b\t1\t200",
    ]


def test_cli_multiple_inputs_are_combined(tmp_path: Path, stats_line, write_stats, write_bom_gids):
    first = write_stats([stats_line("/p/a/f", size=1, gid=5, mtime=OLD, ctime=OLD)], name="1.stats.gz")
    second = write_stats([stats_line("/p/b/f", size=2, gid=5, mtime=OLD, ctime=OLD)], name="2.stats")
    bom_gids = write_bom_gids("L\t5\n")
    prefix = tmp_path / "multi"

    r = runner.invoke(
        app, ["dirstats", "-b", str(bom_gids), "-o", str(prefix), str(first), str(second)]
    )
    assert r.exit_code == 0, r.output
    lines = Path(f"{prefix}.L.tsv").read_text().splitlines()
    assert lines[:2] == ["/\t2\t3", "/p\t2\t3"]


def test_cli_human_sizes(tmp_path: Path, stats_line, write_stats, write_bom_gids):
    dump = write_stats([stats_line("/g/f", size=3 << 30, gid=5, mtime=OLD, ctime=OLD)])
    bom_gids = write_bom_gids("L\t5\n")
    prefix = tmp_path / "h"

    r = runner.invoke(
        app, ["dirstats", "-b", str(bom_gids), "-o", str(prefix), "--human", str(dump)]
    )
    assert r.exit_code == 0, r.output
    assert Path(f"{prefix}.L.tsv").read_text().splitlines() == ["/\t1\t3.00", "/g\t1\t3.00"]


def test_cli_count(stats_line, write_stats):
    dump = write_stats(
        [
            stats_line("/d", kind="d", mtime=OLD, ctime=OLD),
            stats_line("/d/old", mtime=OLD, ctime=OLD),
            stats_line("/d/new", mtime=4_000_000_000, ctime=4_000_000_000),
        ]
    )

    everything = runner.invoke(app, ["count", str(dump)])
    assert everything.exit_code == 0, everything.output
    assert everything.stdout.strip() == "3"

    old = runner.invoke(app, ["count", "-a", "7", str(dump)])
    assert old.exit_code == 0, old.output
    assert old.stdout.strip() == "1"


def test_cli_count_reads_stdin(stats_line):
    data = stats_line("/a/1") + stats_line("/a/2")
    r = runner.invoke(app, ["count", "-"], input=data)
    assert r.exit_code == 0, r.output
    assert r.stdout.strip() == "2"
