# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import Iterator, List, NoReturn, Optional

import typer

from ..adapters.ownership.bom_gids import BomGidsTable
from ..adapters.report.tsv_writer import TsvReportWriter
from ..adapters.stats.filters import years
from ..adapters.stats.opener import open_stats
from ..adapters.stats.parser import StatsParser
from ..domain.errors import BomStatsError
from ..domain.models import Record
from ..logging_config import enable_verbose, setup_logging
from ..services import DirectoryStatsService, ReportService

setup_logging()

app = typer.Typer(
    help="bomstats - per-BoM directory statistics for old files in wrstat stats.gz dumps"
)

DEFAULT_AGE_YEARS = 7
MAX_AGE_YEARS = 10_000

logger = logging.getLogger(__name__)


def _validate_age(age: int) -> int:
    if age <= 0:
        raise typer.BadParameter("--age must be greater than 0")
    if age > MAX_AGE_YEARS:
        raise typer.BadParameter(f"--age must be at most {MAX_AGE_YEARS}")
    return age


def _die(err: Exception) -> NoReturn:
    typer.echo(f"ERROR: {err}", err=True)
    raise typer.Exit(code=1)


def _records(
    stack: ExitStack, paths: List[Path], age: Optional[int]
) -> Iterator[Record]:
    """
    Chain one parser per input into a single record stream.
    Inputs are opened lazily, one after another.
    """
    for path in paths:
        fh = stack.enter_context(open_stats(path))
        parser = StatsParser(fh)
        if age is not None:
            parser.filter_for_files_older_than(years(age))
        logger.debug("Reading %s", path)
        yield from parser


# ------------------------------
# CLI Commands
# ------------------------------


@app.command()
def dirstats(
    stats: List[Path] = typer.Argument(
        ..., help="wrstat stats files (.gz is decompressed; '-' reads stdin)"
    ),
    bom_gids: Path = typer.Option(
        ...,
        "--bom-gids",
        "-b",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Path to the bom.gids file (<bom>\\t<gid>,<gid>...)",
    ),
    age: int = typer.Option(
        DEFAULT_AGE_YEARS,
        "--age",
        "-a",
        help="Age of files to report on (years, per oldest of c&mtime)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output path prefix; files are named '<prefix>.<bom>.tsv'. "
        "If omitted, '<bom>.tsv' is written to the current directory.",
    ),
    human: bool = typer.Option(
        False, "--human", help="Report sizes in GiB (two decimals) instead of bytes"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Write one TSV per BoM with columns: directory, number of files older than
    --age years nested within it, and their total size.
    """
    if verbose:
        enable_verbose()
        logger.debug("Verbose logging enabled")

    _validate_age(age)

    try:
        ownership = BomGidsTable.from_path(bom_gids)
        report = ReportService(
            DirectoryStatsService(ownership), TsvReportWriter(out, human=human)
        )
        with ExitStack() as stack:
            written = report.write_report(_records(stack, stats, age))
    except (BomStatsError, OSError) as e:
        _die(e)

    for path in written:
        typer.echo(f"Wrote {path}")


@app.command()
def count(
    stats: List[Path] = typer.Argument(
        ..., help="wrstat stats files (.gz is decompressed; '-' reads stdin)"
    ),
    age: Optional[int] = typer.Option(
        None,
        "--age",
        "-a",
        help="Only count regular files at least this many years old. "
        "Omit to count every entry.",
    ),
):
    """
    Count the entries that pass the age filter, without any BoM lookup.
    """
    if age is not None:
        _validate_age(age)

    try:
        with ExitStack() as stack:
            n = sum(1 for _ in _records(stack, stats, age))
    except (BomStatsError, OSError) as e:
        _die(e)

    typer.echo(str(n))
