import base64
import gzip
from pathlib import Path
from typing import Callable, Iterable

import pytest

# Fixed "now" so age filtering is independent of the wall clock.
NOW = 1_715_261_665
YEAR = 365 * 24 * 3600


def _stats_line(
    path: str,
    size: int = 0,
    gid: int = 0,
    mtime: int = 0,
    ctime: int = 0,
    kind: str = "f",
    extra: Iterable[str] = ("12345", "1", "64768"),
) -> bytes:
    """One wrstat line: path, size, uid, gid, atime, mtime, ctime, kind, extras."""
    encoded = base64.b64encode(path.encode()).decode()
    cols = [encoded, str(size), "1000", str(gid), "0", str(mtime), str(ctime), kind]
    cols.extend(extra)
    return ("\t".join(cols) + "\n").encode()


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def year() -> int:
    return YEAR


@pytest.fixture
def stats_line() -> Callable[..., bytes]:
    return _stats_line


@pytest.fixture
def write_stats(tmp_path: Path) -> Callable[..., Path]:
    def _write(lines: Iterable[bytes], name: str = "test.stats.gz") -> Path:
        out = tmp_path / name
        data = b"".join(lines)
        if out.suffix == ".gz":
            with gzip.open(out, "wb") as fh:
                fh.write(data)
        else:
            out.write_bytes(data)
        return out

    return _write


@pytest.fixture
def write_bom_gids(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "bom.gids") -> Path:
        out = tmp_path / name
        out.write_text(text, encoding="utf-8")
        return out

    return _write
