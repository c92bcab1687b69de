import logging
from pathlib import Path
from typing import List, Tuple

from portfolio.errors import FilesystemError

logger = logging.getLogger(__name__)


def scan_content_dir(directory, extension: str = ".mdx") -> List[Tuple[str, str]]:
    """
    Read every ``extension`` file directly inside ``directory``.

    Returns ``(slug, raw_text)`` pairs in filesystem order. Subdirectories are
    not descended into.
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise FilesystemError(directory, e.strerror or str(e)) from e

    files = []
    for path in entries:
        if not path.name.endswith(extension) or path.name == extension:
            continue
        if not path.is_file():
            continue
        # A file that lists but cannot be read fails the whole scan, like the directory
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
        slug = path.name[: len(path.name) - len(extension)]
        files.append((slug, _decode(raw, path)))

    logger.debug(f"Scanned {len(files)} content files in {directory}")
    return files


def _decode(raw: bytes, path: Path) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning(f"{path} is not valid UTF-8, replacing undecodable bytes")
        return raw.decode("utf-8-sig", errors="replace")
