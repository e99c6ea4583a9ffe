# sismed/utils/file_storage.py
from pathlib import Path

from sismed.core.errors import Cancelled


def resolve_target_path(target: str | Path | None, suggested_filename: str) -> Path:
    """
    Turn the path picked in a save dialog into the file to write.

    ``None`` means the dialog was dismissed. An existing directory gets the
    suggested filename appended.
    """
    if target is None or not str(target).strip():
        raise Cancelled()

    path = Path(target).expanduser()
    if path.is_dir():
        path = path / Path(suggested_filename).name
    return path.resolve()


def write_bytes(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    return path
