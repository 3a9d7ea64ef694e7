# ./app/core/fs.py

from pathlib import Path
from app.core.config import settings

def ensure_dirs() -> None:
    settings.export_dir_path.mkdir(parents=True, exist_ok=True)

def export_output_path(file_name: str | None = None) -> Path:
    return settings.export_dir_path / (file_name or settings.EXPORT_FILE_NAME)

def read_snapshot(path: str | Path) -> str | None:
    # 파일이 없으면 "선택 안 함"과 같은 취급 (no-op)
    p = Path(path)
    if not p.is_file():
        return None
    return p.read_text(encoding="utf-8")

def write_snapshot(path: str | Path, text: str) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p
