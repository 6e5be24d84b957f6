from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_post(
    posts_dir: Path, slug: str, pub_date: str, title: str | None = None, **extra: Any
) -> None:
    write(posts_dir / f"{slug}.html", f"<p>Body of {slug}</p>")
    metadata = {"title": title or slug.title(), "pubDate": pub_date, **extra}
    write(posts_dir / f"{slug}.json", json.dumps(metadata))


def snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
