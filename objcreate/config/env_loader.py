"""Reads ``KEY=VALUE`` settings files.

Supports:
- Comments (lines starting with #) and blank lines
- An optional ``export`` prefix, so files can also be sourced by a shell
- Single or double quotes around values (stripped)
- Inline comments after values are kept as part of the value
"""

from __future__ import annotations

from pathlib import Path


def load_env_file(path: str | Path) -> dict[str, str]:
    """Parse *path* into a dict. A missing file yields an empty dict."""
    env_file = Path(path)
    if not env_file.is_file():
        return {}
    return dict(_parse_lines(env_file.read_text().splitlines()))


def _parse_lines(lines: list[str]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, _, value = line.partition("=")
        pairs.append((key.strip(), _unquote(value.strip())))
    return pairs


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value
