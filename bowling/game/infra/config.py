"""Game configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from bowling.game.core.models import DEFAULT_MAX_FRAMES, DEFAULT_MAX_PINS_PER_FRAME, GameConfig


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order: ``.env.bowling`` then ``.env.bowling.local``.
    """
    to_load = tuple(paths) if paths is not None else (".env.bowling", ".env.bowling.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config(*, env: Mapping[str, str] | None = None) -> GameConfig:
    """Build game limits from env vars, falling back to defaults on bad values."""
    return GameConfig(
        max_pins_per_frame=_int("BOWLING_MAX_PINS_PER_FRAME", DEFAULT_MAX_PINS_PER_FRAME, env=env),
        max_frames=_int("BOWLING_MAX_FRAMES", DEFAULT_MAX_FRAMES, env=env),
    )


def _int(name: str, default: int, *, minimum: int = 1, env: Mapping[str, str] | None = None) -> int:
    raw = os.getenv(name) if env is None else env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return max(minimum, value)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[3]
    return project_root / path
