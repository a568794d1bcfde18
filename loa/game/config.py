from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .outcome import TieBreak


@dataclass
class GameConfig:
    tie_break: TieBreak = TieBreak.MOVER
    max_moves: Optional[int] = None
    show_board_after_move: bool = False
    prompt: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}.")
        config = cls()
        values: Dict[str, Any] = {}
        if data.get("tie_break") is not None:
            values["tie_break"] = TieBreak(str(data["tie_break"]).lower())
        if data.get("max_moves") is not None:
            max_moves = int(data["max_moves"])
            if max_moves <= 0:
                raise ValueError("max_moves must be positive.")
            values["max_moves"] = max_moves
        for name in ("show_board_after_move", "prompt"):
            if data.get(name) is not None:
                values[name] = bool(data[name])
        return replace(config, **values)


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
