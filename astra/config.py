"""Workspace configuration support for the Astra CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from astra.transpiler.state import UNDERFLOW_CLAMP, UNDERFLOW_POLICIES, TranspilerOptions


CONFIG_CANDIDATES = ("astra.toml", ".astrarc")


@dataclass
class CompilerConfig:
    """How generated C++ is compiled."""

    command: Optional[str] = None
    std: str = "c++20"
    output_dir: Optional[Path] = None
    extra_flags: List[str] = field(default_factory=list)


@dataclass
class TranspilerConfig:
    """Translation policies."""

    underflow: str = UNDERFLOW_CLAMP
    indent: int = 4

    def to_options(self) -> TranspilerOptions:
        return TranspilerOptions(underflow=self.underflow, indent=self.indent)


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    compiler: CompilerConfig = field(default_factory=CompilerConfig)
    transpiler: TranspilerConfig = field(default_factory=TranspilerConfig)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_compiler(data: Dict[str, Any], root: Path) -> CompilerConfig:
    section = data.get("compiler") or {}
    command = section.get("command")
    std = str(section.get("std") or CompilerConfig.std)
    output_dir_raw = section.get("output_dir")
    output_dir: Optional[Path] = None
    if output_dir_raw:
        output_dir = Path(output_dir_raw)
        if not output_dir.is_absolute():
            output_dir = (root / output_dir).resolve()
    flags_raw = section.get("extra_flags") or []
    extra_flags: List[str]
    if isinstance(flags_raw, (list, tuple)):
        extra_flags = [str(item) for item in flags_raw]
    elif isinstance(flags_raw, str):
        extra_flags = flags_raw.split()
    else:
        extra_flags = []
    return CompilerConfig(
        command=str(command) if command else None,
        std=std,
        output_dir=output_dir,
        extra_flags=extra_flags,
    )


def _parse_transpiler(data: Dict[str, Any]) -> TranspilerConfig:
    section = data.get("transpiler") or {}
    underflow = str(section.get("underflow") or TranspilerConfig.underflow).lower()
    if underflow not in UNDERFLOW_POLICIES:
        raise ValueError(
            f"Invalid transpiler.underflow '{underflow}'. Expected one of: {', '.join(UNDERFLOW_POLICIES)}"
        )
    indent_raw = section.get("indent", TranspilerConfig.indent)
    try:
        indent = int(indent_raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid transpiler.indent '{indent_raw}': expected an integer") from exc
    if indent < 0:
        raise ValueError("transpiler.indent cannot be negative")
    return TranspilerConfig(underflow=underflow, indent=indent)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """
    Load ``astra.toml`` (or the JSON ``.astrarc``) from ``root``.

    A workspace without a configuration file gets the defaults.

    Raises:
        ValueError: If a setting has an invalid value
    """
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)

    return WorkspaceConfig(
        root=root,
        compiler=_parse_compiler(data, root),
        transpiler=_parse_transpiler(data),
        source=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_CANDIDATES",
    "CompilerConfig",
    "TranspilerConfig",
    "WorkspaceConfig",
    "load_workspace_config",
    "locate_config_file",
]
