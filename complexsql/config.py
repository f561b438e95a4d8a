"""Workspace configuration support for the complexsql CLI and language server."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

from .errors import ConfigError
from .formatting import FormattingOptions, IndentStyle
from .lang import CLAUSE_KEYWORDS, FUNCTIONS, KEYWORDS, Category, normalize_words
from .observability.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAMES = ("complexsql.toml", ".complexsqlrc")


@dataclass
class HighlightSettings:
    """Additions to the builtin word lists and CSS class overrides."""

    extra_keywords: List[str] = field(default_factory=list)
    extra_functions: List[str] = field(default_factory=list)
    css_classes: Dict[Category, str] = field(default_factory=dict)


@dataclass
class FormatSettings:
    """Formatter settings resolved from the ``[format]`` section."""

    indent_size: int = 4
    indent_style: IndentStyle = IndentStyle.SPACES
    clause_keywords: List[str] = field(default_factory=lambda: list(CLAUSE_KEYWORDS))
    split_statements: bool = False


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    highlight: HighlightSettings = field(default_factory=HighlightSettings)
    format: FormatSettings = field(default_factory=FormatSettings)
    path: Optional[Path] = None

    def keywords(self) -> FrozenSet[str]:
        return normalize_words(KEYWORDS | set(self.highlight.extra_keywords))

    def functions(self) -> FrozenSet[str]:
        return normalize_words(FUNCTIONS | set(self.highlight.extra_functions))

    def formatting_options(self) -> FormattingOptions:
        return FormattingOptions(
            indent_style=self.format.indent_style,
            indent_size=self.format.indent_size,
            clause_keywords=list(self.format.clause_keywords),
            split_statements=self.format.split_statements,
        )


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON configuration: {exc.msg}",
            path=str(path),
            line=exc.lineno,
            column=exc.colno,
        ) from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise ConfigError(
            "TOML parsing requires Python 3.11 or later.",
            path=str(path),
            hint="Use a JSON .complexsqlrc file instead",
        )
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML configuration: {exc}", path=str(path)) from exc


def _section(data: Dict[str, Any], name: str, path: Path) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a table", path=str(path))
    return section


def _word_list(section: Dict[str, Any], key: str, path: Path) -> List[str]:
    values = section.get(key) or []
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, (list, tuple)):
        raise ConfigError(f"'{key}' must be a list of words", path=str(path))
    return [str(value) for value in values]


def _parse_highlight(data: Dict[str, Any], path: Path) -> HighlightSettings:
    section = _section(data, "highlight", path)
    classes_raw = section.get("css_classes") or {}
    if not isinstance(classes_raw, dict):
        raise ConfigError("'css_classes' must map categories to class names", path=str(path))

    css_classes: Dict[Category, str] = {}
    for name, css_class in classes_raw.items():
        try:
            category = Category(str(name).lower())
        except ValueError as exc:
            valid = ", ".join(category.value for category in Category)
            raise ConfigError(
                f"Unknown highlight category '{name}'",
                path=str(path),
                hint=f"Valid categories: {valid}",
            ) from exc
        css_classes[category] = str(css_class)

    return HighlightSettings(
        extra_keywords=_word_list(section, "extra_keywords", path),
        extra_functions=_word_list(section, "extra_functions", path),
        css_classes=css_classes,
    )


def _parse_format(data: Dict[str, Any], path: Path) -> FormatSettings:
    section = _section(data, "format", path)

    indent_size_raw = section.get("indent_size", FormatSettings.indent_size)
    if isinstance(indent_size_raw, bool) or not isinstance(indent_size_raw, int) or indent_size_raw < 1:
        raise ConfigError("'indent_size' must be a positive integer", path=str(path))

    indent_style_raw = str(section.get("indent_style") or IndentStyle.SPACES.value).lower()
    try:
        indent_style = IndentStyle(indent_style_raw)
    except ValueError as exc:
        raise ConfigError(
            f"Unknown indent style '{indent_style_raw}'",
            path=str(path),
            hint="Use 'spaces' or 'tabs'",
        ) from exc

    split_statements = section.get("split_statements", False)
    if not isinstance(split_statements, bool):
        raise ConfigError("'split_statements' must be true or false", path=str(path))

    clause_keywords = (
        _word_list(section, "clause_keywords", path)
        if "clause_keywords" in section
        else list(CLAUSE_KEYWORDS)
    )

    return FormatSettings(
        indent_size=indent_size_raw,
        indent_style=indent_style,
        clause_keywords=clause_keywords,
        split_statements=split_statements,
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        if explicit is not None:
            raise ConfigError("Configuration file not found", path=str(explicit))
        return WorkspaceConfig(root=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a table", path=str(config_path))

    logger.debug("Loaded workspace configuration from %s", config_path)
    return WorkspaceConfig(
        root=root,
        highlight=_parse_highlight(data, config_path),
        format=_parse_format(data, config_path),
        path=config_path,
    )


__all__ = [
    "CONFIG_FILENAMES",
    "FormatSettings",
    "HighlightSettings",
    "WorkspaceConfig",
    "load_workspace_config",
    "locate_config_file",
]
