"""Tests for workspace configuration loading."""

import json

import pytest

from complexsql import config as config_module
from complexsql.config import WorkspaceConfig, load_workspace_config, locate_config_file
from complexsql.errors import ConfigError
from complexsql.formatting import IndentStyle
from complexsql.lang import Category

requires_tomllib = pytest.mark.skipif(config_module.tomllib is None, reason="tomllib needs Python 3.11+")


class TestDefaults:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_workspace_config(tmp_path)

        assert config.path is None
        assert config.root == tmp_path.resolve()
        assert "SELECT" in config.keywords()
        assert "COUNT" in config.functions()
        options = config.formatting_options()
        assert options.indent_size == 4
        assert options.indent_style is IndentStyle.SPACES
        assert not options.split_statements

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError) as excinfo:
            load_workspace_config(tmp_path, tmp_path / "nope.toml")
        assert "not found" in excinfo.value.message


@requires_tomllib
class TestTomlConfig:
    def test_full_config(self, tmp_path):
        (tmp_path / "complexsql.toml").write_text(
            """
[highlight]
extra_keywords = ["qualify"]
extra_functions = ["my_udf"]

[highlight.css_classes]
keyword = "sql-kw"

[format]
indent_size = 2
indent_style = "tabs"
clause_keywords = ["FROM", "UNION"]
split_statements = true
""",
            encoding="utf-8",
        )
        config = load_workspace_config(tmp_path)

        assert config.path == tmp_path.resolve() / "complexsql.toml"
        assert "QUALIFY" in config.keywords()
        assert "MY_UDF" in config.functions()
        assert config.highlight.css_classes == {Category.KEYWORD: "sql-kw"}
        options = config.formatting_options()
        assert options.indent_size == 2
        assert options.indent_style is IndentStyle.TABS
        assert list(options.clause_keywords) == ["FROM", "UNION"]
        assert options.split_statements

    def test_invalid_toml(self, tmp_path):
        (tmp_path / "complexsql.toml").write_text("[format\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_workspace_config(tmp_path)

    @pytest.mark.parametrize("value", ["0", "true", '"four"'])
    def test_invalid_indent_size(self, tmp_path, value):
        (tmp_path / "complexsql.toml").write_text(f"[format]\nindent_size = {value}\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="indent_size"):
            load_workspace_config(tmp_path)

    def test_invalid_indent_style(self, tmp_path):
        (tmp_path / "complexsql.toml").write_text('[format]\nindent_style = "zigzag"\n', encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            load_workspace_config(tmp_path)
        assert excinfo.value.hint == "Use 'spaces' or 'tabs'"

    def test_unknown_css_category(self, tmp_path):
        (tmp_path / "complexsql.toml").write_text('[highlight.css_classes]\noperator = "op"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="Unknown highlight category 'operator'"):
            load_workspace_config(tmp_path)


class TestJsonConfig:
    def test_rc_file(self, tmp_path):
        (tmp_path / ".complexsqlrc").write_text(
            json.dumps({"format": {"indent_size": 3}, "highlight": {"extra_keywords": "merge"}}),
            encoding="utf-8",
        )
        config = load_workspace_config(tmp_path)

        assert config.format.indent_size == 3
        assert "MERGE" in config.keywords()

    def test_invalid_json_has_location(self, tmp_path):
        (tmp_path / ".complexsqlrc").write_text('{"format": }', encoding="utf-8")
        with pytest.raises(ConfigError) as excinfo:
            load_workspace_config(tmp_path)
        assert excinfo.value.line == 1
        assert "Invalid JSON" in excinfo.value.format()

    def test_root_must_be_table(self, tmp_path):
        (tmp_path / ".complexsqlrc").write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be a table"):
            load_workspace_config(tmp_path)

    @pytest.mark.parametrize("value", ["\"false\"", "1", "null"])
    def test_split_statements_must_be_bool(self, tmp_path, value):
        (tmp_path / ".complexsqlrc").write_text(
            f'{{"format": {{"split_statements": {value}}}}}', encoding="utf-8"
        )
        with pytest.raises(ConfigError, match="split_statements"):
            load_workspace_config(tmp_path)

    def test_split_statements_bool(self, tmp_path):
        (tmp_path / ".complexsqlrc").write_text('{"format": {"split_statements": true}}', encoding="utf-8")
        assert load_workspace_config(tmp_path).formatting_options().split_statements

    def test_section_must_be_table(self, tmp_path):
        (tmp_path / ".complexsqlrc").write_text('{"format": 4}', encoding="utf-8")
        with pytest.raises(ConfigError, match="Section 'format'"):
            load_workspace_config(tmp_path)


class TestLocateConfigFile:
    def test_toml_preferred_over_rc(self, tmp_path):
        (tmp_path / "complexsql.toml").write_text("", encoding="utf-8")
        (tmp_path / ".complexsqlrc").write_text("{}", encoding="utf-8")
        assert locate_config_file(tmp_path).name == "complexsql.toml"

    def test_none_when_absent(self, tmp_path):
        assert locate_config_file(tmp_path) is None


def test_workspace_config_is_independent_per_instance(tmp_path):
    first = WorkspaceConfig(root=tmp_path)
    second = WorkspaceConfig(root=tmp_path)
    first.highlight.extra_keywords.append("QUALIFY")
    assert "QUALIFY" not in second.keywords()
