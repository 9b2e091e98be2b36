"""
Tests for the preview driver and CLI.
"""

import pytest
from click.testing import CliRunner

from codegen_comments.commenter import CommentAnnotator
from codegen_comments.exceptions import InputError
from codegen_comments.main import CommentPreview, load_tables, main


@pytest.fixture
def runner(monkeypatch):
    for variable in ("CODEGEN_COMMENTS_SUPPRESS_DATE",
                     "CODEGEN_COMMENTS_SUPPRESS_ALL_COMMENTS",
                     "CODEGEN_COMMENTS_DATE_FORMAT"):
        monkeypatch.delenv(variable, raising=False)
    return CliRunner()


class TestLoadTables:
    """Tests for reading table descriptions."""

    def test_tables_and_columns(self, tables_file):
        tables = load_tables(tables_file)
        assert len(tables) == 1
        table = tables[0]
        assert table.get_fully_qualified_table() == "foo.bar"
        assert table.remarks == "Bars of foo"
        assert [c.actual_column_name for c in table.columns] == ["baz", "item_count"]
        assert table.columns[1].java_type == "Integer"
        assert table.columns[1].java_property == "itemCount"
        assert table.columns[1].remarks is None

    def test_numeric_remarks_become_text(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("tables:\n  - name: t\n    remarks: 42\n")
        assert load_tables(path)[0].remarks == "42"

    def test_missing_tables_list(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("other: 1\n")
        with pytest.raises(InputError):
            load_tables(path)

    def test_table_without_name(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("tables:\n  - remarks: nameless\n")
        with pytest.raises(InputError):
            load_tables(path)

    def test_column_without_name(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("tables:\n  - name: t\n    columns:\n      - type: String\n")
        with pytest.raises(InputError):
            load_tables(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("tables: [\n")
        with pytest.raises(InputError):
            load_tables(path)


class TestCommentPreview:
    """Tests for building model classes through the hooks."""

    def test_model_class(self, annotator, tables_file):
        model = CommentPreview(annotator, package="com.acme").build_model_class(load_tables(tables_file)[0])
        assert model.name == "Bar"
        assert model.package == "com.acme"
        assert model.java_doc_lines == ["/** foo.bar Bars of foo */"]
        assert [f.name for f in model.fields] == ["baz", "itemCount"]
        assert model.fields[0].java_doc_lines == ["/** foo.bar.baz The baz */"]
        assert model.fields[1].java_doc_lines == ["/** foo.bar.item_count */"]
        assert [m.name for m in model.methods] == [
            "getBaz", "setBaz", "getItemCount", "setItemCount", "toString",
        ]
        assert model.methods[-1].java_doc_lines == ["/** foo.bar */"]
        assert model.file_comment_lines == []

    def test_mark_generated_header(self, annotator, tables_file):
        annotator.configure({"dateFormat": "yyyy-MM-dd"})
        preview = CommentPreview(annotator, mark_generated=True)
        model = preview.build_model_class(load_tables(tables_file)[0])
        assert model.file_comment_lines == [
            "/**",
            " *",
            " * @mbg.generated do_not_delete_during_merge 2016-03-01",
            " */",
        ]

    def test_mark_generated_suppressed(self, annotator, tables_file):
        annotator.configure({"suppressAllComments": "true"})
        preview = CommentPreview(annotator, mark_generated=True)
        model = preview.build_model_class(load_tables(tables_file)[0])
        assert model.file_comment_lines == []

    def test_render(self, annotator, tables_file):
        rendered = CommentPreview(annotator).render(load_tables(tables_file))
        assert [name for name, _ in rendered] == ["Bar"]
        assert "public Integer getItemCount() {" in rendered[0][1]


class TestCli:
    """Tests for the codegen-comments command."""

    def test_prints_source(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file)])
        assert result.exit_code == 0, result.output
        assert "/** foo.bar Bars of foo */" in result.output
        assert "public class Bar {" in result.output

    def test_suppress_all_comments(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file), "--suppress-all-comments"])
        assert result.exit_code == 0
        assert "/**" not in result.output

    def test_mark_generated_with_date_format(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file), "--mark-generated", "--date-format", "'year' yyyy"])
        assert result.exit_code == 0, result.output
        assert " * @mbg.generated do_not_delete_during_merge year " in result.output

    def test_mark_generated_suppress_date(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file), "--mark-generated", "--suppress-date"])
        assert result.exit_code == 0
        assert " * @mbg.generated do_not_delete_during_merge\n" in result.output

    def test_config_file(self, runner, tables_file, tmp_path):
        config = tmp_path / "generator.yaml"
        config.write_text("comment_generator:\n  suppressAllComments: true\n")
        result = runner.invoke(main, [str(tables_file), "--config", str(config)])
        assert result.exit_code == 0
        assert "/**" not in result.output

    def test_environment_override(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file)], env={"CODEGEN_COMMENTS_SUPPRESS_ALL_COMMENTS": "1"})
        assert result.exit_code == 0
        assert "/**" not in result.output

    def test_dotenv_in_working_directory(self, runner, tmp_path, monkeypatch):
        (tmp_path / "t.yaml").write_text("tables:\n  - name: foo.bar\n")
        (tmp_path / ".env").write_text("CODEGEN_COMMENTS_SUPPRESS_ALL_COMMENTS=true\n")
        monkeypatch.chdir(tmp_path)
        # None makes the runner restore the variable once the command returns
        result = runner.invoke(main, ["t.yaml"], env={"CODEGEN_COMMENTS_SUPPRESS_ALL_COMMENTS": None})
        assert result.exit_code == 0, result.output
        assert "public class Bar {" in result.output
        assert "/**" not in result.output

    def test_invalid_date_format(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file), "--date-format", "yyyy-qq"])
        assert result.exit_code == 1

    def test_check_passes(self, runner, tables_file):
        result = runner.invoke(main, [str(tables_file), "--check", "--mark-generated"])
        assert result.exit_code == 0, result.output

    def test_check_fails_on_broken_remark(self, runner, tmp_path):
        path = tmp_path / "tables.yaml"
        path.write_text("tables:\n  - name: t\n    remarks: \"bad */ remark\"\n")
        result = runner.invoke(main, [str(path), "--check"])
        assert result.exit_code == 1

    def test_output_directory(self, runner, tables_file, tmp_path):
        out_dir = tmp_path / "model"
        result = runner.invoke(main, [str(tables_file), "-o", str(out_dir), "--package", "com.acme"])
        assert result.exit_code == 0, result.output
        source = (out_dir / "Bar.java").read_text()
        assert source.startswith("package com.acme;")

    def test_missing_tables_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "absent.yaml")])
        assert result.exit_code == 2
