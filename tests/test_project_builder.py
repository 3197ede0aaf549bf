"""Tests for ProjectBuilder and postprocessor application."""

import logging

from pagegen.codegen import ProjectBuilder
from pagegen.codegen.project import generated_file
from pagegen.errors import DiagnosticCode
from pagegen.ir import FileType, Project


def _builder_with_files():
    builder = ProjectBuilder(Project(), project_name="demo")
    builder.add_file(generated_file("src/a.ts", "a", FileType.TS))
    builder.add_file(generated_file("src/b.ts", "b", FileType.TS))
    builder.add_file(generated_file("src/c.ts", "c", FileType.TS))
    return builder


def test_files_keep_insertion_order():
    builder = _builder_with_files()
    assert [file.file_path for file in builder.generate_files()] == ["src/a.ts", "src/b.ts", "src/c.ts"]
    assert builder.get_file("src/b.ts").file_name == "b.ts"
    assert builder.get_file("missing") is None


def test_duplicate_path_replaces_and_warns(caplog):
    builder = _builder_with_files()
    with caplog.at_level(logging.WARNING):
        builder.add_file(generated_file("src/a.ts", "a2", FileType.TS))
    assert builder.get_file("src/a.ts").content == "a2"
    assert len(builder.generate_files()) == 3
    assert "src/a.ts generated twice" in caplog.text


def test_add_dependency_updates_project():
    builder = ProjectBuilder()
    builder.add_dependency("dayjs", "^1.11.0")
    assert builder.project.dependencies == {"dayjs": "^1.11.0"}
    assert builder.create_module_builder("Home").module_name == "Home"


async def test_post_processors_run_in_order():
    builder = _builder_with_files()

    def upper(file):
        return file.with_content(file.content.upper())

    async def suffix(file):
        return file.with_content(file.content + "!")

    await builder.apply_post_processors([upper, suffix])
    assert [file.content for file in builder.generate_files()] == ["A!", "B!", "C!"]


async def test_failing_post_processor_keeps_original_content(caplog):
    builder = _builder_with_files()

    def explode_on_b(file):
        if file.file_path == "src/b.ts":
            raise RuntimeError("boom")
        return file.with_content(file.content + "-ok")

    with caplog.at_level(logging.WARNING):
        await builder.apply_post_processors([explode_on_b])

    assert [file.content for file in builder.generate_files()] == ["a-ok", "b", "c-ok"]
    records = [record for record in caplog.records if getattr(record, "pagegen_code", None) == DiagnosticCode.PLUGIN_FAILURE]
    assert len(records) == 1
    assert "src/b.ts" in records[0].getMessage()
