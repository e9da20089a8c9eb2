"""Unit tests for the literate lesson renderer."""

from pathlib import Path

import pytest

from scripts.literate import (
    LessonExecutionError,
    credit_block,
    credit_line,
    markdown,
    read,
    reads,
    render_markdown,
    run,
)


def _code_cells(nb) -> list:
    return [cell for cell in nb.cells if cell.cell_type == "code"]


def _stdout(cell) -> str:
    return "".join(
        out.get("text", "") for out in cell.outputs
        if out.output_type == "stream" and out.name == "stdout"
    )


def _results(cell) -> list[str]:
    return [
        out.data["text/plain"] for out in cell.outputs
        if out.output_type == "execute_result"
    ]


class TestReads:
    """Tests for parsing lesson source into cells."""

    def test_comment_block_becomes_markdown(self) -> None:
        """Test that a '# ' comment block is Markdown with the prefix removed."""
        nb = reads("# # Title\n#\n# Some prose.\n")

        assert [c.cell_type for c in nb.cells] == ["markdown"]
        assert nb.cells[0].source == "# Title\n\nSome prose."

    def test_markdown_and_code_alternate(self) -> None:
        """Test that prose and code end up in separate cells in order."""
        nb = reads("# Intro\n\nx = 1\n\n# Outro\n")

        assert [c.cell_type for c in nb.cells] == ["markdown", "code", "markdown"]
        assert nb.cells[1].source == "x = 1"

    def test_comment_attached_to_code_stays_in_code(self) -> None:
        """Test that a comment with no blank line before the code is code."""
        nb = reads("x = 1\n# a comment\ny = 2\n")

        assert [c.cell_type for c in nb.cells] == ["code"]
        assert "# a comment" in nb.cells[0].source

    def test_empty_comment_line_keeps_paragraphs_in_one_cell(self) -> None:
        """Test that a bare '#' line joins two paragraphs in one Markdown cell."""
        nb = reads("# First paragraph.\n#\n# Second paragraph.\n")

        assert len(nb.cells) == 1
        assert nb.cells[0].source == "First paragraph.\n\nSecond paragraph."

    def test_blank_line_starts_a_new_markdown_cell(self) -> None:
        """Test that an empty source line closes the Markdown cell."""
        nb = reads("# First\n\n# Second\n")

        assert [c.source for c in nb.cells] == ["First", "Second"]

    def test_explicit_cell_markers_keep_blank_lines_in_code(self) -> None:
        """Test that '# +' and '# -' hold a code cell with blank lines together."""
        nb = reads("# +\ndef f():\n    '''Doc.\n\n    More.\n    '''\n\nf()\n# -\n")

        cells = _code_cells(nb)
        assert len(cells) == 1
        assert "def f():" in cells[0].source
        assert "f()" in cells[0].source.splitlines()[-1]

    def test_notebook_is_bound_to_the_python_kernel(self) -> None:
        """Test that kernel and language metadata are set for execution."""
        nb = reads("x = 1\n")

        assert nb.metadata["kernelspec"]["name"] == "python3"
        assert nb.metadata["language_info"]["name"] == "python"

    def test_read_loads_a_file(self, write_lesson) -> None:
        """Test that read() parses a lesson from disk."""
        lesson = write_lesson("# # Title\n\nprint(1)\n")

        nb = read(lesson)

        assert [c.cell_type for c in nb.cells] == ["markdown", "code"]


class TestRun:
    """Tests for executing lesson cells on a kernel."""

    def test_stdout_is_captured(self, tmp_path: Path) -> None:
        """Test that printed output is stored on the cell."""
        nb = run(reads("print('hello')\n"), tmp_path / "lesson.py", tmp_path)

        assert _stdout(_code_cells(nb)[0]) == "hello\n"

    def test_trailing_expression_is_the_result(self, tmp_path: Path) -> None:
        """Test that the value of a final expression is reported."""
        nb = run(reads("x = 20\nx + 1\n"), tmp_path / "lesson.py", tmp_path)

        assert _results(_code_cells(nb)[0]) == ["21"]

    def test_semicolon_suppresses_the_result(self, tmp_path: Path) -> None:
        """Test that a trailing ';' hides the expression value."""
        nb = run(reads("1 + 1;\n"), tmp_path / "lesson.py", tmp_path)

        assert _results(_code_cells(nb)[0]) == []

    def test_namespace_is_shared_between_cells(self, tmp_path: Path) -> None:
        """Test that later cells see names defined by earlier ones."""
        source = "def double(x):\n    return 2 * x\n\n# Call it:\n\ndouble(21)\n"

        nb = run(reads(source), tmp_path / "lesson.py", tmp_path)

        assert _results(_code_cells(nb)[-1]) == ["42"]

    def test_code_runs_in_the_working_directory(self, tmp_path: Path) -> None:
        """Test that relative file writes land in the workdir."""
        workdir = tmp_path / "out"
        workdir.mkdir()
        source = "with open('data.txt', 'w') as f:\n    f.write('ok')\n"

        run(reads(source), tmp_path / "lesson.py", workdir)

        assert (workdir / "data.txt").read_text() == "ok"

    def test_errors_are_wrapped(self, tmp_path: Path) -> None:
        """Test that a failing cell raises LessonExecutionError."""
        with pytest.raises(LessonExecutionError) as exc_info:
            run(reads("1 / 0\n"), tmp_path / "lesson.py", tmp_path)

        assert exc_info.value.ename == "ZeroDivisionError"
        assert "lesson.py" in str(exc_info.value)
        assert "ZeroDivisionError" in str(exc_info.value)

    def test_sys_exit_is_wrapped(self, tmp_path: Path) -> None:
        """Test that a lesson calling sys.exit fails like any other error."""
        with pytest.raises(LessonExecutionError) as exc_info:
            run(reads("import sys\nsys.exit(3)\n"), tmp_path / "lesson.py", tmp_path)

        assert exc_info.value.ename == "SystemExit"

    def test_later_cells_do_not_run_after_a_failure(self, tmp_path: Path) -> None:
        """Test that the first failing cell stops the lesson."""
        workdir = tmp_path / "out"
        workdir.mkdir()
        source = "raise ValueError('boom')\n\n# Never reached:\n\nopen('after.txt', 'w').close()\n"

        with pytest.raises(LessonExecutionError):
            run(reads(source), tmp_path / "lesson.py", workdir)

        assert not (workdir / "after.txt").exists()


class TestRenderMarkdown:
    """Tests for exporting the notebook to Markdown."""

    def test_code_is_fenced_and_outputs_follow(self, tmp_path: Path) -> None:
        """Test that code is fenced as Python and its output comes after it."""
        nb = run(reads("# Intro\n\nprint('hi there')\n"), tmp_path / "a.py", tmp_path)

        text = render_markdown(nb, source_name="a.py", credit=False)

        assert text.startswith("Intro\n")
        assert "```python\nprint('hi there')\n```" in text
        assert text.count("hi there") == 2
        assert text.rindex("hi there") > text.index("```python")

    def test_unexecuted_code_has_no_output(self) -> None:
        """Test that rendering without execution shows only the code."""
        text = render_markdown(reads("print('never printed')\n"), credit=False)

        assert "```python\nprint('never printed')\n```" in text
        assert text.count("never printed") == 1

    def test_footer_credits_the_renderer(self) -> None:
        """Test that the generated-by footer closes the page."""
        text = render_markdown(reads("# Hi\n"), source_name="a.py")

        assert text.endswith(credit_block("a.py"))
        assert "a.py" in credit_line("a.py")
        assert "Jupytext" in credit_line("a.py")

    def test_footer_can_be_omitted(self) -> None:
        """Test that credit=False leaves the page without a footer."""
        text = render_markdown(reads("# Hi\n"), source_name="a.py", credit=False)

        assert credit_line("a.py") not in text
        assert text == "Hi\n"


class TestMarkdown:
    """Tests for rendering a lesson file end to end."""

    def test_writes_page_named_after_the_lesson(self, write_lesson, tmp_path: Path) -> None:
        """Test that output_dir/<stem>.md is created and returned."""
        lesson = write_lesson("# # Title\n\nprint(6 * 7)\n")

        out = markdown(lesson, tmp_path / "compiled")

        assert out == tmp_path / "compiled" / "1_example.md"
        text = out.read_text(encoding="utf-8")
        assert text.startswith("# Title\n")
        assert "42" in text

    def test_no_execute_skips_running_code(self, write_lesson, tmp_path: Path) -> None:
        """Test that execute=False renders failing code without raising."""
        lesson = write_lesson("# # Title\n\nraise RuntimeError('not run')\n")

        out = markdown(lesson, tmp_path / "compiled", execute=False)

        assert "raise RuntimeError('not run')" in out.read_text(encoding="utf-8")

    def test_execution_error_propagates(self, write_lesson, tmp_path: Path) -> None:
        """Test that a failing lesson stops rendering with an error."""
        lesson = write_lesson("x = [1]\nx[5]\n")

        with pytest.raises(LessonExecutionError) as exc_info:
            markdown(lesson, tmp_path / "compiled")

        assert exc_info.value.ename == "IndexError"
        assert exc_info.value.path == lesson
        assert not (tmp_path / "compiled" / "1_example.md").exists()

    def test_files_written_by_lessons_land_in_output_dir(
        self, write_lesson, tmp_path: Path
    ) -> None:
        """Test that execution happens inside the output directory."""
        lesson = write_lesson("open('notes.txt', 'w').close()\n")

        markdown(lesson, tmp_path / "compiled")

        assert (tmp_path / "compiled" / "notes.txt").exists()

    def test_no_credit_omits_footer(self, write_lesson, tmp_path: Path) -> None:
        """Test that credit=False is passed through to the page."""
        lesson = write_lesson("# # Title\n")

        out = markdown(lesson, tmp_path / "compiled", execute=False, credit=False)

        assert "generated from" not in out.read_text(encoding="utf-8")
