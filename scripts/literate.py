#!/usr/bin/env python3
"""
Literate lesson renderer.

Turns a lesson script into a Markdown page with Jupytext and nbconvert.
Lessons are written in Jupytext's "light" script format:

    # # Title                  -> Markdown cell "# Title"
    # Some prose.              -> Markdown cell "Some prose."
    x = 1 + 1                  -> code cell
    # + / # -                  -> explicit start/end of a code cell that
                                  contains blank lines

A comment block becomes Markdown when blank lines separate it from the code
around it; comments directly attached to code stay in the code cell.

When executed, the cells run in order on a Jupyter kernel whose working
directory is the output directory. Printed output and the value of a cell's
last expression (unless the line ends with `;`) are rendered below the code.

Usage:
    # Render one lesson next to compiled output
    python scripts/literate.py src/lesson_3/1_functions.py --out-dir compiled/lesson_3

    # Render without running the code
    python scripts/literate.py src/lesson_2/3_try_except.py --no-execute
"""
from __future__ import annotations

import argparse
from pathlib import Path

import jupytext
import nbformat
from nbclient.exceptions import CellExecutionError, CellTimeoutError, DeadKernelError
from nbconvert import MarkdownExporter
from nbconvert.preprocessors import ExecutePreprocessor


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LESSON_FORMAT = "py:light"

KERNEL_NAME = "python3"

# Seconds a single cell may run before the lesson is considered stuck
CELL_TIMEOUT = 120

GENERATOR_CREDIT = (
    "[Jupytext](https://jupytext.readthedocs.io) and "
    "[nbconvert](https://nbconvert.readthedocs.io)"
)


class LessonExecutionError(RuntimeError):
    """A cell failed while the lesson was being executed."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = Path(path)
        self.error = error
        self.ename = getattr(error, "ename", None) or type(error).__name__
        super().__init__(
            f"`{self.path.name}`: encountered an error when executing "
            f"the lesson ({self.ename}):\n\n{error}"
        )


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def reads(text: str) -> nbformat.NotebookNode:
    """Parse lesson source into a notebook bound to the Python kernel."""
    nb = jupytext.reads(text, fmt=LESSON_FORMAT)
    nb.metadata["kernelspec"] = {
        "name": KERNEL_NAME,
        "display_name": "Python 3",
        "language": "python",
    }
    nb.metadata.setdefault("language_info", {"name": "python"})
    return nb


def read(path: Path) -> nbformat.NotebookNode:
    return reads(Path(path).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

def run(nb: nbformat.NotebookNode, path: Path, workdir: Path) -> nbformat.NotebookNode:
    """Run every code cell in place; the first failure stops the lesson."""
    preprocessor = ExecutePreprocessor(timeout=CELL_TIMEOUT, kernel_name=KERNEL_NAME)
    try:
        preprocessor.preprocess(nb, {"metadata": {"path": str(Path(workdir).resolve())}})
    except (CellExecutionError, CellTimeoutError, DeadKernelError) as exc:
        raise LessonExecutionError(path, exc) from exc
    return nb


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def credit_line(source_name: str) -> str:
    return f"*This page was generated from `{source_name}` using {GENERATOR_CREDIT}.*"


def credit_block(source_name: str) -> str:
    return f"\n---\n\n{credit_line(source_name)}\n"


def render_markdown(
    nb: nbformat.NotebookNode,
    source_name: str = "",
    credit: bool = True,
) -> str:
    """Export a (possibly executed) lesson notebook to Markdown."""
    body, _ = MarkdownExporter().from_notebook_node(nb)
    text = body.strip() + "\n"
    if credit:
        text += credit_block(source_name)
    return text


def markdown(
    input_path: Path,
    output_dir: Path,
    execute: bool = True,
    credit: bool = True,
) -> Path:
    """Render `input_path` to `output_dir/<stem>.md`. Returns the output path."""
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    nb = read(input_path)
    if execute:
        run(nb, input_path, output_dir)

    output = output_dir / f"{input_path.stem}.md"
    output.write_text(
        render_markdown(nb, source_name=input_path.name, credit=credit),
        encoding="utf-8",
    )
    return output


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    parser = argparse.ArgumentParser(description="Render a literate lesson script to Markdown.")
    parser.add_argument("lesson", type=Path, help="Lesson source file (.py).")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path("."),
        help="Directory for the rendered Markdown (default: current directory).",
    )
    parser.add_argument("--no-execute", action="store_true", help="Render code without running it.")
    parser.add_argument("--no-credit", action="store_true", help="Omit the generated-by footer.")
    args = parser.parse_args()

    out = markdown(args.lesson, args.out_dir, execute=not args.no_execute, credit=not args.no_credit)
    print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
