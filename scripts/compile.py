#!/usr/bin/env python3
"""Compile the lesson scripts under src/ into Markdown pages.

Walks every lesson section directory (src/lesson_N/), renders each `.py`
lesson with the literate renderer into compiled/lesson_N/, and can also
assemble a single course document or convert the pages with pandoc.

Usage:
    # Compile every lesson to Markdown
    python scripts/compile.py

    # Compile specific sections
    python scripts/compile.py --sections lesson_3

    # Validate lessons without rendering (syntax, headings, cell length)
    python scripts/compile.py --validate-only

    # Also build a combined course.md and convert it to HTML via pandoc
    python scripts/compile.py --combined --format html
"""
from __future__ import annotations

import argparse
import ast
import json
import re
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

# Ensure project root is on sys.path so `from scripts...` imports work
# when this script is invoked as `python scripts/compile.py`
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts import literate


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).resolve().parents[1]
LESSONS_DIR = REPO_ROOT / "src"
OUTPUT_DIR = REPO_ROOT / "compiled"

LESSON_SUFFIX = ".py"

COURSE_TITLE = "Programming Fundamentals"

# Rendered without execution: the lesson deliberately ends in a re-raise.
NO_EXECUTE = [
    "3_try_except.py",
    # "1_functions.py",
]

# Skipped entirely.
EXCLUDE: list[str] = []

# Short snippets read better; longer cells get a warning
MAX_CODE_CELL_LINES = 30

PANDOC_FORMATS = ("html", "pdf", "docx")

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

def _cells(text: str, cell_type: str) -> list:
    return [c for c in literate.reads(text).cells if c.cell_type == cell_type]


def _first_heading(text: str) -> Optional[re.Match[str]]:
    for cell in _cells(text, "markdown"):
        for line in cell.source.splitlines():
            m = _HEADING_RE.match(line)
            if m:
                return m
    return None


@dataclass
class Lesson:
    section: str
    path: Path
    title: str = ""
    execute: bool = True

    def __post_init__(self) -> None:
        if not self.title:
            m = _first_heading(self.path.read_text(encoding="utf-8"))
            self.title = m.group(2).strip() if m else self.path.stem

    @property
    def name(self) -> str:
        return f"{self.section}/{self.path.name}"


@dataclass
class ValidationIssue:
    lesson: str
    severity: str  # "error", "warning", "info"
    category: str
    message: str
    line: Optional[int] = None


@dataclass
class ValidationReport:
    issues: list[ValidationIssue] = field(default_factory=list)
    lessons_checked: int = 0

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    def to_dict(self) -> dict:
        return {
            "lessons_checked": self.lessons_checked,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "issues": [
                {
                    "lesson": i.lesson,
                    "severity": i.severity,
                    "category": i.category,
                    "message": i.message,
                    "line": i.line,
                }
                for i in self.issues
            ],
        }


# ---------------------------------------------------------------------------
# Lesson discovery
# ---------------------------------------------------------------------------

def discover_lessons(
    lessons_dir: Path,
    sections: Optional[list[str]] = None,
    no_execute: Optional[list[str]] = None,
    exclude: Optional[list[str]] = None,
) -> list[Lesson]:
    """Find lesson files one level below each section directory."""
    no_execute = NO_EXECUTE if no_execute is None else no_execute
    exclude = EXCLUDE if exclude is None else exclude

    lessons = []
    for section_dir in sorted(lessons_dir.iterdir()):
        if not section_dir.is_dir():
            continue
        if sections and section_dir.name not in sections:
            continue
        for path in sorted(section_dir.iterdir()):
            if path.suffix != LESSON_SUFFIX or not path.is_file():
                continue
            if path.name in exclude:
                continue
            lessons.append(Lesson(
                section=section_dir.name,
                path=path,
                execute=path.name not in no_execute,
            ))
    return lessons


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_lesson(lesson: Lesson) -> list[ValidationIssue]:
    """Run render-readiness checks on a single lesson."""
    issues: list[ValidationIssue] = []
    text = lesson.path.read_text(encoding="utf-8")

    # 1. The lesson must be valid Python
    try:
        ast.parse(text, filename=str(lesson.path))
    except SyntaxError as exc:
        issues.append(ValidationIssue(
            lesson=lesson.name, severity="error",
            category="syntax", line=exc.lineno,
            message=f"Syntax error: {exc.msg}",
        ))

    # 2. Heading structure
    first_heading = _first_heading(text)
    if not first_heading:
        issues.append(ValidationIssue(
            lesson=lesson.name, severity="error",
            category="structure",
            message="No Markdown heading found in lesson",
        ))
    elif first_heading.group(1) != "#":
        issues.append(ValidationIssue(
            lesson=lesson.name, severity="warning",
            category="structure",
            message=(
                f"First heading is level {len(first_heading.group(1))}, "
                f"expected level 1"
            ),
        ))

    # 3. ASCII-only check
    for i, line in enumerate(text.splitlines(), 1):
        non_ascii = _NON_ASCII_RE.findall(line)
        if non_ascii:
            chars = ", ".join(repr(c) for c in non_ascii[:5])
            issues.append(ValidationIssue(
                lesson=lesson.name, severity="warning",
                category="ascii", line=i,
                message=f"Non-ASCII characters: {chars}",
            ))

    # 4. Code cell length
    for index, cell in enumerate(_cells(text, "code"), 1):
        n_lines = len(cell.source.splitlines())
        if n_lines > MAX_CODE_CELL_LINES:
            issues.append(ValidationIssue(
                lesson=lesson.name, severity="warning",
                category="code_length",
                message=(
                    f"Code cell {index} has {n_lines} lines "
                    f"(guideline: <={MAX_CODE_CELL_LINES})"
                ),
            ))

    # 5. Word count (informational)
    words = len(text.split())
    issues.append(ValidationIssue(
        lesson=lesson.name, severity="info",
        category="length",
        message=f"Lesson is {words:,} words",
    ))

    return issues


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def compile_lesson(lesson: Lesson, output_dir: Path, verbose: bool = False) -> Path:
    """Render a single lesson into output_dir/<section>/. Returns the output path."""
    if verbose:
        note = "" if lesson.execute else " (not executed)"
        print(f"  Rendering {lesson.name} -> {lesson.section}/{lesson.path.stem}.md{note}")
    return literate.markdown(lesson.path, output_dir / lesson.section, execute=lesson.execute)


def build_course(lessons: list[Lesson], output_dir: Path, verbose: bool = False) -> Path:
    """Assemble already-compiled lesson pages into a single course.md."""
    output = output_dir / "course.md"
    parts: list[str] = [
        f"---\ntitle: \"{COURSE_TITLE}\"\ndate: \"{date.today().isoformat()}\"\n---\n"
    ]

    sections: dict[str, list[Lesson]] = {}
    for lesson in lessons:
        sections.setdefault(lesson.section, []).append(lesson)

    for section, members in sections.items():
        title = section.replace("_", " ").capitalize()
        parts.append(f"\n**{title}**\n")
        for lesson in members:
            page = output_dir / lesson.section / f"{lesson.path.stem}.md"
            text = page.read_text(encoding="utf-8")
            parts.append(text.removesuffix(literate.credit_block(lesson.path.name)))

    parts.append(literate.credit_block("src/"))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(parts), encoding="utf-8")

    if verbose:
        print(f"  Building combined course ({len(lessons)} lesson(s)) -> {output.name}")
    return output


def _require_cmd(name: str) -> str:
    path = shutil.which(name)
    if not path:
        raise RuntimeError(
            f"Required command not found: {name}\n"
            f"Install with: sudo apt-get install pandoc"
        )
    return path


def render_file(pandoc: str, source_md: Path, output: Path, fmt: str) -> None:
    """Convert a Markdown page to HTML, PDF or DOCX."""
    output.parent.mkdir(parents=True, exist_ok=True)

    cmd = [
        pandoc,
        str(source_md),
        "-f", "gfm",
        "--resource-path", str(source_md.parent),
        "--standalone",
        "--highlight-style=tango",
        "-o", str(output),
    ]
    if fmt == "pdf":
        cmd += ["-V", "geometry:margin=1in"]
    if fmt in ("html", "pdf"):
        cmd += ["--metadata", f"title={source_md.stem}"]

    subprocess.run(cmd, check=True)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compile literate lesson scripts into Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python scripts/compile.py                          # All lessons\n"
            "  python scripts/compile.py --sections lesson_2      # One section\n"
            "  python scripts/compile.py --validate-only          # Check without rendering\n"
            "  python scripts/compile.py --combined --format pdf  # Course document as PDF\n"
        ),
    )
    parser.add_argument(
        "--lessons-dir",
        type=Path,
        default=LESSONS_DIR,
        help="Root directory holding lesson_N/ sections (default: src).",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=OUTPUT_DIR,
        help="Output directory (default: compiled).",
    )
    parser.add_argument(
        "--sections",
        nargs="+",
        metavar="NAME",
        help="Section directories to compile (default: all).",
    )
    parser.add_argument(
        "--no-execute",
        nargs="+",
        default=[],
        metavar="FILE",
        help=f"Extra lesson files to render without running (always: {', '.join(NO_EXECUTE)}).",
    )
    parser.add_argument(
        "--exclude",
        nargs="+",
        default=[],
        metavar="FILE",
        help="Lesson files to skip.",
    )
    parser.add_argument(
        "--format",
        choices=["md", *PANDOC_FORMATS],
        default="md",
        help="Additional output format via pandoc (default: md only).",
    )
    parser.add_argument(
        "--combined",
        action="store_true",
        help="Also assemble every compiled page into course.md.",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Run validation checks without rendering.",
    )
    parser.add_argument(
        "--report",
        type=Path,
        metavar="PATH",
        help="Write validation report as JSON to this path.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress details.",
    )
    args = parser.parse_args(argv)

    # --- Discover lessons ---
    if not args.lessons_dir.is_dir():
        print(f"Error: lessons directory not found: {args.lessons_dir}", file=sys.stderr)
        return 1

    lessons = discover_lessons(
        args.lessons_dir,
        sections=args.sections,
        no_execute=[*NO_EXECUTE, *args.no_execute],
        exclude=[*EXCLUDE, *args.exclude],
    )
    if not lessons:
        names = args.sections or "any"
        print(f"Error: no lessons found matching {names} in {args.lessons_dir}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Found {len(lessons)} lesson(s):")
        for lesson in lessons:
            print(f"  {lesson.name} ({lesson.title})")

    # --- Validation ---
    report = ValidationReport(lessons_checked=len(lessons))
    for lesson in lessons:
        report.issues.extend(validate_lesson(lesson))

    problems = [i for i in report.issues if i.severity != "info"]
    if problems:
        print(f"\nValidation: {len(report.errors)} error(s), {len(report.warnings)} warning(s)")
    else:
        print("\nValidation: all checks passed")
    for issue in report.issues:
        if issue.severity == "info" and not args.verbose:
            continue
        loc = issue.lesson
        if issue.line:
            loc += f":{issue.line}"
        print(f"  [{issue.severity.upper():7s}] {loc} ({issue.category}) {issue.message}")

    if args.report:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(
            json.dumps(report.to_dict(), indent=2) + "\n", encoding="utf-8",
        )
        if args.verbose:
            print(f"Report written to {args.report}")

    if args.validate_only:
        return 1 if report.errors else 0

    if report.errors:
        print("\nBuild aborted due to validation errors.", file=sys.stderr)
        return 1

    # --- Render ---
    out_dir = args.out_dir.resolve()
    pandoc = _require_cmd("pandoc") if args.format != "md" else None

    outputs: list[Path] = []
    for lesson in lessons:
        try:
            outputs.append(compile_lesson(lesson, out_dir, verbose=args.verbose))
        except literate.LessonExecutionError as exc:
            print(f"\nError: {exc}", file=sys.stderr)
            return 1

    if args.combined:
        outputs.append(build_course(lessons, out_dir, verbose=args.verbose))

    if pandoc:
        for page in list(outputs):
            converted = page.with_suffix(f".{args.format}")
            if args.verbose:
                print(f"  Converting {page.name} -> {converted.name}")
            render_file(pandoc, page, converted, args.format)
            outputs.append(converted)

    # --- Summary ---
    print(f"\nBuild complete. {len(outputs)} file(s) produced:")
    for p in outputs:
        size_kb = p.stat().st_size / 1024
        print(f"  {p.relative_to(out_dir)}  ({size_kb:.1f} KB)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
