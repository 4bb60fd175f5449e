import io
import logging
import os
import sys

import pytest

from capstanignore.constants import BUILTIN_PATTERNS
from capstanignore.env import Env
from capstanignore.error import NotCompiledError
from capstanignore.error import PatternError
from capstanignore.pattern_set import initialize
from capstanignore.pattern_set import parse_lines
from capstanignore.pattern_set import PatternSet

IGNORE_FILE = """\
# build output
/build/*

   /**/*.o
  # indented comment
docs/
"""


def test_builtins_come_first():
    pattern_set = PatternSet()
    assert pattern_set.patterns == ("/meta", "/mpm-pkg", "/.git")
    assert pattern_set.patterns == BUILTIN_PATTERNS
    assert pattern_set.user_patterns == ()


@pytest.mark.quick
@pytest.mark.parametrize(
    "text, expected",
    [
        ("myfile.txt", "/myfile.txt"),
        ("/myfolder/", "/myfolder"),
        ("  /padded  ", "/padded"),
        ("//double", "/double"),
        ("/**/*.txt", "/**/*.txt"),
    ],
)
def test_add_pattern_normalizes(text, expected):
    pattern_set = PatternSet()
    pattern_set.add_pattern(text)
    assert pattern_set.user_patterns == (expected,)


@pytest.mark.parametrize("text", ["", "   ", "/", "///"])
def test_empty_patterns_are_skipped(text):
    pattern_set = PatternSet()
    pattern_set.add_pattern(text)
    assert pattern_set.user_patterns == ()


def test_parse_lines_skips_blanks_and_comments():
    assert list(parse_lines(IGNORE_FILE.splitlines())) == [
        "/build/*",
        "/**/*.o",
        "docs/",
    ]


def test_from_lines():
    pattern_set = PatternSet.from_lines(io.StringIO(IGNORE_FILE))
    assert pattern_set.user_patterns == ("/build/*", "/**/*.o", "/docs")


def test_initialize_reads_ignore_file(tmp_path):
    ignore_file = tmp_path / ".capstanignore"
    ignore_file.write_text(IGNORE_FILE)

    pattern_set = initialize(str(ignore_file))

    assert pattern_set.patterns == BUILTIN_PATTERNS + ("/build/*", "/**/*.o", "/docs")
    matcher = pattern_set.compile()
    assert matcher.is_ignored("/build/x/y")
    assert matcher.is_ignored("/src/a.o")
    assert matcher.is_ignored("/docs")
    assert not matcher.is_ignored("/docs/index.md")


@pytest.mark.parametrize("source", [None, ""])
def test_initialize_without_source_has_only_builtins(source):
    assert PatternSet.initialize(source).patterns == BUILTIN_PATTERNS


def test_initialize_with_missing_file_is_not_an_error(tmp_path):
    pattern_set = PatternSet.initialize(tmp_path / "nope")
    assert pattern_set.patterns == BUILTIN_PATTERNS


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="root can read anything",
)
def test_initialize_with_unreadable_file_raises(tmp_path):
    ignore_file = tmp_path / ".capstanignore"
    ignore_file.write_text("/foo\n")
    ignore_file.chmod(0)
    try:
        with pytest.raises(OSError):
            PatternSet.initialize(ignore_file)
    finally:
        ignore_file.chmod(0o644)


def test_initialize_with_directory_raises(tmp_path):
    with pytest.raises(OSError):
        PatternSet.initialize(tmp_path)


def test_initialize_strips_byte_order_mark(tmp_path):
    ignore_file = tmp_path / ".capstanignore"
    ignore_file.write_text("\ufeff/secret\n/other\n", encoding="utf-8")

    pattern_set = PatternSet.initialize(ignore_file)

    assert pattern_set.user_patterns == ("/secret", "/other")
    assert pattern_set.compile().is_ignored("/secret")


def test_initialize_with_binary_file_raises_ioerror(tmp_path):
    ignore_file = tmp_path / ".capstanignore"
    ignore_file.write_bytes(b"/ok\n\xff\xfe\x00garbage\n")
    with pytest.raises(IOError, match="not valid UTF-8"):
        PatternSet.initialize(ignore_file)


def test_from_project_finds_ignore_file(tmp_path):
    (tmp_path / ".capstanignore").write_text("/secret\n")
    assert PatternSet.from_project(tmp_path).user_patterns == ("/secret",)


def test_from_project_without_ignore_file(tmp_path):
    assert PatternSet.from_project(tmp_path).user_patterns == ()


def test_from_project_honors_filename_override(tmp_path, monkeypatch):
    (tmp_path / ".capstanignore").write_text("/default\n")
    (tmp_path / ".pkgignore").write_text("/custom\n")
    monkeypatch.setenv("CAPSTANIGNORE_FILENAME", ".pkgignore")

    assert PatternSet.from_project(tmp_path).user_patterns == ("/custom",)
    assert PatternSet.from_project(
        tmp_path, Env(ignore_filename=".capstanignore")
    ).user_patterns == ("/default",)


def test_extra_builtins_add_to_the_fixed_ones():
    pattern_set = PatternSet(("/vendor",))
    assert pattern_set.patterns == BUILTIN_PATTERNS + ("/vendor",)
    assert pattern_set.user_patterns == ()
    matcher = pattern_set.compile()
    assert matcher.is_ignored("/vendor")
    assert matcher.is_ignored("/meta")


def test_builtins_cannot_be_replaced():
    with pytest.raises(TypeError):
        PatternSet(builtins=())
    assert PatternSet(()).patterns == BUILTIN_PATTERNS


def test_query_before_compile_is_rejected():
    pattern_set = PatternSet()
    assert not pattern_set.is_compiled
    with pytest.raises(NotCompiledError):
        pattern_set.is_ignored("/meta")


def test_adding_after_compile_requires_recompile():
    pattern_set = PatternSet()
    first = pattern_set.compile()
    pattern_set.add_pattern("/late")

    assert not pattern_set.is_compiled
    with pytest.raises(NotCompiledError):
        pattern_set.is_ignored("/late")
    # matchers already handed out are snapshots
    assert not first.is_ignored("/late")

    pattern_set.compile()
    assert pattern_set.is_compiled
    assert pattern_set.is_ignored("/late")


def test_compile_is_idempotent():
    pattern_set = PatternSet()
    pattern_set.add_patterns(["/**/*.o", "/build/*", "/x/*/y"])
    first = pattern_set.compile()
    second = pattern_set.compile()

    assert first == second
    assert first is not second
    for path in ["/a.o", "/build", "/build/a", "/x/1/y", "/x/y", "/meta"]:
        assert first.is_ignored(path) == second.is_ignored(path)


def test_bad_pattern_does_not_abort_compilation(caplog):
    pattern_set = PatternSet()
    pattern_set.add_patterns(["/good", "/bad\x00name", "/also/good/*"])

    with caplog.at_level(logging.WARNING, logger="capstanignore"):
        matcher = pattern_set.compile()

    assert [p.raw for p in matcher.patterns] == list(BUILTIN_PATTERNS) + [
        "/good",
        "/also/good/*",
    ]
    assert [e.pattern for e in matcher.errors] == ["/bad\x00name"]
    assert matcher.is_ignored("/good")
    assert matcher.is_ignored("/also/good/x")
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1


def test_strict_compile_raises_on_bad_pattern():
    pattern_set = PatternSet()
    pattern_set.add_pattern("/bad\x00name")
    with pytest.raises(PatternError) as excinfo:
        pattern_set.compile(strict=True)
    assert excinfo.value.pattern == "/bad\x00name"
    assert excinfo.value.to_dict()["pattern"] == "/bad\x00name"


def test_print_patterns(capsys):
    pattern_set = PatternSet()
    pattern_set.add_pattern("myfolder/*")
    pattern_set.print_patterns()
    assert capsys.readouterr().out == "/meta\n/mpm-pkg\n/.git\n/myfolder/*\n"


def test_print_patterns_to_stream():
    pattern_set = PatternSet()
    out = io.StringIO()
    pattern_set.print_patterns(file=out)
    assert out.getvalue().splitlines() == list(BUILTIN_PATTERNS)


def test_repeated_bad_pattern_is_reported_once(caplog):
    pattern_set = PatternSet()
    pattern_set.add_patterns(["/bad\x00name", "/good", "bad\x00name/"])

    with caplog.at_level(logging.WARNING, logger="capstanignore"):
        matcher = pattern_set.compile()

    assert [e.pattern for e in matcher.errors] == ["/bad\x00name"]
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1
    assert matcher.is_ignored("/good")
