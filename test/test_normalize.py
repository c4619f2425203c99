"""Behaviour of normalize() and the subpath helpers."""
import itertools
import posixpath
import re
import sys
from pathlib import Path, PurePosixPath

import pytest

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from relnorm import (
    AbsolutePathError,
    EmptyStringError,
    NotAStringError,
    ParentComponentError,
    RelativePathError,
    components,
    is_valid,
    join_subpaths,
    normalize,
)

CANONICAL_RE = re.compile(r"^\./($|[^/]+(/[^/]+)*$)")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("foo//bar", "./foo/bar"),
        ("foo/./bar", "./foo/bar"),
        ("foo/bar", "./foo/bar"),
        ("foo/bar/", "./foo/bar"),
        ("foo/bar/.", "./foo/bar"),
        (".", "./."),
        ("./.", "./."),
        ("./", "./."),
        (".//./", "./."),
        ("./foo", "./foo"),
        ("./././foo", "./foo"),
        ("a/././b", "./a/b"),
        ("a/.//.///b//", "./a/b"),
        ("..foo/foo..", "./..foo/foo.."),
        ("foo.bar/...", "./foo.bar/..."),
        ("foo/.bar", "./foo/.bar"),
        ("a b/ c", "./a b/ c"),
    ],
)
def test_normalize_examples(path, expected):
    assert normalize(path) == expected


@pytest.mark.parametrize(
    "value, error",
    [
        ("", EmptyStringError),
        ("/foo", AbsolutePathError),
        ("/", AbsolutePathError),
        ("//foo", AbsolutePathError),
        ("foo/../bar", ParentComponentError),
        ("..", ParentComponentError),
        ("./..", ParentComponentError),
        ("foo/..", ParentComponentError),
        ("foo/../", ParentComponentError),
        ("foo/./../bar", ParentComponentError),
        (None, NotAStringError),
        (42, NotAStringError),
        (b"foo", NotAStringError),
        (PurePosixPath("foo"), NotAStringError),
        (["foo"], NotAStringError),
    ],
)
def test_normalize_rejects(value, error):
    with pytest.raises(error):
        normalize(value)


def test_errors_carry_value_and_context():
    with pytest.raises(ParentComponentError) as info:
        normalize("foo/../bar", "build.sources")
    exc = info.value
    assert exc.value == "foo/../bar"
    assert exc.context == "build.sources"
    assert exc.kind == "parent_component"
    assert str(exc).startswith("build.sources: Argument 'foo/../bar' can't be normalised")


def test_validator_message_format():
    with pytest.raises(EmptyStringError) as info:
        normalize("", "ctx")
    assert str(info.value) == "ctx: Argument '' is not a valid relative path string: The string is empty"


def test_default_context_names_the_operation():
    with pytest.raises(AbsolutePathError) as info:
        normalize("/etc")
    assert info.value.context == "relnorm.normalize"


def test_error_hierarchy():
    with pytest.raises(TypeError):
        normalize(3)
    for error in (NotAStringError, EmptyStringError, AbsolutePathError, ParentComponentError):
        assert issubclass(error, RelativePathError)
        assert issubclass(error, ValueError)


def test_to_dict_is_json_friendly():
    with pytest.raises(NotAStringError) as info:
        normalize(b"foo", "ctx")
    data = info.value.to_dict()
    assert data["kind"] == "not_a_string"
    assert data["value"] == "b'foo'"
    assert data["context"] == "ctx"


def test_idempotent_on_examples():
    for path in ["foo//bar/", "./.", "a/./b/.", "x"]:
        once = normalize(path)
        assert normalize(once) == once


def _all_strings(alphabet="a./", max_len=6):
    for length in range(1, max_len + 1):
        for chars in itertools.product(alphabet, repeat=length):
            yield "".join(chars)


def test_exhaustive_small_inputs():
    for path in _all_strings():
        rejected = path.startswith("/") or ".." in path.split("/")
        assert is_valid(path) is not rejected, path
        if rejected:
            with pytest.raises(RelativePathError):
                normalize(path)
            continue

        result = normalize(path)
        assert CANONICAL_RE.match(result), (path, result)
        assert normalize(result) == result, path

        # Agrees with a non-symlink-resolving canonicalizer
        expected = posixpath.normpath(path)
        assert result == ("./." if expected == "." else "./" + expected), path
        assert (result == "./.") == (components(path) == [])


def test_components():
    assert components("./foo//bar/.") == ["foo", "bar"]
    assert components(".") == []
    with pytest.raises(ParentComponentError) as info:
        components("../foo")
    assert info.value.context == "relnorm.components"


def test_is_valid_never_raises():
    assert is_valid("foo")
    assert is_valid(".")
    assert not is_valid("")
    assert not is_valid("/foo")
    assert not is_valid("foo/..")
    assert not is_valid(None)
    assert not is_valid(1.5)


def test_join_subpaths():
    assert join_subpaths(["foo", "./bar/"]) == "./foo/bar"
    assert join_subpaths(("./foo/.", ".", "bar//baz")) == "./foo/bar/baz"
    assert join_subpaths([]) == "./."
    assert join_subpaths([".", "./."]) == "./."


def test_join_subpaths_matches_normalize_of_concatenation():
    for p, q in itertools.product(["foo", "./a/b/", "x/.", "."], repeat=2):
        assert join_subpaths([p, q]) == normalize(p + "/" + q)


def test_join_subpaths_reports_element_index():
    with pytest.raises(AbsolutePathError) as info:
        join_subpaths(["foo", "/bar"])
    assert info.value.context == "relnorm.join_subpaths: element at index 1"
    assert info.value.value == "/bar"


def test_join_subpaths_requires_a_list():
    with pytest.raises(TypeError) as info:
        join_subpaths("foo/bar")
    assert not isinstance(info.value, RelativePathError)
