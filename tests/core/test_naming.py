"""Tests for resource identifier resolution.

Critical Invariants:
- Fixed-namespace contexts reject explicit namespaces
- Every character/shape rule is enforced at resolve time
- Child contexts accumulate directory prefixes without empty segments
- Bare names stay bare (the host applies its default namespace)
"""

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from packsmith.core.naming import (
    DoubleDotError,
    EmptyNameError,
    InvalidNamespaceError,
    InvalidPathError,
    NamespaceUnderBasePathError,
    NamingError,
    ResourceIdentifier,
    ResourceNamingContext,
    derive_child,
    parse_identifier,
    resolve,
)


@pytest.fixture
def context():
    """Root context: no fixed namespace, no directory."""
    return ResourceNamingContext()


@pytest.fixture
def fixed_context():
    """Context forcing the "x" namespace."""
    return ResourceNamingContext(namespace="x")


namespaces = st.from_regex(r"[0-9a-z_-]+", fullmatch=True)
segments = st.from_regex(r"[0-9a-z_-]+(\.[0-9a-z_-]+)?", fullmatch=True)
paths = st.lists(segments, min_size=1, max_size=4).map("/".join)


# Namespace handling


def test_bare_name_keeps_namespace_implicit(context):
    """CRITICAL: Without a context or explicit namespace, the bare path is emitted.

    Why: The host resolves the default namespace at load time, not authoring time.
    """
    identifier = resolve(context, "foo")

    assert str(identifier) == "foo"
    assert identifier.namespace == "minecraft"
    assert identifier.explicit is False
    assert identifier.full == "minecraft:foo"


def test_explicit_namespace_in_name(context):
    identifier = resolve(context, "mypack:foo/bar")

    assert str(identifier) == "mypack:foo/bar"
    assert identifier.namespace == "mypack"
    assert identifier.path == "foo/bar"
    assert identifier.explicit is True


def test_fixed_namespace_applies_to_bare_name(fixed_context):
    assert str(resolve(fixed_context, "foo")) == "x:foo"


def test_fixed_namespace_rejects_explicit_namespace(fixed_context):
    """CRITICAL: A fixed-namespace context forbids re-specifying a namespace."""
    with pytest.raises(NamespaceUnderBasePathError):
        resolve(fixed_context, "a:b")


def test_fixed_namespace_rejects_same_namespace(fixed_context):
    """Even repeating the context's own namespace is an error."""
    with pytest.raises(NamespaceUnderBasePathError):
        resolve(fixed_context, "x:b")


def test_custom_default_namespace_is_used_for_validation():
    context = ResourceNamingContext(default_namespace="Bad")

    with pytest.raises(InvalidNamespaceError):
        resolve(context, "foo")


@pytest.mark.parametrize("name", ["Bad:foo", ":foo", "my pack:foo", "a.b:foo"])
def test_invalid_namespace(context, name):
    with pytest.raises(InvalidNamespaceError):
        resolve(context, name)


# Path rules


def test_uppercase_path_rejected(context):
    with pytest.raises(InvalidPathError):
        resolve(context, "Foo")


@pytest.mark.parametrize("name", ["foo bar", "foo:bar:baz", "café", "foo\\bar"])
def test_invalid_path_characters(context, name):
    with pytest.raises(InvalidPathError):
        resolve(context, name)


def test_double_dot_rejected(context):
    """CRITICAL: ".." anywhere in the path fails.

    Why: The loader treats it like directory traversal and ignores the resource.
    """
    with pytest.raises(DoubleDotError):
        resolve(context, "a..b")


def test_double_dot_in_directory_prefix():
    context = ResourceNamingContext(namespace="x").child("a..b")

    with pytest.raises(DoubleDotError):
        resolve(context, "c")


def test_empty_name_rejected(context):
    with pytest.raises(EmptyNameError):
        resolve(context, "")


def test_empty_path_after_namespace_rejected(context):
    with pytest.raises(EmptyNameError):
        resolve(context, "mypack:")


def test_single_dots_allowed(context):
    assert str(resolve(context, "v1.2/file.name")) == "v1.2/file.name"


def test_all_errors_are_naming_errors(context):
    for name in ["Foo", "a..b", "", "Bad:foo"]:
        with pytest.raises(NamingError):
            resolve(context, name)


def test_non_string_name_rejected(context):
    with pytest.raises(TypeError):
        resolve(context, 42)  # type: ignore[arg-type]


# Directory prefixes


def test_directory_is_stripped_at_construction():
    context = ResourceNamingContext(directory="/a//b/")

    assert context.directory == ("a", "b")


def test_none_directory_is_empty_prefix():
    context = ResourceNamingContext(namespace="x", directory=None)  # type: ignore[arg-type]

    assert context.directory == ()
    assert str(resolve(context, "foo")) == "x:foo"


def test_name_slashes_do_not_create_empty_segments():
    context = ResourceNamingContext(namespace="x", directory="dir")

    assert str(resolve(context, "/foo//bar/")) == "x:dir/foo/bar"


def test_nested_children_concatenate_prefixes():
    """CRITICAL: Nested children accumulate prefixes, slash-joined, no empty segments."""
    root = ResourceNamingContext(namespace="x", directory="/a/")
    nested = root.child("b/c/").child("/d")

    assert nested.directory == ("a", "b", "c", "d")
    assert str(resolve(nested, "e")) == "x:a/b/c/d/e"


def test_child_inherits_namespace():
    root = ResourceNamingContext(namespace="x", default_namespace="other")
    child = derive_child(root, "sub")

    assert child.namespace == "x"
    assert child.default_namespace == "other"
    assert root.directory == (), "Parent must not change"


def test_child_without_namespace_allows_explicit_namespace():
    child = ResourceNamingContext().child("utils")

    assert str(resolve(child, "mypack:reset")) == "mypack:utils/reset"
    assert str(resolve(child, "reset")) == "utils/reset"


def test_child_defers_validation_to_resolve():
    """Prefixes are not identifiers on their own; a bad one only fails on resolve."""
    child = ResourceNamingContext().child("Bad Dir")

    assert child.directory == ("Bad Dir",)
    with pytest.raises(InvalidPathError):
        resolve(child, "foo")


def test_context_is_immutable():
    context = ResourceNamingContext(namespace="x")

    with pytest.raises(dataclasses.FrozenInstanceError):
        context.namespace = "y"  # type: ignore[misc]


# Parsing and round-trip


def test_parse_bare_identifier():
    identifier = parse_identifier("foo/bar")

    assert identifier == ResourceIdentifier("minecraft", "foo/bar", explicit=False)


def test_parse_rejects_invalid_identifier():
    with pytest.raises(DoubleDotError):
        parse_identifier("x:a..b")


@given(namespace=namespaces, path=paths)
def test_resolve_round_trip(namespace, path):
    """PROPERTY: Re-parsing "ns:path" recovers the resolved namespace and path."""
    identifier = resolve(ResourceNamingContext(), f"{namespace}:{path}")
    parsed = parse_identifier(str(identifier))

    assert parsed.namespace == namespace
    assert parsed.path == path


@given(namespace=namespaces, directory=st.lists(segments, max_size=3), name=paths)
def test_fixed_namespace_round_trip(namespace, directory, name):
    """PROPERTY: Fixed-namespace identifiers always render as namespace:prefix/name."""
    context = ResourceNamingContext(namespace=namespace, directory="/".join(directory))
    identifier = resolve(context, name)

    assert str(identifier) == f"{namespace}:{'/'.join([*directory, name])}"
    assert parse_identifier(str(identifier)) == identifier
