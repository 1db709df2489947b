"""
Tests for npmhatch.naming
=========================

Test Organization
-----------------
- TestIsValidPackageName: Full grammar
- TestSubRules: Scope and name segment rules on their own
- TestToValidPackageName: Normalization steps and properties
- TestPackageNameToDirName: Scope stripping
- TestValidatePackageName: Prompt validator
"""

import pytest

from npmhatch.naming import (
    INVALID_NAME_MESSAGE,
    is_valid_name_segment,
    is_valid_package_name,
    is_valid_scope,
    package_name_to_dir_name,
    to_valid_package_name,
    validate_package_name,
)


SAMPLE_INPUTS = [
    "My Cool App",
    "  spaced   out  ",
    ".hidden",
    "_private",
    "._both",
    "Über Café",
    "@acme/widget",
    "a!!b??c",
    "tabs\tand\nnewlines",
    "~tilde~",
    "123",
    "x",
    "-lead",
]


class TestIsValidPackageName:
    """Tests for is_valid_package_name."""

    @pytest.mark.parametrize(
        "name",
        [
            "my-app",
            "app",
            "a.b",
            "a_b",
            "~home",
            "-dash",
            "123",
            "@acme/widget",
            "@my-org/my.pkg",
            "@a*b/pkg",
        ],
    )
    def test_valid_names(self, name: str) -> None:
        assert is_valid_package_name(name)

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "My-App",
            "my app",
            ".hidden",
            "_private",
            "@acme/",
            "@/pkg",
            "@acme/.pkg",
            "@acme/a/b",
            "acme/widget",
            "app!",
        ],
    )
    def test_invalid_names(self, name: str) -> None:
        assert not is_valid_package_name(name)


class TestSubRules:
    """Tests for the named scope and name segment rules."""

    def test_scope_requires_at_sign(self) -> None:
        assert is_valid_scope("@acme")
        assert not is_valid_scope("acme")

    def test_scope_allows_star(self) -> None:
        assert is_valid_scope("@*")

    def test_scope_excludes_slash(self) -> None:
        assert not is_valid_scope("@acme/")

    def test_name_segment_leading_chars(self) -> None:
        assert is_valid_name_segment("widget")
        assert not is_valid_name_segment(".widget")
        assert not is_valid_name_segment("_widget")

    def test_name_segment_rejects_star(self) -> None:
        assert not is_valid_name_segment("wid*get")


class TestToValidPackageName:
    """Tests for to_valid_package_name."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My Cool App", "my-cool-app"),
            ("  padded  ", "padded"),
            ("a   b", "a-b"),
            (".hidden", "hidden"),
            ("_private", "private"),
            ("..two", "-two"),
            ("a!!b??c", "a-b-c"),
            ("@acme/widget", "-acme-widget"),
            ("keep.dots_out", "keep-dots-out"),
            ("~ok~", "~ok~"),
        ],
    )
    def test_examples(self, raw: str, expected: str) -> None:
        assert to_valid_package_name(raw) == expected

    @pytest.mark.parametrize("raw", SAMPLE_INPUTS)
    def test_idempotent(self, raw: str) -> None:
        once = to_valid_package_name(raw)
        assert to_valid_package_name(once) == once

    @pytest.mark.parametrize("raw", SAMPLE_INPUTS)
    def test_result_is_valid(self, raw: str) -> None:
        assert is_valid_package_name(to_valid_package_name(raw))

    def test_only_one_leading_char_stripped(self) -> None:
        assert to_valid_package_name("__x") == "-x"


class TestPackageNameToDirName:
    """Tests for package_name_to_dir_name."""

    def test_scoped(self) -> None:
        assert package_name_to_dir_name("@scope/pkg") == "pkg"

    def test_plain(self) -> None:
        assert package_name_to_dir_name("plainname") == "plainname"

    def test_multiple_slashes_takes_second_part(self) -> None:
        assert package_name_to_dir_name("@scope/a/b") == "a"


class TestValidatePackageName:
    """Tests for the prompt validator."""

    def test_valid_returns_true(self) -> None:
        assert validate_package_name("my-app") is True

    def test_invalid_returns_message(self) -> None:
        assert validate_package_name("My App") == INVALID_NAME_MESSAGE
