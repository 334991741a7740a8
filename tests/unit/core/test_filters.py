"""Unit tests for manifest filtering."""

import pytest
from bundlectl.core.filters import apply_filters
from bundlectl.models.config import FilterRule

MANIFEST = [
    "/mingw64/bin/libgtk-3-0.dll",
    "/mingw64/include/gtk-3.0/gtk/gtk.h",
    "/mingw64/lib/libgtk-3.a",
    "/mingw64/lib/libgtk-3.dll.a",
    "/mingw64/share/doc/gtk3/README",
    "/mingw64/share/locale/de/LC_MESSAGES/gtk30.mo",
]


class TestApplyFilters:
    """Tests for apply_filters function."""

    def test_no_rules_returns_manifest(self) -> None:
        """Without rules the manifest passes through unchanged."""
        assert apply_filters("gtk3", MANIFEST, []) == MANIFEST

    def test_matching_rule_excludes_files(self) -> None:
        """Files matching any pattern of an applicable rule are removed."""
        rule = FilterRule(package="gtk3", files=[r"\.a$", r"/include/"])

        result = apply_filters("mingw-w64-x86_64-gtk3", MANIFEST, [rule])

        assert result == [
            "/mingw64/bin/libgtk-3-0.dll",
            "/mingw64/share/doc/gtk3/README",
            "/mingw64/share/locale/de/LC_MESSAGES/gtk30.mo",
        ]

    def test_non_matching_rule_ignored(self) -> None:
        """Rules for other packages do not affect the manifest."""
        rule = FilterRule(package="^glib2$", files=[".*"])

        assert apply_filters("gtk3", MANIFEST, [rule]) == MANIFEST

    def test_package_pattern_is_search_not_exact(self) -> None:
        """Package patterns match anywhere in the name."""
        rule = FilterRule(package="x86_64", files=["/share/"])

        result = apply_filters("mingw-w64-x86_64-gtk3", MANIFEST, [rule])

        assert not any("/share/" in path for path in result)

    def test_exclusions_accumulate(self) -> None:
        """Exclusions from several rules combine."""
        rules = [
            FilterRule(package="gtk", files=[r"/include/"]),
            FilterRule(package=".", files=[r"/share/doc/"]),
        ]

        result = apply_filters("gtk3", MANIFEST, rules)

        assert "/mingw64/include/gtk-3.0/gtk/gtk.h" not in result
        assert "/mingw64/share/doc/gtk3/README" not in result
        assert len(result) == len(MANIFEST) - 2

    def test_later_rule_never_reincludes(self) -> None:
        """A rule that excludes nothing cannot restore excluded files."""
        rules = [
            FilterRule(package="gtk3", files=[r"\.a$"]),
            FilterRule(package="gtk3", files=[]),
        ]

        result = apply_filters("gtk3", MANIFEST, rules)

        assert "/mingw64/lib/libgtk-3.a" not in result

    def test_case_sensitive(self) -> None:
        """Matching is case-sensitive."""
        rule = FilterRule(package="gtk3", files=["README"])

        result = apply_filters("gtk3", ["/doc/readme", "/doc/README"], [rule])

        assert result == ["/doc/readme"]

    def test_result_is_subset(self) -> None:
        """The filtered manifest is always a subset of the raw one."""
        rule = FilterRule(package=".", files=["lib"])

        result = apply_filters("gtk3", MANIFEST, [rule])

        assert set(result) <= set(MANIFEST)

    @pytest.mark.parametrize(
        "patterns",
        [
            [[r"\.a$"]],
            [[r"\.a$"], [r"/share/"]],
            [[r"\.a$"], [r"/share/"], [r"\.dll$", r"/include/"]],
        ],
    )
    def test_monotonic(self, patterns: list[list[str]]) -> None:
        """Adding rules never grows the output."""
        sizes: list[int] = []
        rules: list[FilterRule] = []
        for files in patterns:
            rules.append(FilterRule(package="gtk", files=files))
            sizes.append(len(apply_filters("gtk3", MANIFEST, rules)))

        assert sizes == sorted(sizes, reverse=True)
        assert all(size <= len(MANIFEST) for size in sizes)
