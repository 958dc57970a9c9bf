"""Tests for routetree.classify: discovered path to segments and role."""

import pytest

from routetree.classify import classify_path, split_segments, strip_path
from routetree.config import CompilerConfig
from routetree.types import ClassifiedEntry, Role


class TestStripPath:
    def test_strips_extension(self) -> None:
        assert strip_path("shop/page.tsx") == "shop/page"

    @pytest.mark.parametrize("ext", [".tsx", ".ts", ".jsx", ".js"])
    def test_default_extensions(self, ext: str) -> None:
        assert strip_path(f"a/page{ext}") == "a/page"

    def test_no_extension(self) -> None:
        assert strip_path("a/page") == "a/page"

    def test_unknown_extension_kept(self) -> None:
        assert strip_path("a/styles.css") == "a/styles.css"

    def test_root_prefix(self) -> None:
        config = CompilerConfig(root_prefix="./app/")
        assert strip_path("./app/shop/page.tsx", config) == "shop/page"

    def test_root_prefix_only_at_start(self) -> None:
        config = CompilerConfig(root_prefix="./app/")
        assert strip_path("other/./app/page.tsx", config) == "other/./app/page"


class TestSplitSegments:
    def test_empty(self) -> None:
        assert split_segments("") == ()

    def test_nested(self) -> None:
        assert split_segments("a/[id]/b") == ("a", "[id]", "b")


class TestLayouts:
    def test_root_layout(self) -> None:
        assert classify_path("layout.tsx") == ClassifiedEntry((), Role.LAYOUT)

    def test_root_underscore_layout(self) -> None:
        assert classify_path("_layout.tsx") == ClassifiedEntry((), Role.LAYOUT)

    def test_nested_layout(self) -> None:
        assert classify_path("a/b/layout.tsx") == ClassifiedEntry(("a", "b"), Role.LAYOUT)

    def test_nested_underscore_layout(self) -> None:
        assert classify_path("shop/_layout.jsx") == ClassifiedEntry(("shop",), Role.LAYOUT)

    def test_with_root_prefix(self) -> None:
        config = CompilerConfig(root_prefix="./app/")
        assert classify_path("./app/layout.tsx", config) == ClassifiedEntry((), Role.LAYOUT)


class TestPages:
    @pytest.mark.parametrize("path", ["page.tsx", "index.tsx", "page", "index.js"])
    def test_root_page(self, path: str) -> None:
        assert classify_path(path) == ClassifiedEntry((), Role.PAGE)

    def test_nested_page(self) -> None:
        assert classify_path("a/[id]/page.tsx") == ClassifiedEntry(("a", "[id]"), Role.PAGE)

    def test_nested_index(self) -> None:
        assert classify_path("history/index.ts") == ClassifiedEntry(("history",), Role.PAGE)

    def test_implicit_page_keeps_full_path(self) -> None:
        """Modules outside the naming convention become pages at their own path."""
        assert classify_path("shop/cart.tsx") == ClassifiedEntry(("shop", "cart"), Role.PAGE)

    def test_suffix_match_is_whole_segment(self) -> None:
        assert classify_path("a/mypage.tsx") == ClassifiedEntry(("a", "mypage"), Role.PAGE)
        assert classify_path("a/notlayout.tsx") == ClassifiedEntry(("a", "notlayout"), Role.PAGE)


class TestIgnored:
    def test_empty_path(self) -> None:
        assert classify_path("").role is Role.IGNORED

    def test_only_extension(self) -> None:
        assert classify_path(".tsx").role is Role.IGNORED


class TestLeadingSlash:
    def test_root_layout_with_leading_slash(self) -> None:
        assert classify_path("/layout.tsx") == ClassifiedEntry((), Role.LAYOUT)

    def test_nested_page_with_leading_slash(self) -> None:
        assert classify_path("/shop/[id]/page.tsx") == ClassifiedEntry(("shop", "[id]"), Role.PAGE)

    def test_prefix_without_trailing_slash(self) -> None:
        config = CompilerConfig(root_prefix="./app")
        assert classify_path("./app/layout.tsx", config) == ClassifiedEntry((), Role.LAYOUT)
        assert classify_path("./app/shop/page.tsx", config) == ClassifiedEntry(("shop",), Role.PAGE)

    def test_lone_slash_is_ignored(self) -> None:
        assert classify_path("/").role is Role.IGNORED
