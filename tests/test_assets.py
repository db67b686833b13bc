from __future__ import annotations

from pathlib import Path

from mdbuild.building.assets import (
    discover_site_assets,
    find_partials,
    is_vendor_path,
    order_assets,
)
from mdbuild.core.settings import BuildSettings
from tests.fixtures import write_tree


def test_is_vendor_path_matches_any_segment() -> None:
    assert is_vendor_path("vendor/jquery.js", "vendor")
    assert is_vendor_path("static/js-vendor/x.js", "vendor")
    assert not is_vendor_path("static/app.js", "vendor")
    assert not is_vendor_path("vendor/app.js", "")


def test_order_assets_vendor_last_then_alphabetical() -> None:
    refs = order_assets(
        ["vendor/jquery.js", "b.js", "lib-vendor/x.js", "a/z.js"], "vendor"
    )

    assert [r.path for r in refs] == [
        "a/z.js",
        "b.js",
        "lib-vendor/x.js",
        "vendor/jquery.js",
    ]
    assert [r.vendor for r in refs] == [False, False, True, True]


def test_discover_site_assets_recursive(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "site.css": "",
            "docs/deep/print.css": "",
            "vendor/bootstrap/bootstrap.css": "",
            "app.js": "",
            "vendor/jquery.js": "",
            "notes.md": "",
        },
    )

    assets = discover_site_assets(tmp_path, BuildSettings())

    assert [r.path for r in assets.stylesheets] == [
        "docs/deep/print.css",
        "site.css",
        "vendor/bootstrap/bootstrap.css",
    ]
    assert [r.path for r in assets.scripts] == ["app.js", "vendor/jquery.js"]


def test_configurable_vendor_marker(tmp_path: Path) -> None:
    write_tree(tmp_path, {"lib/a.js": "", "vendor/b.js": "", "c.js": ""})

    assets = discover_site_assets(tmp_path, BuildSettings(vendor_marker="lib"))

    assert [r.path for r in assets.scripts] == ["c.js", "vendor/b.js", "lib/a.js"]


def test_asset_href_rebased_by_depth() -> None:
    ref = order_assets(["css/site.css"], "vendor")[0]

    assert ref.href() == "css/site.css"
    assert ref.href(2) == "../../css/site.css"


def test_find_partials_directory_local(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {
            "_b.md": "b",
            "_a.txt": "a",
            "_style.css": "",
            "page.md": "",
            "sub/_c.md": "c",
        },
    )

    partials = find_partials(tmp_path, BuildSettings())

    assert [p.path.name for p in partials] == ["_a.txt", "_b.md"]
