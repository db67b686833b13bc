from __future__ import annotations

import pytest
from pydantic import ValidationError

from mdbuild.core.settings import BuildSettings


def test_default_extensions() -> None:
    settings = BuildSettings()

    assert settings.extensions == frozenset({"txt", "md", "mkdn", "markdown"})
    assert settings.partial_prefix == "_"
    assert settings.vendor_marker == "vendor"


def test_extensions_replaced_by_caller() -> None:
    settings = BuildSettings(extensions=["foo", ".bar"])

    assert settings.is_transformable("foo")
    assert settings.is_transformable("bar")
    assert not settings.is_transformable("md")


def test_extensions_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MDBUILD_EXTENSIONS", '["md", ".rst"]')
    monkeypatch.setenv("MDBUILD_VENDOR_MARKER", "lib")

    settings = BuildSettings()

    assert settings.extensions == frozenset({"md", "rst"})
    assert settings.vendor_marker == "lib"


def test_empty_partial_prefix_rejected() -> None:
    with pytest.raises(ValidationError):
        BuildSettings(partial_prefix="")
