"""Verify package imports work correctly."""


def test_import_bash_strict() -> None:
    """Test that bash_strict can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import bash_strict

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert bash_strict.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from bash_strict import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_all_exports_resolve() -> None:
    """Every name in __all__ is importable from the package."""
    import bash_strict

    for name in bash_strict.__all__:
        assert hasattr(bash_strict, name), name
