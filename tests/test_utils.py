"""Tests for bash-strict utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        from bash_strict.utils.logger import get_logger

        assert get_logger("parser").name == "bash_strict.parser"

    def test_keeps_package_names(self) -> None:
        from bash_strict.utils.logger import get_logger

        assert get_logger("bash_strict.lint").name == "bash_strict.lint"
        assert get_logger("bash_strict").name == "bash_strict"

    def test_similar_prefix_is_namespaced(self) -> None:
        from bash_strict.utils.logger import get_logger

        assert get_logger("bash_strictly").name == "bash_strict.bash_strictly"

    def test_returns_stdlib_logger(self) -> None:
        from bash_strict.utils import get_logger

        assert isinstance(get_logger(__name__), logging.Logger)

    def test_no_handlers_installed(self) -> None:
        import bash_strict  # noqa: F401

        assert logging.getLogger("bash_strict").handlers == []
