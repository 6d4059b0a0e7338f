"""Tests for ContextVar-based scan configuration.

Validates defaults, validation, from_dict, context manager behavior
and thread isolation.
"""

from threading import Thread

import pytest

from minimark import (
    ConfigError,
    ScanConfig,
    Scanner,
    get_scan_config,
    lex,
    reset_scan_config,
    scan,
    scan_config_context,
    set_scan_config,
)
from minimark.tokens import Token, TokenType


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.header_sigil == "#"
        assert config.paragraph_separator == "\n\n"
        assert config.header_whitespace == " \t"
        assert config.max_header_level is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.header_sigil = "="  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("field_name", "value"),
        [
            ("header_sigil", ""),
            ("header_sigil", " #"),
            ("header_sigil", "\t"),
            ("header_sigil", "\n#"),
            ("paragraph_separator", ""),
            ("header_whitespace", " \n"),
            ("max_header_level", 0),
            ("max_header_level", -3),
        ],
    )
    def test_invalid_values(self, field_name: str, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ScanConfig(**{field_name: value})
        assert exc_info.value.field_name == field_name
        assert field_name in str(exc_info.value)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ScanConfig(header_sigil="")


class TestScanConfigFromDict:
    """Test ScanConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = ScanConfig.from_dict({"header_sigil": "=", "max_header_level": 6})
        assert config.header_sigil == "="
        assert config.max_header_level == 6
        assert config.paragraph_separator == "\n\n"

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"max_header_level": 2, "unknown_key": 42})
        assert config.max_header_level == 2

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()

    def test_from_dict_validates(self) -> None:
        with pytest.raises(ConfigError):
            ScanConfig.from_dict({"header_sigil": ""})


class TestConfigContext:
    """ContextVar get/set/reset and the context manager."""

    def test_default_config(self) -> None:
        reset_scan_config()
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        custom = ScanConfig(header_sigil="=")
        set_scan_config(custom)
        try:
            assert get_scan_config() is custom
        finally:
            reset_scan_config()
        assert get_scan_config() == ScanConfig()

    def test_context_manager_restores(self) -> None:
        custom = ScanConfig(max_header_level=1)
        with scan_config_context(custom):
            assert get_scan_config() is custom
        assert get_scan_config() == ScanConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(header_sigil="=")):
                raise RuntimeError("boom")
        assert get_scan_config().header_sigil == "#"

    def test_scanner_reads_config_at_construction(self) -> None:
        with scan_config_context(ScanConfig(header_sigil="=")):
            scanner = lex("ctx", "== Title")
        assert list(scanner) == [
            Token(TokenType.HEADER_MARKER, "=="),
            Token(TokenType.TEXT, "Title"),
            Token(TokenType.EOF, ""),
        ]

    def test_explicit_config_wins(self) -> None:
        with scan_config_context(ScanConfig(header_sigil="=")):
            tokens = scan("# Title", config=ScanConfig())
        assert tokens[0] == Token(TokenType.HEADER_MARKER, "#")


class TestCustomGrammar:
    """Scanning with non-default configuration."""

    def test_multi_char_sigil(self) -> None:
        tokens = scan("=>=> Title", config=ScanConfig(header_sigil="=>"))
        assert tokens[:2] == [
            Token(TokenType.HEADER_MARKER, "=>=>"),
            Token(TokenType.TEXT, "Title"),
        ]

    def test_single_newline_separator(self) -> None:
        tokens = scan("a\nb", config=ScanConfig(paragraph_separator="\n"))
        assert [t.value for t in tokens] == ["a", "b", ""]

    @pytest.mark.parametrize(
        ("separator", "source"),
        [
            ("\n---\n", "a\n---\nb"),
            ("\n \n", "a\n \nb"),
            ("--", "a--b"),
        ],
    )
    def test_multi_char_separator_is_dropped(self, separator: str, source: str) -> None:
        tokens = scan(source, config=ScanConfig(paragraph_separator=separator))
        assert [t.value for t in tokens] == ["a", "b", ""]

    def test_back_to_back_separators(self) -> None:
        tokens = scan("--x--y----z", config=ScanConfig(paragraph_separator="--"))
        assert [t.value for t in tokens] == ["x", "y", "z", ""]

    def test_no_header_whitespace(self) -> None:
        tokens = scan("# x", config=ScanConfig(header_whitespace=""))
        assert tokens[1] == Token(TokenType.TEXT, " x")


class TestThreadIsolation:
    """Test thread-local configuration isolation."""

    def test_thread_isolation(self) -> None:
        results: dict[int, str] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            scanner = Scanner("thread", "x")
            results[thread_id] = scanner._config.header_sigil

        sigils = ["#", "=", "@"]
        threads = [
            Thread(target=worker, args=(i, ScanConfig(header_sigil=s)))
            for i, s in enumerate(sigils)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: "#", 1: "=", 2: "@"}
        assert get_scan_config().header_sigil == "#"
