"""Tests for the SystemLogger facade."""

from __future__ import annotations

import threading

import pytest

from src.system_logger import (
    FALLBACK_SUBSYSTEM,
    LogEntry,
    LogLevel,
    MemorySink,
    StdlibLoggingSink,
    SystemLogger,
    get_main_logger,
    resolve_subsystem,
)

EMIT_METHODS = [
    ("log_info", LogLevel.INFO, False),
    ("log_debug", LogLevel.DEBUG, False),
    ("log_warning", LogLevel.WARNING, False),
    ("log_error", LogLevel.ERROR, False),
    ("log_critical", LogLevel.FAULT, False),
    ("log_private", LogLevel.DEFAULT, True),
]


class _FailingSink:
    """Sink that always raises."""

    def emit(self, level, subsystem, category, message, redacted):
        raise RuntimeError("sink unavailable")


class TestConstruction:
    """Tests for SystemLogger construction."""

    def test_explicit_subsystem_and_category(self) -> None:
        """Test that explicit values are kept as given."""
        logger = SystemLogger(subsystem="com.example.myapp", category="Networking")
        assert logger.subsystem == "com.example.myapp"
        assert logger.category == "Networking"

    def test_default_category(self) -> None:
        """Test that category defaults to 'default'."""
        logger = SystemLogger(subsystem="com.example.myapp")
        assert logger.category == "default"

    def test_empty_category_falls_back_to_default(self) -> None:
        """Test that an empty category degrades instead of failing."""
        logger = SystemLogger(subsystem="com.example.myapp", category="")
        assert logger.category == "default"

    def test_missing_subsystem_is_resolved(self) -> None:
        """Test that an omitted subsystem uses the resolved identifier."""
        logger = SystemLogger()
        assert logger.subsystem == resolve_subsystem(None)
        assert logger.subsystem

    def test_empty_subsystem_is_resolved(self) -> None:
        """Test that an empty subsystem is treated as omitted."""
        assert SystemLogger(subsystem="").subsystem == SystemLogger().subsystem

    def test_subsystem_falls_back_without_identifier(self, monkeypatch) -> None:
        """Test the fixed fallback when no application identifier exists."""
        monkeypatch.setattr(
            "src.system_logger.identity.application_identifier", lambda: None
        )
        logger = SystemLogger()
        assert logger.subsystem == FALLBACK_SUBSYSTEM

    def test_resolution_is_deterministic(self) -> None:
        """Test that repeated construction resolves the same subsystem."""
        subsystems = {SystemLogger().subsystem for _ in range(5)}
        assert len(subsystems) == 1

    def test_default_sink_is_stdlib(self) -> None:
        """Test that the stdlib sink is used when none is injected."""
        logger = SystemLogger(subsystem="com.example.myapp")
        assert isinstance(logger.sink, StdlibLoggingSink)

    def test_injected_sink_is_used(self) -> None:
        """Test that an injected sink is kept."""
        sink = MemorySink()
        logger = SystemLogger(subsystem="com.example.myapp", sink=sink)
        assert logger.sink is sink

    def test_is_immutable(self) -> None:
        """Test that attributes cannot be reassigned or removed."""
        logger = SystemLogger(subsystem="com.example.myapp", category="Cache")
        with pytest.raises(AttributeError):
            logger.subsystem = "other"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            logger._category = "other"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del logger._sink
        assert logger.subsystem == "com.example.myapp"
        assert logger.category == "Cache"

    def test_repr(self) -> None:
        """Test the repr shows subsystem and category."""
        logger = SystemLogger(subsystem="com.example.myapp", category="Cache")
        assert repr(logger) == "SystemLogger(subsystem='com.example.myapp', category='Cache')"


class TestEmitOperations:
    """Tests for the six emit operations."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.sink = MemorySink()
        self.logger = SystemLogger(subsystem="com.test.app", category="Net", sink=self.sink)

    def test_log_error_scenario(self) -> None:
        """Test the canonical error entry recorded by the spy."""
        self.logger.log_error("timeout")

        assert self.sink.entries == (
            LogEntry(
                subsystem="com.test.app",
                category="Net",
                level=LogLevel.ERROR,
                message="timeout",
                redacted=False,
            ),
        )

    @pytest.mark.parametrize("method,level,redacted", EMIT_METHODS)
    def test_operation_records_level_and_redaction(self, method, level, redacted) -> None:
        """Test each operation maps to its severity and redaction flag."""
        result = getattr(self.logger, method)("message")

        assert result is None
        assert len(self.sink) == 1
        entry = self.sink.entries[0]
        assert entry.level is level
        assert entry.redacted is redacted
        assert entry.message == "message"

    @pytest.mark.parametrize("method,level,redacted", EMIT_METHODS)
    def test_operation_tags_subsystem_and_category(self, method, level, redacted) -> None:
        """Test every entry carries the logger's subsystem and category."""
        getattr(self.logger, method)("message")

        entry = self.sink.entries[0]
        assert entry.subsystem == "com.test.app"
        assert entry.category == "Net"

    def test_only_private_is_redacted(self) -> None:
        """Test that log_private is the only redacting operation."""
        for method, _, _ in EMIT_METHODS:
            getattr(self.logger, method)("payload")

        redacted = [entry for entry in self.sink.entries if entry.redacted]
        assert len(redacted) == 1
        assert redacted[0].level is LogLevel.DEFAULT

    def test_message_with_percent_is_passed_through(self) -> None:
        """Test that format characters reach the sink untouched."""
        self.logger.log_info("100% done, %s pending")
        assert self.sink.entries[0].message == "100% done, %s pending"

    def test_entries_are_recorded_in_call_order(self) -> None:
        """Test that sequential calls are recorded in order."""
        self.logger.log_debug("first")
        self.logger.log_warning("second")
        self.logger.log_critical("third")

        assert [e.message for e in self.sink.entries] == ["first", "second", "third"]


class TestSinkFailures:
    """Tests that sink failures never reach the caller."""

    @pytest.mark.parametrize("method,level,redacted", EMIT_METHODS)
    def test_failing_sink_does_not_raise(self, method, level, redacted) -> None:
        """Test each operation absorbs sink errors."""
        logger = SystemLogger(subsystem="com.test.app", sink=_FailingSink())
        assert getattr(logger, method)("message") is None

    def test_failure_is_reported_at_debug(self, caplog) -> None:
        """Test that a dropped entry is reported on the module logger."""
        logger = SystemLogger(subsystem="com.test.app", category="Net", sink=_FailingSink())

        with caplog.at_level("DEBUG", logger="src.system_logger.logger"):
            logger.log_error("timeout")

        messages = [r.getMessage() for r in caplog.records if r.name == "src.system_logger.logger"]
        assert any("com.test.app/Net" in m and "_FailingSink" in m for m in messages)


class TestConcurrency:
    """Tests for concurrent use of one logger."""

    def test_concurrent_emits_are_all_recorded(self) -> None:
        """Test that many threads can share one logger."""
        sink = MemorySink()
        logger = SystemLogger(subsystem="com.test.app", category="Workers", sink=sink)

        def worker(n: int) -> None:
            for i in range(50):
                logger.log_info(f"worker-{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(sink) == 400
        assert {e.category for e in sink.entries} == {"Workers"}


class TestMainLogger:
    """Tests for the shared process-wide logger."""

    def test_returns_same_instance(self) -> None:
        """Test that repeated access returns the same logger."""
        assert get_main_logger() is get_main_logger()

    def test_uses_default_identity(self) -> None:
        """Test that the shared logger matches SystemLogger()."""
        main_logger = get_main_logger()
        fresh = SystemLogger()
        assert main_logger.subsystem == fresh.subsystem
        assert main_logger.category == "default"

    def test_concurrent_first_access_builds_once(self, monkeypatch) -> None:
        """Test that racing threads all see one instance."""
        monkeypatch.setattr("src.system_logger.logger._main_logger", None)
        barrier = threading.Barrier(8)
        results: list[SystemLogger] = []
        lock = threading.Lock()

        def access() -> None:
            barrier.wait()
            instance = get_main_logger()
            with lock:
                results.append(instance)

        threads = [threading.Thread(target=access) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)
