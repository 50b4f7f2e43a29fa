"""Unit tests for the logical height providers."""

import pytest

from todolist.core.domain.errors import StorageError
from todolist.infrastructure.clock import CounterClock, ManualClock, SystemClock


class TestCounterClock:
    def test_in_memory_counter_starts_at_one(self):
        clock = CounterClock()
        assert clock.peek() == 0
        assert clock.current_height() == 1
        assert clock.current_height() == 2
        assert clock.peek() == 2

    def test_persisted_counter_survives_restart(self, tmp_path):
        first = CounterClock(work_dir=tmp_path)
        first.current_height()
        first.current_height()

        second = CounterClock(work_dir=tmp_path)
        assert second.peek() == 2
        assert second.current_height() == 3
        assert (tmp_path / "height").read_text(encoding="utf-8") == "3"

    def test_corrupt_counter_raises(self, tmp_path):
        (tmp_path / "height").write_text("twelve", encoding="utf-8")
        with pytest.raises(StorageError):
            CounterClock(work_dir=tmp_path).current_height()


class TestManualClock:
    def test_fixed_height(self):
        clock = ManualClock(100)
        assert clock.current_height() == 100
        assert clock.current_height() == 100

    def test_advance_and_set(self):
        clock = ManualClock(100)
        assert clock.advance(5) == 105
        clock.set(110)
        assert clock.current_height() == 110

    def test_set_refuses_lower_height(self):
        clock = ManualClock(100)
        with pytest.raises(ValueError):
            clock.set(99)
        assert clock.current_height() == 100


class TestSystemClock:
    def test_uses_unix_seconds(self, monkeypatch):
        monkeypatch.setattr(
            "todolist.infrastructure.clock.system_clock.time.time",
            lambda: 1_700_000_000.7,
        )
        assert SystemClock().current_height() == 1_700_000_000

    def test_never_goes_backwards(self, monkeypatch):
        readings = [2000.0, 1000.0, 3000.0]
        monkeypatch.setattr(
            "todolist.infrastructure.clock.system_clock.time.time",
            lambda: readings.pop(0) if readings else 3000.0,
        )
        clock = SystemClock()
        assert [clock.current_height() for _ in range(3)] == [2000, 2000, 3000]


class TestSharedHeightFloor:
    def test_system_clock_persists_and_respects_floor(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "todolist.infrastructure.clock.system_clock.time.time", lambda: 1000.0
        )
        (tmp_path / "height").write_text("5000", encoding="utf-8")

        clock = SystemClock(work_dir=tmp_path)
        assert clock.current_height() == 5000
        assert (tmp_path / "height").read_text(encoding="utf-8") == "5000"

    def test_counter_continues_above_system_height(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "todolist.infrastructure.clock.system_clock.time.time",
            lambda: 1_700_000_000.0,
        )
        assert SystemClock(work_dir=tmp_path).current_height() == 1_700_000_000
        assert CounterClock(work_dir=tmp_path).current_height() == 1_700_000_001

    def test_system_clock_continues_above_counter(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            "todolist.infrastructure.clock.system_clock.time.time", lambda: 10.0
        )
        counter = CounterClock(work_dir=tmp_path)
        for _ in range(20):
            counter.current_height()
        assert SystemClock(work_dir=tmp_path).current_height() == 20

    def test_corrupt_height_file_raises(self, tmp_path):
        (tmp_path / "height").write_bytes(b"\xff\xfe")
        with pytest.raises(StorageError):
            SystemClock(work_dir=tmp_path).current_height()
