"""Tests for cycle state management."""

import pytest
import threading
from skycycle.state import CycleConfig, ConfigurationError, validate_duration, validate_time


class TestCycleConfig:
    """Tests for CycleConfig class."""

    def test_initialization(self):
        """Should initialize with the documented defaults."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)
        assert config.cycle_duration_seconds == 60.0
        assert config.auto_play is True
        assert config.current_time == 0.5

    def test_rejects_zero_duration(self):
        """Should reject a zero duration at construction."""
        with pytest.raises(ConfigurationError):
            CycleConfig(cycle_duration_seconds=0)

    def test_rejects_negative_duration_on_assignment(self):
        """Should reject a negative duration when assigned."""
        config = CycleConfig()
        with pytest.raises(ConfigurationError):
            config.cycle_duration_seconds = -5
        assert config.cycle_duration_seconds > 0

    def test_rejects_non_finite_duration(self):
        """Should reject infinite and NaN durations."""
        with pytest.raises(ConfigurationError):
            validate_duration(float("inf"))
        with pytest.raises(ConfigurationError):
            validate_duration(float("nan"))

    def test_configuration_error_is_value_error(self):
        """Should be catchable as ValueError."""
        assert issubclass(ConfigurationError, ValueError)

    def test_current_time_wraps(self):
        """Should wrap out-of-range times instead of failing."""
        config = CycleConfig(current_time=0.9)
        config.current_time = 1.3
        assert config.current_time == pytest.approx(0.3)

        config.current_time = 1.0
        assert config.current_time == 0.0

        config.current_time = -0.25
        assert config.current_time == 0.75

    def test_initial_time_wraps(self):
        """Should normalize the starting time too."""
        assert CycleConfig(current_time=2.5).current_time == 0.5

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_rejects_non_finite_time(self, value):
        """Should reject infinite and NaN times and keep the old one."""
        config = CycleConfig(current_time=0.9)
        with pytest.raises(ConfigurationError):
            config.current_time = value
        assert config.current_time == 0.9

        with pytest.raises(ConfigurationError):
            validate_time(value)

    def test_rejects_non_finite_initial_time(self):
        """Should reject a non-finite starting time at construction."""
        with pytest.raises(ConfigurationError):
            CycleConfig(current_time=float("inf"))


class TestUpdate:
    """Tests for multi-field updates."""

    def test_update_multiple_fields(self):
        """Should update several settings at once."""
        config = CycleConfig()
        config.update(auto_play=False, current_time=0.75, cycle_duration_seconds=120)
        assert config.auto_play is False
        assert config.current_time == 0.75
        assert config.cycle_duration_seconds == 120.0

    def test_update_wraps_time(self):
        """Should wrap time written through update()."""
        config = CycleConfig()
        config.update(current_time=1.3)
        assert config.current_time == pytest.approx(0.3)

    def test_invalid_update_changes_nothing(self):
        """Should leave every setting untouched when the duration is rejected."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)
        with pytest.raises(ConfigurationError):
            config.update(auto_play=False, cycle_duration_seconds=0)
        assert config.auto_play is True
        assert config.cycle_duration_seconds == 60.0

    def test_non_finite_update_changes_nothing(self):
        """Should leave every setting untouched when the time is rejected."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)
        with pytest.raises(ConfigurationError):
            config.update(auto_play=False, current_time=float("nan"))
        assert config.auto_play is True
        assert config.current_time == 0.5

    def test_update_ignores_private_fields(self):
        """Should not update private fields (starting with _)."""
        config = CycleConfig()
        lock = config._lock
        config.update(_lock="invalid")
        assert config._lock is lock

    def test_update_ignores_invalid_fields(self):
        """Should ignore fields that don't exist."""
        config = CycleConfig()
        config.update(invalid_field="value")
        assert not hasattr(config, "invalid_field")

    def test_thread_safe_update(self):
        """Should handle concurrent updates safely."""
        config = CycleConfig()
        errors = []

        def update_config(value):
            try:
                for _ in range(100):
                    config.update(current_time=value)
            except Exception as e:
                errors.append(e)

        threads = [
            threading.Thread(target=update_config, args=(0.25,)),
            threading.Thread(target=update_config, args=(0.5,)),
            threading.Thread(target=update_config, args=(0.75,)),
        ]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not errors
        assert config.current_time in (0.25, 0.5, 0.75)


class TestSnapshot:
    """Tests for get_snapshot()."""

    def test_snapshot_contents(self):
        """Should return all settings as a plain dict."""
        config = CycleConfig(cycle_duration_seconds=30, auto_play=False, current_time=0.1)
        assert config.get_snapshot() == {
            "cycle_duration_seconds": 30.0,
            "auto_play": False,
            "current_time": 0.1,
        }

    def test_snapshot_is_copy(self):
        """Should not change when the config changes afterwards."""
        config = CycleConfig()
        snapshot = config.get_snapshot()
        config.update(current_time=0.9)
        assert snapshot["current_time"] == 0.5


class TestAdvance:
    """Tests for the per-tick time step."""

    def test_autoplay_derives_time(self):
        """Should derive and store the time from the wall clock."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.9)
        assert config.advance(15.0) == 0.25
        assert config.current_time == 0.25

    def test_autoplay_wraps(self):
        """Should loop after each full cycle."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True)
        assert config.advance(60.0) == 0.0
        assert config.advance(75.0) == 0.25

    def test_manual_time_kept(self):
        """Should return the scrubbed time when autoplay is off."""
        config = CycleConfig(auto_play=False, current_time=0.1)
        assert config.advance(15.0) == 0.1
        assert config.current_time == 0.1

    def test_non_finite_wall_clock_rejected(self):
        """Should refuse to store a time derived from an infinite clock."""
        config = CycleConfig(auto_play=True, current_time=0.5)
        with pytest.raises(ConfigurationError):
            config.advance(float("inf"))
        assert config.current_time == 0.5

    def test_scrub_during_advance_is_kept(self):
        """Should keep a scrub that turns autoplay off while a tick is pending."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)
        results = []

        with config._lock:
            ticker = threading.Thread(target=lambda: results.append(config.advance(15.0)))
            ticker.start()
            ticker.join(timeout=0.1)
            # The tick waits for the panel's update to finish
            assert ticker.is_alive()
            config.update(auto_play=False, current_time=0.75)

        ticker.join(timeout=2.0)

        assert results == [0.75]
        assert config.get_snapshot() == {
            "cycle_duration_seconds": 60.0,
            "auto_play": False,
            "current_time": 0.75,
        }

    def test_scrub_after_advance_is_kept(self):
        """Should keep a scrub that lands right after a tick."""
        config = CycleConfig(cycle_duration_seconds=60, auto_play=True, current_time=0.5)
        config.advance(15.0)
        config.update(auto_play=False, current_time=0.75)
        assert config.advance(30.0) == 0.75
