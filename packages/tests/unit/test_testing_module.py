"""Unit tests for timecounter.testing: public test-support utilities.

Test Techniques Used:
    - Specification-based Testing: ``__all__`` and factory overrides
    - Identity Testing: Re-exports are the private-module objects
    - Fixture Injection: Plugin fixtures are available without imports
"""

from __future__ import annotations

import timecounter.testing as testing_mod
from timecounter._seconds import EpochSeconds
from timecounter._settings import Settings
from timecounter.testing import FakeClock, IsolatedSettings, make_settings
from timecounter.testing._clock import FakeClock as PrivateFakeClock


class TestPublicAPI:
    """All expected symbols are importable and listed in ``__all__``.

    Technique: Specification-based Testing of __all__.
    """

    def test_all_contains_expected_symbols(self) -> None:
        """__all__ lists exactly the public helpers."""
        assert set(testing_mod.__all__) == {
            "FakeClock",
            "IsolatedSettings",
            "make_settings",
        }

    def test_fake_clock_is_reexported(self) -> None:
        """FakeClock is the private-module class."""
        assert FakeClock is PrivateFakeClock


class TestMakeSettings:
    """make_settings factory.

    Technique: Specification-based Testing of factory overrides.
    """

    def test_returns_settings(self) -> None:
        """make_settings() returns an IsolatedSettings."""
        settings = make_settings()
        assert isinstance(settings, Settings)
        assert isinstance(settings, IsolatedSettings)

    def test_overrides(self) -> None:
        """Keyword overrides are applied."""
        assert make_settings(refresh_interval=0.1).refresh_interval == 0.1


class TestPluginFixtures:
    """Fixtures registered by timecounter.testing._plugin.

    Technique: Fixture Injection without explicit imports.
    """

    def test_fake_clock_fixture(self, fake_clock: FakeClock) -> None:
        """fake_clock starts at EpochSeconds(0)."""
        assert fake_clock.now() == EpochSeconds(0)

    def test_settings_fixture(self, settings: Settings) -> None:
        """settings uses integer instants."""
        assert settings.instant == "seconds"
