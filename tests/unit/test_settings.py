"""
Tests for the timeline settings schema, manager and preference stores.
"""
import json

import pytest

from historie_timeline.interfaces import PreferencesRepository
from historie_timeline.settings import (
    InMemoryPreferencesRepository,
    JsonPreferencesRepository,
    TimelineSettings,
    TimelineSettingsManager,
)


class TestTimelineSettings:
    """Tests for the TimelineSettings schema."""

    def test_defaults_are_valid(self):
        settings = TimelineSettings()
        assert settings.is_valid()
        assert settings.pixels_per_year == 2
        assert (settings.min_scale, settings.max_scale) == (0.1, 10.0)
        assert settings.zoom_factor == 1.2

    def test_zoom_factor_must_exceed_one(self):
        result = TimelineSettings(zoom_factor=1.0).validate()
        assert result.valid is False
        assert any("zoom_factor" in e for e in result.errors)

    def test_negative_spacing_rejected(self):
        assert TimelineSettings(media_min_spacing_px=-5).is_valid() is False

    def test_scale_bounds_must_be_ordered(self):
        result = TimelineSettings(min_scale=5.0, max_scale=2.0).validate()
        assert result.valid is False
        assert "min_scale" in result.errors[0]

    def test_default_scale_within_bounds(self):
        assert TimelineSettings(default_scale=20.0).is_valid() is False

    def test_from_dict_ignores_unknown_keys(self):
        settings = TimelineSettings.from_dict({'max_scale': 8.0, 'obsolete': True})
        assert settings.max_scale == 8.0
        assert settings.min_scale == 0.1

    def test_round_trip_dict(self):
        settings = TimelineSettings(pixels_per_year=3, clip_eras_to_viewport=False)
        assert TimelineSettings.from_dict(settings.to_dict()) == settings

    def test_validate_unknown_field(self):
        with pytest.raises(AttributeError):
            TimelineSettings().validate_field('nope')


class TestTimelineSettingsManager:
    """Tests for TimelineSettingsManager."""

    def test_defaults_without_repository(self):
        manager = TimelineSettingsManager()
        assert manager.is_loaded()
        assert manager.pixels_per_year == 2

    def test_set_persists_and_signals(self):
        repo = InMemoryPreferencesRepository()
        manager = TimelineSettingsManager(repo)
        changed = []
        manager.settings_changed.connect(changed.append)

        result = manager.set('max_scale', 8.0)

        assert result.valid
        assert manager.max_scale == 8.0
        assert changed == ['max_scale']
        assert repo.get('timeline.settings')['max_scale'] == 8.0

    def test_invalid_value_rejected(self):
        manager = TimelineSettingsManager(InMemoryPreferencesRepository())
        failures = []
        manager.validation_failed.connect(failures.append)

        result = manager.set('zoom_factor', 0.5)

        assert result.valid is False
        assert manager.zoom_factor == 1.2
        assert len(failures) == 1

    def test_relation_violation_rejected(self):
        manager = TimelineSettingsManager()
        result = manager.set('min_scale', 20.0)
        assert result.valid is False
        assert manager.min_scale == 0.1

    def test_unknown_setting(self):
        result = TimelineSettingsManager().set('nope', 1)
        assert result.valid is False
        assert "Unknown setting" in result.errors[0]

    def test_unchanged_value_not_saved(self):
        manager = TimelineSettingsManager(InMemoryPreferencesRepository())
        changed = []
        manager.settings_changed.connect(changed.append)
        manager.set('pixels_per_year', 2)
        assert changed == []

    def test_loads_stored_settings(self):
        repo = InMemoryPreferencesRepository({'timeline.settings': {'pixels_per_year': 4}})
        manager = TimelineSettingsManager(repo)
        assert manager.pixels_per_year == 4

    def test_invalid_stored_settings_fall_back_to_defaults(self):
        repo = InMemoryPreferencesRepository({'timeline.settings': {'min_scale': 50.0}})
        manager = TimelineSettingsManager(repo)
        assert manager.min_scale == 0.1

    def test_reset_to_defaults(self):
        repo = InMemoryPreferencesRepository()
        manager = TimelineSettingsManager(repo)
        manager.set('pixels_per_year', 5)

        manager.reset_to_defaults()

        assert manager.pixels_per_year == 2
        assert repo.get('timeline.settings')['pixels_per_year'] == 2

    def test_get_all(self):
        assert TimelineSettingsManager().get_all() == TimelineSettings().to_dict()


class TestPreferenceRepositories:
    """Tests for the preference stores."""

    def test_repositories_satisfy_protocol(self, tmp_path):
        assert isinstance(InMemoryPreferencesRepository(), PreferencesRepository)
        assert isinstance(JsonPreferencesRepository(tmp_path / "prefs.json"), PreferencesRepository)

    def test_json_repository_persists(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        manager = TimelineSettingsManager(JsonPreferencesRepository(path))
        manager.set('max_scale', 6.0)

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored['timeline.settings']['max_scale'] == 6.0

        reloaded = TimelineSettingsManager(JsonPreferencesRepository(path))
        assert reloaded.max_scale == 6.0

    def test_unreadable_json_starts_empty(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonPreferencesRepository(path).get('timeline.settings') is None
