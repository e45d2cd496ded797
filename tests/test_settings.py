"""
Tests for settings module.
"""

import pytest
import json
from igc_flightlog.config.settings import Settings


class TestSettings:
    """Test cases for Settings class."""

    @pytest.fixture
    def settings_instance(self, reset_settings):
        """Provide the settings singleton, restored after the test."""
        return reset_settings

    @pytest.fixture
    def config_file(self, tmp_path):
        """Path of a settings file in a temporary directory."""
        return tmp_path / "settings.json"

    def test_singleton(self, settings_instance):
        """Test that Settings always returns the same instance."""
        assert Settings() is settings_instance

    def test_default_settings(self, settings_instance):
        """Test that default settings are loaded correctly."""
        assert settings_instance.get('climb_intervals') == [2, 15, 30]
        assert settings_instance.get('legacy_full_scan') is True
        assert settings_instance.get('duration_round_up_minutes') == 1
        assert settings_instance.get('kml_speed_factor') == pytest.approx(0.621371)
        assert settings_instance.get('max_workers') == 4
        assert settings_instance.get('log_level') == "INFO"

    def test_get_nonexistent_setting(self, settings_instance):
        """Test getting a non-existent setting returns None."""
        assert settings_instance.get('nonexistent_key') is None

    def test_get_nonexistent_setting_with_default(self, settings_instance):
        """Test getting a non-existent setting with default value."""
        assert settings_instance.get('nonexistent_key', 'default_value') == 'default_value'

    def test_set_overwrite_existing(self, settings_instance):
        """Test overwriting an existing setting."""
        settings_instance.set('max_workers', 8)
        assert settings_instance.get('max_workers') == 8

    def test_get_all_returns_a_copy(self, settings_instance):
        """Test that get_all cannot be used to change settings."""
        values = settings_instance.get_all()
        values['max_workers'] = 99

        assert settings_instance.get('max_workers') == 4

    def test_reset_to_defaults(self, settings_instance):
        """Test resetting changed values."""
        settings_instance.set('legacy_full_scan', False)
        settings_instance.set('custom_key', 'custom_value')

        settings_instance.reset_to_defaults()

        assert settings_instance.get('legacy_full_scan') is True
        assert settings_instance.get('custom_key') is None

    def test_save_and_load_settings(self, settings_instance, config_file):
        """Test saving and loading settings from file."""
        settings_instance.set('climb_intervals', [5, 10])
        settings_instance.set('custom_key', 'custom_value')

        assert settings_instance.save_settings(str(config_file))
        assert config_file.exists()

        settings_instance.reset_to_defaults()
        assert settings_instance.load_from_file(str(config_file))

        assert settings_instance.get('climb_intervals') == [5, 10]
        assert settings_instance.get('custom_key') == 'custom_value'
        assert settings_instance.config_file == str(config_file)

    def test_partial_file_keeps_other_defaults(self, settings_instance, config_file):
        """Test that a file overrides only the keys it contains."""
        config_file.write_text(json.dumps({'max_workers': 2}))

        assert settings_instance.load_from_file(str(config_file))

        assert settings_instance.get('max_workers') == 2
        assert settings_instance.get('climb_intervals') == [2, 15, 30]

    def test_save_creates_directory(self, settings_instance, tmp_path):
        """Test that save_settings creates config directory if needed."""
        target = tmp_path / "subdir" / "config" / "settings.json"

        assert settings_instance.save_settings(str(target))

        assert target.exists()

    def test_load_invalid_json(self, settings_instance, config_file):
        """Test loading settings from invalid JSON file."""
        config_file.write_text("invalid json {{{")

        assert not settings_instance.load_from_file(str(config_file))

        # Should still have default values
        assert settings_instance.get('max_workers') == 4

    def test_load_non_object_json(self, settings_instance, config_file):
        """Test that a JSON list is rejected."""
        config_file.write_text("[1, 2, 3]")

        assert not settings_instance.load_from_file(str(config_file))

    def test_load_nonexistent_file(self, settings_instance, tmp_path):
        """Test loading settings when file doesn't exist."""
        assert not settings_instance.load_from_file(str(tmp_path / "missing.json"))
        assert settings_instance.get('max_workers') == 4

    def test_json_file_format(self, settings_instance, config_file):
        """Test that saved JSON file is valid and readable."""
        settings_instance.set('test_key', 'test_value')
        settings_instance.save_settings(str(config_file))

        with open(config_file, 'r') as f:
            data = json.load(f)

        assert isinstance(data, dict)
        assert data['test_key'] == 'test_value'
        assert data['climb_intervals'] == [2, 15, 30]
