"""
Unit tests for configuration loading and validation.

Tests defaults, strict key validation and error handling.
"""

import os
import tempfile

import pytest
import yaml

from hindi_translator.config.loader import (
    DEFAULT_DAILY_LIMIT,
    HistoryConfig,
    NetworkConfig,
    QuotaConfig,
    StorageConfig,
    TranslatorConfig,
    load_translator_config,
)


class TestConfigLoading:
    """Test configuration loading and validation."""
    
    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
    
    def teardown_method(self):
        """Clean up test environment."""
        import shutil
        shutil.rmtree(self.temp_dir, ignore_errors=True)
    
    def _write_config(self, config_data, filename: str = "config.yaml") -> str:
        """Write configuration data to temporary file."""
        config_path = os.path.join(self.temp_dir, filename)
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_data, f)
        return config_path
    
    def test_valid_config_loads_correctly(self):
        """Test that a valid configuration loads correctly."""
        config_data = {
            "quota": {"daily_limit": 100},
            "history": {"max_items": 20},
            "network": {"timeout_seconds": 5},
            "storage": {"db_path": "/tmp/translator.db"},
        }
        
        config = load_translator_config(self._write_config(config_data))
        
        assert config.quota.daily_limit == 100
        assert config.history.max_items == 20
        assert config.network.timeout_seconds == 5.0
        assert isinstance(config.network.timeout_seconds, float)
        assert config.storage.db_path == "/tmp/translator.db"
    
    def test_no_path_returns_defaults(self):
        """Test defaults without a config file."""
        config = load_translator_config()
        assert config == TranslatorConfig()
        assert config.quota.daily_limit == DEFAULT_DAILY_LIMIT == 900
        assert config.history.max_items == 50
    
    def test_partial_config_uses_defaults(self):
        """Test omitted sections fall back to defaults."""
        config = load_translator_config(self._write_config({"quota": {"daily_limit": 10}}))
        assert config.quota.daily_limit == 10
        assert config.history == HistoryConfig()
        assert config.network == NetworkConfig()
    
    def test_empty_file_returns_defaults(self):
        """Test an empty file is accepted."""
        config_path = os.path.join(self.temp_dir, "empty.yaml")
        open(config_path, 'w').close()
        assert load_translator_config(config_path) == TranslatorConfig()
    
    def test_missing_file_raises_error(self):
        """Test that missing config file raises error."""
        with pytest.raises(FileNotFoundError, match="Translator config file not found"):
            load_translator_config("nonexistent.yaml")
    
    def test_invalid_yaml_raises_error(self):
        """Test that invalid YAML raises error."""
        config_path = os.path.join(self.temp_dir, "invalid.yaml")
        with open(config_path, 'w') as f:
            f.write("invalid: yaml: content: [")
        
        with pytest.raises(yaml.YAMLError):
            load_translator_config(config_path)
    
    def test_non_mapping_raises_error(self):
        """Test a top-level list is rejected."""
        with pytest.raises(ValueError, match="must be a dictionary"):
            load_translator_config(self._write_config(["quota"]))
    
    def test_unknown_top_level_key(self):
        """Test unknown sections are rejected."""
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            load_translator_config(self._write_config({"theme": {"mode": "dark"}}))
    
    def test_unknown_section_key(self):
        """Test unknown keys inside a section are rejected."""
        with pytest.raises(ValueError, match="Unknown keys in quota"):
            load_translator_config(self._write_config({"quota": {"monthly_limit": 5}}))
    
    def test_section_must_be_mapping(self):
        """Test a scalar section is rejected."""
        with pytest.raises(ValueError, match="'history' must be a dictionary"):
            load_translator_config(self._write_config({"history": 50}))
    
    @pytest.mark.parametrize("section,key,value", [
        ("quota", "daily_limit", "many"),
        ("quota", "daily_limit", True),
        ("quota", "daily_limit", 1.5),
        ("network", "timeout_seconds", "slow"),
        ("storage", "db_path", 42),
    ])
    def test_invalid_types(self, section, key, value):
        """Test wrongly typed values are rejected."""
        with pytest.raises(ValueError, match="invalid type"):
            load_translator_config(self._write_config({section: {key: value}}))
    
    @pytest.mark.parametrize("section,key,value,message", [
        ("quota", "daily_limit", 0, "daily_limit must be > 0"),
        ("history", "max_items", -1, "max_items must be > 0"),
        ("network", "timeout_seconds", 0, "timeout_seconds must be > 0"),
        ("storage", "db_path", "  ", "db_path cannot be empty"),
    ])
    def test_invalid_values(self, section, key, value, message):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValueError, match=message):
            load_translator_config(self._write_config({section: {key: value}}))


class TestConfigDataclasses:
    """Test direct construction of config objects."""
    
    def test_defaults(self):
        """Test default values."""
        assert QuotaConfig().daily_limit == 900
        assert StorageConfig().db_path == "hindi_translator.db"
        assert NetworkConfig().timeout_seconds == 10.0
    
    def test_frozen(self):
        """Test configs are immutable."""
        config = QuotaConfig()
        with pytest.raises(AttributeError):
            config.daily_limit = 1
