"""Tests for config module."""

import pytest
from quadwarp.config import DEFAULT_CONFIG, load_config, merge_config
from quadwarp.errors import InvalidInputError


class TestConfig:
    """Test configuration module."""

    def test_default_config_exists(self):
        """Test that default config exists."""
        assert DEFAULT_CONFIG is not None
        assert isinstance(DEFAULT_CONFIG, dict)

    def test_solver_config(self):
        """Test solver configuration."""
        solver = DEFAULT_CONFIG['solver']
        assert solver['pivot_tolerance'] > 0
        assert solver['degeneracy_tolerance'] == 1e-10
        assert solver['verify'] is False

    def test_verifier_config(self):
        """Test verifier configuration."""
        assert DEFAULT_CONFIG['verifier']['tolerance'] == 1e-6

    def test_codec_config(self):
        """Test codec configuration."""
        codec = DEFAULT_CONFIG['codec']
        assert codec['precision'] == 10
        assert codec['transform_origin'] == "0 0"

    def test_editor_config(self):
        """Test editor configuration."""
        editor = DEFAULT_CONFIG['editor']
        assert editor['canvas_width'] > 0
        assert editor['canvas_height'] > 0

    def test_merge_does_not_touch_defaults(self):
        """Test merged configs are independent copies."""
        config = merge_config({'codec': {'precision': 3}})
        assert config['codec']['precision'] == 3
        assert config['codec']['transform_origin'] == "0 0"
        assert DEFAULT_CONFIG['codec']['precision'] == 10

        config['solver']['verify'] = True
        assert DEFAULT_CONFIG['solver']['verify'] is False

    def test_load_config_defaults(self):
        """Test loading without a file."""
        assert load_config() == DEFAULT_CONFIG

    def test_load_config_yaml(self, tmp_path):
        """Test values from a YAML file override defaults."""
        path = tmp_path / "quadwarp.yaml"
        path.write_text(
            "solver:\n"
            "  verify: true\n"
            "editor:\n"
            "  canvas_width: 1024\n"
            "extra:\n"
            "  note: kept\n"
        )
        config = load_config(path)
        assert config['solver']['verify'] is True
        assert config['solver']['pivot_tolerance'] == DEFAULT_CONFIG['solver']['pivot_tolerance']
        assert config['editor']['canvas_width'] == 1024
        assert config['editor']['canvas_height'] == 800
        assert config['extra'] == {'note': 'kept'}

    def test_load_config_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_load_config_rejects_non_mapping(self, tmp_path):
        """Test a YAML list is not a config."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(InvalidInputError):
            load_config(path)
