"""
Tests for YAML tooling config loading.
"""

from pathlib import Path

import pytest

from oddsieve.config import DEFAULT_CONFIG, load_config

ROOT = Path(__file__).parent.parent


class TestLoadConfig:

    def test_defaults_without_path(self):
        config = load_config()
        assert config == DEFAULT_CONFIG

    def test_defaults_are_copied(self):
        """Mutating a loaded config leaves DEFAULT_CONFIG alone."""
        config = load_config()
        config['verify_bounds'].append(7)
        assert 7 not in DEFAULT_CONFIG['verify_bounds']

    def test_shipped_default_file(self):
        config = load_config(ROOT / 'config' / 'default.yaml')
        assert set(config) == set(DEFAULT_CONFIG)
        assert 30 in config['verify_bounds']
        assert config['repeats'] >= 1

    def test_partial_override(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text("repeats: 5\nverify_bounds: [2, 3]\n")
        config = load_config(path)
        assert config['repeats'] == 5
        assert config['verify_bounds'] == [2, 3]
        assert config['chunk_size'] == DEFAULT_CONFIG['chunk_size']

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("K: 1000\n")
        with pytest.raises(ValueError, match="unknown config keys"):
            load_config(path)

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_bad_repeats_rejected(self, tmp_path):
        path = tmp_path / 'zero.yaml'
        path.write_text("repeats: 0\n")
        with pytest.raises(ValueError, match="repeats"):
            load_config(path)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
