# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for BuilderConfig and the context default."""

from dataclasses import FrozenInstanceError

import pytest

from genro_htmlbuilder import (
    Buffer,
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    reset_builder_config()


class TestBuilderConfig:
    """Tests for the BuilderConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = BuilderConfig()
        assert config.pretty is False
        assert config.indent == ' '
        assert config.doctype == 'html'
        assert config.validate_names is True

    def test_frozen(self):
        """Test configs cannot be modified."""
        config = BuilderConfig()
        with pytest.raises(FrozenInstanceError):
            config.pretty = True

    def test_from_dict(self):
        """Test from_dict() keeps known keys and drops the rest."""
        config = BuilderConfig.from_dict({'pretty': True, 'indent': '  ', 'theme': 'dark'})
        assert config == BuilderConfig(pretty=True, indent='  ')

    def test_from_empty_dict(self):
        """Test from_dict() with nothing gives the defaults."""
        assert BuilderConfig.from_dict({}) == BuilderConfig()


class TestConfigContext:
    """Tests for the context default used by Buffer()."""

    def test_buffer_uses_default(self):
        """Test Buffer() takes the module default."""
        assert Buffer().config == BuilderConfig()

    def test_explicit_config_wins(self):
        """Test an explicit config overrides the context default."""
        set_builder_config(BuilderConfig(pretty=True))
        buf = Buffer(BuilderConfig(doctype='HTML'))
        assert buf.config.pretty is False

    def test_set_and_reset(self):
        """Test set_builder_config() and reset_builder_config()."""
        config = BuilderConfig(pretty=True)
        set_builder_config(config)
        assert get_builder_config() is config
        assert Buffer().config is config
        reset_builder_config()
        assert get_builder_config() == BuilderConfig()

    def test_context_manager(self):
        """Test builder_config_context() applies inside the block only."""
        config = BuilderConfig(pretty=True)
        with builder_config_context(config) as active:
            assert active is config
            buf = Buffer()
            buf.open_root('p')
            assert buf.finish() == '<p>\n</p>\n'
        assert get_builder_config() == BuilderConfig()

    def test_context_manager_restores_on_error(self):
        """Test the previous default is restored when the block raises."""
        outer = BuilderConfig(indent='\t')
        set_builder_config(outer)
        with pytest.raises(RuntimeError):
            with builder_config_context(BuilderConfig(pretty=True)):
                raise RuntimeError('boom')
        assert get_builder_config() is outer
