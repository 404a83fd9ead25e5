"""
Tests for the pydantic configuration schemas and domain models.
"""

import pytest
from pydantic import ValidationError

from models.config import BackgroundConfig, default_config
from models.enums import FontFamily
from models.schemas import ConfigSchema


class TestConfigSchema:

    def test_defaults(self):
        config = ConfigSchema().to_domain()
        assert config.speed == 50
        assert config.pause == 2000
        assert config.font.family == FontFamily.MONO

    def test_round_trip_default_config(self):
        config = default_config()
        assert ConfigSchema.from_domain(config).to_domain() == config

    def test_hex_color_normalized(self):
        schema = ConfigSchema.model_validate({"font": {"color": "ff0000"}})
        assert schema.font.color == "#ff0000"

    def test_example_validates(self):
        example = ConfigSchema.model_config["json_schema_extra"]["example"]
        config = ConfigSchema.model_validate(example).to_domain()
        assert config.gif.playback_speed == 1.5

    @pytest.mark.parametrize("colors", [1, 257])
    def test_colors_range(self, colors):
        with pytest.raises(ValidationError):
            ConfigSchema.model_validate({"gif": {"compression": {"colors": colors}}})


class TestDomainModels:

    def test_background_rejects_empty_canvas(self):
        with pytest.raises(ValueError):
            BackgroundConfig(width=0)
        with pytest.raises(ValueError):
            BackgroundConfig(height=-1)

    def test_default_config_socials(self):
        assert [s.handle for s in default_config().socials] == ["0xkniraj"] * 3
