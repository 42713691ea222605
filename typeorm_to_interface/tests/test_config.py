from typeorm_to_interface.pipeline.config import (
    DEFAULT_RELATION_DECORATORS,
    GeneratorConfig,
    OutputConfig,
    OutputLayout,
)


class TestGeneratorConfig:
    """Test configuration loading"""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.use_prefix
        assert config.shape_prefix == "I"
        assert config.full_shape_suffix == "Data"
        assert config.opaque_type == "any"
        assert config.relation_decorators == DEFAULT_RELATION_DECORATORS
        assert config.output == OutputConfig()
        assert config.output.layout == OutputLayout.PER_CLASS_FILE

    def test_default_lists_are_not_shared(self):
        first = GeneratorConfig()
        first.relation_decorators.append("BelongsTo")
        assert GeneratorConfig().relation_decorators == DEFAULT_RELATION_DECORATORS

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "use_prefix": False,
                "ignore_classes": ["Migration"],
                "unknown_key": 42,
                "output": {"layout": "single", "aggregate_file_name": "models.ts"},
            }
        )
        assert not config.use_prefix
        assert config.ignore_classes == ["Migration"]
        assert not hasattr(config, "unknown_key")
        assert config.output.layout == OutputLayout.SINGLE_AGGREGATE
        assert config.output.aggregate_file_name == "models.ts"
        assert config.output.enums_file_name == "enums.ts"

    def test_to_dict_round_trip(self):
        config = GeneratorConfig()
        config.opaque_type = "unknown"
        config.output.layout = OutputLayout.SINGLE_AGGREGATE

        data = config.to_dict()
        assert data["output"]["layout"] == "single"
        assert GeneratorConfig.from_dict(data) == config
