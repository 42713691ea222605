import pytest

from typeorm_to_interface.pipeline.analyzer import NameResolver
from typeorm_to_interface.pipeline.config import GeneratorConfig
from typeorm_to_interface.pipeline.errors import NameCollisionError
from typeorm_to_interface.pipeline.source_ast.nodes import ClassUnit


def build(names, **config_values):
    config = GeneratorConfig()
    for key, value in config_values.items():
        setattr(config, key, value)
    return NameResolver(config).build(ClassUnit(name=name) for name in names)


class TestNameResolver:
    """Test symbol table construction"""

    def test_prefix_is_applied_by_default(self):
        table = build(["User", "Profile"])
        assert dict(table) == {"User": "IUser", "Profile": "IProfile"}

    def test_no_prefix_keeps_class_names(self):
        table = build(["User", "Profile"], use_prefix=False)
        assert dict(table) == {"User": "User", "Profile": "Profile"}

    def test_custom_prefix(self):
        table = build(["User"], shape_prefix="T")
        assert table["User"] == "TUser"

    def test_full_shape_name(self):
        table = build(["User"])
        assert table.full_shape_name("User") == "IUserData"
        assert table.full_shape_name("Missing") is None

    def test_all_shape_names(self):
        table = build(["User", "Team"])
        assert table.all_shape_names() == {"IUser", "IUserData", "ITeam", "ITeamData"}

    def test_nameless_classes_are_skipped(self):
        table = build(["", "User", ""])
        assert list(table) == ["User"]

    def test_ignored_classes_are_skipped(self):
        table = build(["User", "Migration"], ignore_classes=["Migration"])
        assert "Migration" not in table
        assert "User" in table

    def test_mapping_is_injective(self):
        names = ["User", "Profile", "Order", "OrderLine", "Customer", "Team", "Employee"]
        table = build(names)
        assert len(table) == len(names)
        assert len(set(table.values())) == len(names)

    def test_insertion_order_is_kept(self):
        table = build(["Zebra", "Apple", "Mango"])
        assert list(table) == ["Zebra", "Apple", "Mango"]

    def test_table_is_read_only(self):
        table = build(["User"])
        with pytest.raises(TypeError):
            table["Profile"] = "IProfile"

    def test_duplicate_class_is_a_collision(self):
        with pytest.raises(NameCollisionError, match="User"):
            build(["User", "Profile", "User"])

    def test_full_shape_name_colliding_with_plain_shape(self):
        with pytest.raises(NameCollisionError, match="IUserData"):
            build(["User", "UserData"])

    def test_empty_suffix_without_prefix_collides(self):
        with pytest.raises(NameCollisionError):
            build(["User"], use_prefix=False, full_shape_suffix="")
