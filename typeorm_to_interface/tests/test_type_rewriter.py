import logging

from typeorm_to_interface.pipeline.analyzer import RelationKind, SymbolTable, TypeRewriter
from typeorm_to_interface.pipeline.config import GeneratorConfig
from typeorm_to_interface.pipeline.source_ast.nodes import (
    CollectionType,
    DeferredType,
    NamedType,
    NullableType,
    OpaqueType,
    PropertyDecl,
)


def make_rewriter(**config_values):
    config = GeneratorConfig()
    for key, value in config_values.items():
        setattr(config, key, value)
    table = SymbolTable({"Profile": "IProfile", "Employee": "IEmployee", "Customer": "ICustomer"}, config.full_shape_suffix)
    return TypeRewriter(table, config)


def relation(type_text, declared_type, decorator="ManyToOne"):
    return PropertyDecl(name="target", declared_type=declared_type, type_text=type_text, annotations=frozenset({decorator}))


class TestTypeRewriter:
    """Test output type rewriting"""

    def test_plain_field_keeps_declared_text(self):
        prop = PropertyDecl(name="tags", declared_type=CollectionType(NamedType("Profile")), type_text="Profile[]")
        assert make_rewriter().rewrite(prop, RelationKind.NONE) == "Profile[]"

    def test_eager_single_resolves_to_full_shape(self):
        prop = relation("Profile", NamedType("Profile"))
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE) == "IProfileData"

    def test_eager_collection_keeps_collection(self):
        prop = relation("Employee[]", CollectionType(NamedType("Employee")), "OneToMany")
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_COLLECTION) == "IEmployeeData[]"

    def test_array_generic_is_written_as_array_syntax(self):
        prop = relation("Array<Employee>", CollectionType(NamedType("Employee")), "OneToMany")
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_COLLECTION) == "IEmployeeData[]"

    def test_lazy_single_keeps_wrapper(self):
        prop = relation("Promise<Customer>", DeferredType(NamedType("Customer")))
        assert make_rewriter().rewrite(prop, RelationKind.LAZY_SINGLE) == "Promise<ICustomerData>"

    def test_qualified_target_resolves_by_last_segment(self):
        prop = relation("models.Profile", NamedType("models.Profile"))
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE) == "IProfileData"

    def test_unresolved_single_uses_opaque_marker(self, caplog):
        prop = relation("Address", NamedType("Address"))
        with caplog.at_level(logging.WARNING):
            result = make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE, owner="User")
        assert result == "any"
        assert "User.target" in caplog.text
        assert "Address" in caplog.text

    def test_unresolved_collection_is_still_a_collection(self):
        prop = relation("Tag[]", CollectionType(NamedType("Tag")), "ManyToMany")
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_COLLECTION) == "any[]"

    def test_unresolved_lazy_is_still_wrapped(self):
        prop = relation("Promise<Tag>", DeferredType(NamedType("Tag")))
        assert make_rewriter().rewrite(prop, RelationKind.LAZY_SINGLE) == "Promise<any>"

    def test_lazy_collection_degrades_inside_wrapper(self):
        prop = relation("Promise<Employee[]>", DeferredType(CollectionType(NamedType("Employee"))), "OneToMany")
        assert make_rewriter().rewrite(prop, RelationKind.LAZY_SINGLE) == "Promise<any>"

    def test_opaque_relation_type_is_unresolved(self):
        prop = relation("Profile | Customer", OpaqueType("Profile | Customer"))
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE) == "any"

    def test_nullable_single_keeps_null(self):
        prop = relation("Profile | null", NullableType(NamedType("Profile"), " | null"))
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE) == "IProfileData | null"

    def test_nullable_collection_keeps_collection_and_undefined(self):
        declared = NullableType(CollectionType(NamedType("Employee")), " | undefined")
        prop = relation("Employee[] | undefined", declared, "OneToMany")
        assert make_rewriter().rewrite(prop, RelationKind.EAGER_COLLECTION) == "IEmployeeData[] | undefined"

    def test_nullable_lazy(self):
        prop = relation("Promise<Customer> | null", NullableType(DeferredType(NamedType("Customer")), " | null"))
        assert make_rewriter().rewrite(prop, RelationKind.LAZY_SINGLE) == "Promise<ICustomerData> | null"

    def test_nullable_inside_wrapper(self):
        prop = relation("Promise<Customer | null>", DeferredType(NullableType(NamedType("Customer"), " | null")))
        assert make_rewriter().rewrite(prop, RelationKind.LAZY_SINGLE) == "Promise<ICustomerData | null>"

    def test_unresolved_nullable_keeps_null(self, caplog):
        prop = relation("Address | null", NullableType(NamedType("Address"), " | null"))
        with caplog.at_level(logging.WARNING):
            result = make_rewriter().rewrite(prop, RelationKind.EAGER_SINGLE, owner="User")
        assert result == "any | null"
        assert "Address | null" in caplog.text

    def test_custom_opaque_marker_and_suffix(self):
        rewriter = make_rewriter(opaque_type="unknown", full_shape_suffix="Full")
        assert rewriter.rewrite(relation("Profile", NamedType("Profile")), RelationKind.EAGER_SINGLE) == "IProfileFull"
        assert rewriter.rewrite(relation("Address", NamedType("Address")), RelationKind.EAGER_SINGLE) == "unknown"
