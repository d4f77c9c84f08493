# ============================================================================
# TABLE MODEL TESTS
# ============================================================================
# EPOCH: 1 - DYNAMIC SCHEMA
# STATUS: Tests - Table description model unit tests
# PURPOSE: Verify enums, construction invariants and create-time validation
# CREATED: 14 OCT 2026
# ============================================================================
"""
Table Model Tests

Unit tests for the data model:
- Enums: FieldType, UnknownType
- Models: FieldDescription, TableDescription
- Identifier grammar and validate_for_create

Run with:
    pytest tests/test_table_models.py -v
"""

import pytest
import pydantic

from core.errors import ValidationError
from core.models.table import (
    FieldDescription,
    FieldType,
    TableDescription,
    UnknownType,
    is_valid_identifier,
    validate_for_create,
)


# ============================================================================
# HELPERS
# ============================================================================

def _make_people(primary_key_field="id"):
    return TableDescription(
        name="people",
        primary_key_field=primary_key_field,
        fields=[
            FieldDescription(name="id", type=FieldType.INTEGER),
            FieldDescription(name="name", type=FieldType.TEXT),
            FieldDescription(name="created", type=FieldType.TIMESTAMP),
        ],
    )


# ============================================================================
# ENUM TESTS
# ============================================================================

class TestFieldType:
    def test_values(self):
        assert FieldType.INTEGER.value == "int"
        assert FieldType.DOUBLE.value == "double"
        assert FieldType.TEXT.value == "text"
        assert FieldType.TIMESTAMP.value == "timestamp"

    def test_closed_set(self):
        assert len(FieldType) == 4

    def test_unknown_is_not_a_field_type(self):
        assert not isinstance(UnknownType.UNKNOWN, FieldType)
        with pytest.raises(ValueError):
            FieldType("unknown")


# ============================================================================
# IDENTIFIER GRAMMAR
# ============================================================================

class TestIdentifierGrammar:
    @pytest.mark.parametrize("name", ["people", "_tmp", "Order_Lines", "t1", "a" * 63])
    def test_valid(self, name):
        assert is_valid_identifier(name)

    @pytest.mark.parametrize(
        "name",
        ["", None, "1abc", "trailing\n", "has space", 'quo"te', "semi;colon", "dash-name", "a" * 64, "ünïcode"],
    )
    def test_invalid(self, name):
        assert not is_valid_identifier(name)


# ============================================================================
# CONSTRUCTION
# ============================================================================

class TestTableDescription:
    def test_field_order_preserved(self):
        desc = _make_people()
        assert desc.field_names == ["id", "name", "created"]

    def test_primary_key_must_reference_field(self):
        with pytest.raises(ValidationError) as exc:
            _make_people(primary_key_field="missing")
        assert exc.value.message == "Primary key 'missing' does not match any field"
        assert exc.value.table_name == "people"
        assert not isinstance(exc.value, pydantic.ValidationError)
        assert isinstance(exc.value.__cause__, pydantic.ValidationError)

    def test_primary_key_is_case_sensitive(self):
        with pytest.raises(ValidationError):
            _make_people(primary_key_field="ID")

    def test_blank_primary_key_becomes_none(self):
        desc = _make_people(primary_key_field="")
        assert desc.primary_key_field is None

    def test_duplicate_field_names_rejected(self):
        with pytest.raises(ValidationError) as exc:
            TableDescription(
                name="dup",
                fields=[
                    FieldDescription(name="a", type=FieldType.TEXT),
                    FieldDescription(name="a", type=FieldType.INTEGER),
                ],
            )
        assert exc.value.errors == ["Duplicate field name 'a'"]
        assert exc.value.table_name == "dup"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            TableDescription(name="", fields=[])
        assert exc.value.message == "Table name must not be empty"

    def test_all_structural_problems_reported(self):
        with pytest.raises(ValidationError) as exc:
            TableDescription(
                name="t",
                primary_key_field="ghost",
                fields=[
                    FieldDescription(name="a", type=FieldType.TEXT),
                    FieldDescription(name="a", type=FieldType.TEXT),
                ],
            )
        assert len(exc.value.errors) == 2

    def test_malformed_nested_field(self):
        with pytest.raises(ValidationError) as exc:
            TableDescription(name="t", fields=[{"name": "a", "type": "json"}])
        assert exc.value.errors[0].startswith("fields.0.type")

    def test_empty_field_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            FieldDescription(name="", type=FieldType.TEXT)
        assert exc.value.message == "Field name must not be empty"

    def test_empty_fields_allowed_for_introspection(self):
        desc = TableDescription(name="no_columns", fields=[])
        assert desc.fields == []

    def test_unknown_type_accepted_from_catalog(self):
        field = FieldDescription(name="payload", type="unknown", native_type="json")
        assert field.type is UnknownType.UNKNOWN
        assert not field.is_supported

    def test_type_parsed_from_wire_tag(self):
        field = FieldDescription(name="score", type="double")
        assert field.type is FieldType.DOUBLE
        assert field.is_supported

    def test_get_field(self):
        desc = _make_people()
        assert desc.get_field("name").type is FieldType.TEXT
        assert desc.get_field("nope") is None


# ============================================================================
# CREATE-TIME VALIDATION
# ============================================================================

class TestValidateForCreate:
    def test_valid_description_passes(self):
        validate_for_create(_make_people())

    def test_zero_fields_rejected(self):
        desc = TableDescription(name="empty", fields=[])
        with pytest.raises(ValidationError) as exc:
            validate_for_create(desc)
        assert "at least one field" in exc.value.message

    def test_unknown_type_rejected(self):
        desc = TableDescription(
            name="blobs",
            fields=[FieldDescription(name="payload", type=UnknownType.UNKNOWN)],
        )
        with pytest.raises(ValidationError) as exc:
            validate_for_create(desc)
        assert "unsupported type 'unknown'" in exc.value.message

    def test_quote_in_table_name_rejected(self):
        desc = TableDescription(
            name='evil"; DROP TABLE users; --',
            fields=[FieldDescription(name="id", type=FieldType.INTEGER)],
        )
        with pytest.raises(ValidationError) as exc:
            validate_for_create(desc)
        assert "Invalid table name" in exc.value.message

    def test_bad_field_name_rejected(self):
        desc = TableDescription(
            name="ok",
            fields=[FieldDescription(name="bad name", type=FieldType.TEXT)],
        )
        with pytest.raises(ValidationError):
            validate_for_create(desc)

    def test_collects_all_errors(self):
        desc = TableDescription.model_construct(
            name="1bad",
            primary_key_field="ghost",
            fields=[],
        )
        with pytest.raises(ValidationError) as exc:
            validate_for_create(desc)
        assert len(exc.value.errors) == 3
        assert exc.value.table_name == "1bad"

    def test_structure_rechecked_for_unvalidated_models(self):
        desc = TableDescription.model_construct(
            name="people",
            primary_key_field="ghost",
            fields=[FieldDescription(name="id", type=FieldType.INTEGER)],
        )
        with pytest.raises(ValidationError) as exc:
            validate_for_create(desc)
        assert "'ghost'" in exc.value.message

    def test_validation_error_is_value_error(self):
        desc = TableDescription(name="empty", fields=[])
        with pytest.raises(ValueError):
            validate_for_create(desc)
