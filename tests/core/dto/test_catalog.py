"""Tests for property catalogs and their registry."""

import threading
from typing import Any, List, Optional

import pytest

from ddd_commons.core.dto import (
    Access,
    Dto,
    Property,
    PropertyCatalog,
    ReadMode,
    Visibility,
    WriteMode,
    get_catalog,
    get_catalog_registry,
)
from ddd_commons.core.exceptions import (
    PropertyHasNoAccessibleGetterError,
    PropertyHasNoAccessibleSetterError,
    PropertyNotConnectedToFieldError,
    UnknownPropertyError,
)


class AccountDto(Dto):
    email = Property(str)
    password = Property(str, access=Access.WRITE)
    created = Property(Optional[int], access=Access.READ)
    display = Property(access=Access.READ, field=None)
    balance = Property(field="__balance")

    @display.getter
    def get_display(self) -> str:
        return self._email

    @password.setter
    def _set_password(self, value: str) -> None:
        self._password = value

    @created.validator
    def _validate_created(self) -> None:
        self.assert_argument_min(self._created, 0, "Created must be positive.")


class AdminAccountDto(AccountDto):
    role = Property(str, default="admin")
    email = Property(str, alias="mail")


class TestPropertyCatalog:
    """Test cases for catalog construction."""

    def test_catalog_order_follows_declarations(self):
        """Test properties are listed in declaration order."""
        assert AccountDto.property_names() == ["email", "password", "created", "display", "balance"]

    def test_subclass_extends_and_redeclares(self):
        """Test subclasses inherit properties and may redeclare them in place."""
        catalog = AdminAccountDto.catalog()

        assert catalog.names() == ["email", "password", "created", "display", "balance", "role"]
        assert catalog.get("email").alias == "mail"

    def test_descriptor_modes(self):
        """Test read and write modes are derived from access and accessors."""
        catalog = get_catalog(AccountDto)

        email = catalog.get("email")
        assert email.read_mode is ReadMode.DIRECT
        assert email.write_mode is WriteMode.DIRECT

        password = catalog.get("password")
        assert password.read_mode is ReadMode.NONE
        assert password.write_mode is WriteMode.SETTER
        assert password.setter_public is False
        assert password.setter_type is str

        created = catalog.get("created")
        assert created.write_mode is WriteMode.NONE
        assert created.validator is AccountDto._validate_created

        display = catalog.get("display")
        assert display.is_virtual
        assert display.read_mode is ReadMode.GETTER
        assert display.getter_public is True

    def test_field_visibility(self):
        """Test backing field visibility follows naming conventions."""
        catalog = get_catalog(AccountDto)

        assert catalog.get("email").visibility is Visibility.PROTECTED
        assert catalog.get("balance").visibility is Visibility.PRIVATE
        assert catalog.get("display").visibility is Visibility.PUBLIC

    def test_fields_table(self):
        """Test every backing field appears once with its default."""
        catalog = get_catalog(AdminAccountDto)
        fields = {field.name: field for field in catalog.fields()}

        assert set(fields) == {"_email", "_password", "_created", "__balance", "_role"}
        assert fields["_role"].initial_value() == "admin"

    def test_contains_and_require(self):
        catalog = get_catalog(AccountDto)

        assert "email" in catalog
        assert "missing" not in catalog
        assert len(catalog) == 5

        with pytest.raises(UnknownPropertyError, match='Property "missing" does not exist.'):
            catalog.require("missing")

    def test_resolve_key_by_alias(self):
        catalog = get_catalog(AdminAccountDto)

        assert catalog.resolve_key("mail").name == "email"
        assert catalog.resolve_key("email").name == "email"
        assert catalog.resolve_key("unknown") is None

    def test_missing_getter_is_reported(self):
        """Test a getter name that does not resolve."""
        class BrokenGetterDto(Dto):
            value = Property(getter="get_value")

        with pytest.raises(
            PropertyHasNoAccessibleGetterError,
            match='Property "value" does not have accessible getter.',
        ):
            PropertyCatalog.build(BrokenGetterDto)

    def test_missing_setter_is_reported(self):
        """Test a setter name that does not resolve."""
        class BrokenSetterDto(Dto):
            value = Property(setter="set_value")

        with pytest.raises(PropertyHasNoAccessibleSetterError):
            PropertyCatalog.build(BrokenSetterDto)

    def test_virtual_property_without_read_route(self):
        """Test a readable virtual property needs a getter."""
        class NoReadRouteDto(Dto):
            value = Property(field=None)

            @value.setter
            def set_value(self, value: Any) -> None:
                pass

        with pytest.raises(PropertyNotConnectedToFieldError):
            PropertyCatalog.build(NoReadRouteDto)

    def test_unresolvable_validator(self):
        class BrokenValidatorDto(Dto):
            value = Property(validator="_validate_value")

        with pytest.raises(PropertyNotConnectedToFieldError):
            PropertyCatalog.build(BrokenValidatorDto)

    def test_string_accessor_names(self):
        """Test accessors may be named instead of decorated."""
        class NamedAccessorsDto(Dto):
            value = Property(int, getter="read_value", setter="write_value")

            def read_value(self) -> int:
                return self._value * 2

            def write_value(self, value: int) -> None:
                self._value = value

        dto = NamedAccessorsDto({"value": "4"})

        assert dto.value == 8
        assert dto.to_dict() == {"value": 4}

    def test_conflicting_defaults(self):
        with pytest.raises(ValueError):
            Property(int, default=1, default_factory=lambda: 2)

    @pytest.mark.parametrize("default", [[], {}, set()])
    def test_mutable_default_rejected(self, default):
        with pytest.raises(ValueError, match="use default_factory"):
            Property(default=default)

    def test_default_factory_values_are_not_shared(self):
        class TagsDto(Dto):
            tags = Property(List[str], default_factory=list)

        first = TagsDto()
        second = TagsDto()
        first.to_dict()["tags"].append("x")

        assert first.tags == ["x"]
        assert second.tags == []

    def test_unresolvable_setter_annotation_disables_coercion(self):
        """Test a setter annotated with a name unknown at runtime."""
        class LazyTypedDto(Dto):
            value = Property(int)

            @value.setter
            def _set_value(self, value: "UnknownAtRuntime") -> None:  # noqa: F821
                self._value = value

        catalog = PropertyCatalog.build(LazyTypedDto)

        assert catalog.get("value").setter_type is None
        assert LazyTypedDto({"value": "7"}).value == "7"

    def test_setter_annotation_wins_over_declared_type(self):
        """Test an unannotated setter receives values uncoerced."""
        class UntypedSetterDto(Dto):
            value = Property(int)

            @value.setter
            def _set_value(self, value) -> None:
                self._value = value

        assert UntypedSetterDto({"value": "7"}).value == "7"


class TestCatalogRegistry:
    """Test cases for the process-wide catalog cache."""

    def test_catalog_built_once(self):
        registry = get_catalog_registry()

        assert AccountDto not in registry
        first = get_catalog(AccountDto)

        assert AccountDto in registry
        assert get_catalog(AccountDto) is first

    def test_clear(self):
        registry = get_catalog_registry()
        first = get_catalog(AccountDto)

        registry.clear()

        assert get_catalog(AccountDto) is not first

    def test_failed_build_not_cached(self):
        class BrokenDto(Dto):
            value = Property(field=None)

        registry = get_catalog_registry()
        for _ in range(2):
            with pytest.raises(PropertyNotConnectedToFieldError):
                registry.get(BrokenDto)

        assert BrokenDto not in registry

    def test_concurrent_first_use(self):
        """Test concurrent first touches observe the same catalog."""
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(get_catalog(AdminAccountDto))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(catalog is results[0] for catalog in results)
