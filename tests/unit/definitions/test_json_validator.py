"""Unit tests for the JSON compiler and JsonValidator."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pytest

from common_validation.core.context import ValidationContext
from common_validation.core.severity import CascadeMode, Severity
from common_validation.definitions.loader import load_definition
from common_validation.definitions.registry import ValidatorTypeRegistry
from common_validation.definitions.validator import JsonValidator
from common_validation.errors import (
    InvalidParameterError,
    InvalidSeverityError,
    MissingArgumentError,
    PropertyNotFoundError,
    TypeMismatchError,
    ValidatorTypeNotRegisteredError,
)
from common_validation.validators.fluent import AbstractValidator


@dataclass
class User:
    email: Optional[str] = "ann@example.com"
    name: Optional[str] = "Ann"
    age: int = 30


USER_DOCUMENT: dict[str, Any] = {
    "$schema": "https://example.com/validation.schema.json",
    "type": "User",
    "properties": {
        "Email": {
            "rules": [
                {"validator": "notEmpty", "message": "Email is required.", "errorCode": "EMAIL_REQUIRED"},
                {
                    "validator": "email",
                    "message": "Email format is invalid.",
                    "severity": "atOwnRisk",
                    "layers": {"entity": "notRecommended"},
                },
            ]
        },
        "name": {"rules": [{"validator": "maxLength", "params": {"max": 5}, "message": "Name is too long."}]},
        "age": {
            "rules": [
                {
                    "validator": "inclusiveBetween",
                    "params": {"from": 18, "to": 120},
                    "message": "Age is out of range.",
                }
            ]
        },
    },
}


def _document(**properties: Any) -> str:
    return json.dumps({"type": "User", "properties": properties})


def _validator(document: Any = None, **kwargs: Any) -> JsonValidator:
    text = json.dumps(USER_DOCUMENT) if document is None else document
    return JsonValidator(load_definition(text), User, **kwargs)


def _triples(result) -> list[tuple[str, str, Severity]]:
    return [(e.property_name, e.error_message, e.severity) for e in result.errors]


class TestCompilation:
    def test_properties_resolve_case_insensitively(self) -> None:
        validator = _validator()
        assert [rule.property_name for rule in validator.rules] == ["email", "name", "age"]

    def test_entries_carry_metadata(self) -> None:
        required, fmt = _validator().rules[0].entries
        assert required.message == "Email is required."
        assert required.error_code == "EMAIL_REQUIRED"
        assert required.severity == Severity.FORBIDDEN
        assert fmt.severity == Severity.AT_OWN_RISK
        assert fmt.layer_severities == {"entity": Severity.NOT_RECOMMENDED}

    def test_unknown_property_raises(self) -> None:
        document = _document(phone={"rules": [{"validator": "phone", "message": "Bad phone."}]})
        with pytest.raises(PropertyNotFoundError):
            _validator(document)

    def test_unknown_validator_type_raises(self) -> None:
        document = _document(email={"rules": [{"validator": "doesNotExist", "message": "x"}]})
        with pytest.raises(ValidatorTypeNotRegisteredError):
            _validator(document)

    def test_invalid_severity_raises(self) -> None:
        document = _document(email={"rules": [{"validator": "notEmpty", "message": "x", "severity": "critical"}]})
        with pytest.raises(InvalidSeverityError):
            _validator(document)

    def test_invalid_layer_severity_raises(self) -> None:
        document = _document(
            email={"rules": [{"validator": "notEmpty", "message": "x", "layers": {"entity": "sometimes"}}]}
        )
        with pytest.raises(InvalidSeverityError):
            _validator(document)

    def test_blank_layer_severity_raises(self) -> None:
        document = _document(email={"rules": [{"validator": "notEmpty", "message": "x", "layers": {"entity": ""}}]})
        with pytest.raises(InvalidSeverityError):
            _validator(document)

    def test_bad_params_raise(self) -> None:
        document = _document(name={"rules": [{"validator": "maxLength", "params": {"max": "ten"}, "message": "x"}]})
        with pytest.raises(InvalidParameterError):
            _validator(document)

    def test_unstored_constructor_argument_is_not_a_property(self) -> None:
        class Signup:
            def __init__(self, email, referrer=None):
                self.email = email

        document = json.dumps(
            {"type": "Signup", "properties": {"referrer": {"rules": [{"validator": "notNull", "message": "x"}]}}}
        )
        with pytest.raises(PropertyNotFoundError):
            JsonValidator(load_definition(document), Signup)

    def test_definition_required(self) -> None:
        with pytest.raises(MissingArgumentError):
            JsonValidator(None, User)


class TestValidate:
    def test_valid_user(self) -> None:
        assert _validator().validate(User()).is_valid

    def test_messages_are_used_verbatim(self) -> None:
        result = _validator().validate(User(email="", name="Annabelle", age=10))
        assert _triples(result) == [
            ("email", "Email is required.", Severity.FORBIDDEN),
            ("email", "Email format is invalid.", Severity.AT_OWN_RISK),
            ("name", "Name is too long.", Severity.FORBIDDEN),
            ("age", "Age is out of range.", Severity.FORBIDDEN),
        ]
        assert result.errors[0].error_code == "EMAIL_REQUIRED"

    def test_layer_override(self) -> None:
        result = _validator().validate(User(email="bad"), ValidationContext.for_layer("ENTITY"))
        assert _triples(result) == [("email", "Email format is invalid.", Severity.NOT_RECOMMENDED)]

    def test_type_layer(self, declare_layer) -> None:
        declare_layer(User, "entity")
        validator = _validator()
        assert validator.layer == "entity"
        assert validator.validate(User(email="bad")).errors[0].severity == Severity.NOT_RECOMMENDED

    def test_validator_cascade_stops_after_first_failing_property(self) -> None:
        result = _validator(cascade_mode=CascadeMode.STOP_ON_FIRST_FAILURE).validate(
            User(email="", name="Annabelle")
        )
        assert [e.property_name for e in result.errors] == ["email", "email"]

    def test_validate_property(self) -> None:
        result = _validator().validate_property(User(email="", age=10), "Age")
        assert _triples(result) == [("age", "Age is out of range.", Severity.FORBIDDEN)]

    def test_validate_object_type_check(self) -> None:
        with pytest.raises(TypeMismatchError):
            _validator().validate_object({"email": "ann@example.com"})

    def test_custom_registry(self) -> None:
        registry = ValidatorTypeRegistry()
        registry.register("startsWithA", lambda params: lambda v: isinstance(v, str) and v.startswith("A"))
        document = _document(name={"rules": [{"validator": "startsWithA", "message": "Must start with A."}]})
        validator = _validator(document, registry=registry)
        assert validator.registry is registry
        assert validator.validate(User(name="Ann")).is_valid
        assert validator.validate(User(name="Bob")).errors[0].error_message == "Must start with A."

    def test_mismatched_document_type_still_compiles(self) -> None:
        document = json.dumps({"type": "Customer", "properties": {}})
        assert _validator(document).validate(User()).is_valid


class TestFluentParity:
    class UserValidator(AbstractValidator[User]):
        def __init__(self):
            super().__init__()
            self.rule_for("email").not_empty().with_message("Email is required.").with_error_code(
                "EMAIL_REQUIRED"
            ).email_address().with_message("Email format is invalid.").with_severity(
                Severity.AT_OWN_RISK
            ).with_layer_severity("entity", Severity.NOT_RECOMMENDED)
            self.rule_for("name").max_length(5).with_message("Name is too long.")
            self.rule_for("age").inclusive_between(18, 120).with_message("Age is out of range.")

    @pytest.mark.parametrize(
        "user",
        [
            User(),
            User(email=""),
            User(email="bad", name="Annabelle"),
            User(email=None, name=None, age=200),
            User(age="abc"),
            User(age="20"),
            User(age="17.5"),
            User(age=True),
            User(age=object()),
        ],
    )
    @pytest.mark.parametrize("layer", [None, "entity", "api"])
    def test_same_failures(self, user: User, layer: Optional[str]) -> None:
        context = ValidationContext(layer=layer)
        fluent = self.UserValidator().validate(user, context)
        from_json = _validator().validate(user, context)
        assert [(e.property_name, e.error_message, e.error_code, e.severity) for e in fluent.errors] == [
            (e.property_name, e.error_message, e.error_code, e.severity) for e in from_json.errors
        ]


class TestFromFile:
    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "user.validation.json"
        path.write_text(json.dumps(USER_DOCUMENT), encoding="utf-8")
        validator = JsonValidator.from_file(path, User)
        assert validator.validate(User(email="")).has_forbidden
