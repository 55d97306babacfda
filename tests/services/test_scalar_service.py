"""Tests for ScalarService operations."""

from pathlib import Path

import pytest

from scalarctl.config.settings import ScalarSettings
from scalarctl.domain.refinements import StringRangeType
from scalarctl.domain.registry import register_scalar
from scalarctl.services.scalars import ScalarService


@pytest.fixture
def service(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ScalarService:
    monkeypatch.delenv("SCALARCTL_CONFIG", raising=False)
    return ScalarService(ScalarSettings.from_cli(start=tmp_path))


class TestValidate:
    def test_valid_int(self, service: ScalarService) -> None:
        result = service.validate("Int", "42")
        assert result.ok
        assert result.op == "validate"
        assert result.data == {
            "type": "Int",
            "expression": "Int",
            "key": "value",
            "valid": True,
            "value": 42,
        }

    def test_failure_carries_messages(self, service: ScalarService) -> None:
        result = service.validate("PositiveInt", "0", key="age")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"
        assert result.error.message == "Value (0) can not be lower than 1"
        assert result.error.detail["errors"] == ["Value (0) can not be lower than 1"]
        assert result.error.detail["key"] == "age"

    def test_type_mismatch(self, service: ScalarService) -> None:
        result = service.validate("Boolean", '"true"', key="flag")
        assert result.error is not None
        assert result.error.message == 'Expected "flag" to be a boolean.'

    def test_null_rejected(self, service: ScalarService) -> None:
        result = service.validate("Int", "null")
        assert result.error is not None
        assert result.error.message == 'Expected "value" to be a non-null Int.'

    def test_raw_string(self, service: ScalarService) -> None:
        result = service.validate("Date", "2024-01-01T00:00:00Z", as_string=True)
        assert result.ok
        assert result.data["value"] == "2024-01-01T00:00:00Z"

    def test_invalid_json(self, service: ScalarService) -> None:
        result = service.validate("String", "hello")
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert "--raw-string" in result.error.message

    def test_parse_json_disabled(self, tmp_path: Path) -> None:
        (tmp_path / "scalarctl.toml").write_text("[validation]\nparse_json = false\n")
        svc = ScalarService(ScalarSettings.from_cli(config_path=str(tmp_path / "scalarctl.toml")))
        result = svc.validate("String", "hello")
        assert result.ok
        assert result.data["value"] == "hello"

    def test_default_key_from_settings(self, tmp_path: Path) -> None:
        (tmp_path / "scalarctl.toml").write_text('[validation]\ndefault_key = "input"\n')
        svc = ScalarService(ScalarSettings.from_cli(config_path=str(tmp_path / "scalarctl.toml")))
        result = svc.validate("Int", "1.5")
        assert result.error is not None
        assert result.error.message == 'Expected "input" to be Int but is float.'

    def test_unknown_type(self, service: ScalarService) -> None:
        result = service.validate("Decimal", "1")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_TYPE"
        assert result.error.message == "No scalar registered under 'Decimal'"

    def test_invalid_expression(self, service: ScalarService) -> None:
        result = service.validate("IntRange(1)", "1")
        assert result.error is not None
        assert result.error.code == "INVALID_EXPRESSION"

    def test_factory_expression(self, service: ScalarService) -> None:
        assert service.validate("StringMin(3)", '"abc"').ok
        result = service.validate("StringMin(3)", '"ab"')
        assert result.error is not None
        assert result.error.message == "Value (2 chars) can not be lower than 3"

    def test_registered_custom_scalar(self, service: ScalarService) -> None:
        register_scalar("Username", StringRangeType(3, 20, name="Username"))
        result = service.validate("Username", '"jdoe"')
        assert result.ok
        assert result.data["type"] == "Username"


class TestSerialize:
    def test_canonical_form_without_warning(self, service: ScalarService) -> None:
        result = service.serialize("Float", "1.5")
        assert result.ok
        assert result.data["serialized"] == 1.5
        assert result.warnings == []

    def test_nan_is_not_reported_as_normalized(self, service: ScalarService) -> None:
        result = service.serialize("Float", "NaN")
        assert result.ok
        assert result.warnings == []

    def test_date_normalization_warns(self, service: ScalarService) -> None:
        result = service.serialize("Date", "2024-01-01T00:00:00+00:00", as_string=True)
        assert result.ok
        assert result.data["serialized"] == "2024-01-01T00:00:00Z"
        assert len(result.warnings) == 1

    def test_invalid_value(self, service: ScalarService) -> None:
        result = service.serialize("Date", "not-a-date", as_string=True)
        assert result.error is not None
        assert result.error.message == "value must be an ISO 8601-formatted date string."


class TestDeserialize:
    def test_int_truncates(self, service: ScalarService) -> None:
        result = service.deserialize("Int", "3.9")
        assert result.ok
        assert result.data["value"] == "3"
        assert result.data["python_type"] == "int"

    def test_date(self, service: ScalarService) -> None:
        result = service.deserialize("Date", "2024-01-01T00:00:00Z", as_string=True)
        assert result.ok
        assert result.data["python_type"] == "datetime"

    def test_malformed_date_is_conversion_failure(self, service: ScalarService) -> None:
        result = service.deserialize("Date", "not-a-date", as_string=True)
        assert result.error is not None
        assert result.error.code == "CONVERSION_FAILED"

    @pytest.mark.parametrize("raw", ["1e400", "-1e400", "NaN"])
    def test_non_finite_int_is_conversion_failure(
        self, service: ScalarService, raw: str
    ) -> None:
        result = service.deserialize("Int", raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONVERSION_FAILED"


class TestDescribeAndList:
    def test_describe_refined(self, service: ScalarService) -> None:
        result = service.describe("IntRange(1, 10)")
        assert result.ok
        assert result.data["name"] == "Int"
        assert result.data["kind"] == "refined"
        assert result.data["non_null"] is True
        assert result.data["bounds"] == {"min": 1, "max": 10}

    def test_describe_plain(self, service: ScalarService) -> None:
        result = service.describe("ID")
        assert result.data["name"] == "ID"
        assert result.data["kind"] == "scalar"
        assert result.data["bounds"] == {}

    def test_describe_unknown(self, service: ScalarService) -> None:
        assert service.describe("Nope").error is not None

    def test_list_types(self, service: ScalarService) -> None:
        result = service.list_types()
        assert result.ok
        ids = [item["id"] for item in result.data["items"]]
        assert "PositiveInt" in ids
        assert result.data["count"] == len(ids)
        assert "IntRange(min, max)" in result.data["factories"]
        assert "StringMin(min)" in result.data["factories"]

    def test_default_settings(self) -> None:
        assert ScalarService().validate("Int", "1").ok
