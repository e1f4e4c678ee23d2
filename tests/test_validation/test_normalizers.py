"""
Tests for normalization and denormalization of parameter values.

Tests cover:
- Codec-ready normalization of scalars, arrays and tuples
- Structural errors raised as NormalizationError
- Display rendering of decoded values
- Denormalized text validating back to the same value
- Positional argument preparation
"""

import json

import pytest

from dao_action_builder.errors import EncodingError, NormalizationError
from dao_action_builder.validation import (
    denormalize_parameter_value,
    normalize_parameter_value,
    prepare_parameters_for_encoding,
    validate_parameter_type,
)

from ..conftest import VALID_MIXED_CASE, VALID_RECIPIENT

ORDER_COMPONENTS = [
    {"name": "maker", "type": "address"},
    {"name": "amount", "type": "uint256"},
]


# =============================================================================
# Normalization - Scalars
# =============================================================================


class TestNormalizeScalars:
    """Tests for scalar normalization."""

    def test_address_lowercased(self) -> None:
        assert normalize_parameter_value(VALID_MIXED_CASE, "address") == VALID_MIXED_CASE.lower()

    @pytest.mark.parametrize(
        "value,abi_type,expected",
        [
            ("1000", "uint256", "1000"),
            ("0x10", "uint8", "16"),
            ("0b101", "uint8", "5"),
            ("-5", "int16", "-5"),
            ("+7", "int256", "7"),
            (str(2**256 - 1), "uint256", str(2**256 - 1)),
        ],
    )
    def test_integer_to_canonical_decimal(
        self, value: str, abi_type: str, expected: str
    ) -> None:
        assert normalize_parameter_value(value, abi_type) == expected

    def test_integer_from_python_int(self) -> None:
        assert normalize_parameter_value(42, "uint256") == "42"

    def test_unparseable_integer(self) -> None:
        with pytest.raises(NormalizationError) as exc_info:
            normalize_parameter_value("1.5", "uint256")

        assert isinstance(exc_info.value, EncodingError)

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), (" TRUE ", True), ("false", False), ("anything", False), (True, True)],
    )
    def test_bool(self, value: object, expected: bool) -> None:
        assert normalize_parameter_value(value, "bool") is expected

    @pytest.mark.parametrize(
        "value,abi_type",
        [("0xDEADbeef", "bytes"), ("0x" + "ab" * 32, "bytes32"), ("Hello", "string")],
    )
    def test_pass_through(self, value: str, abi_type: str) -> None:
        assert normalize_parameter_value(value, abi_type) == value


# =============================================================================
# Normalization - Composites
# =============================================================================


class TestNormalizeComposites:
    """Tests for array and tuple normalization."""

    def test_dynamic_array(self) -> None:
        assert normalize_parameter_value('["1", "0x02"]', "uint256[]") == ["1", "2"]

    def test_nested_array(self) -> None:
        """Test uint256[2][3] keeps three rows of two."""
        result = normalize_parameter_value("[[1,2],[3,4],[5,6]]", "uint256[2][3]")

        assert result == [["1", "2"], ["3", "4"], ["5", "6"]]

    @pytest.mark.parametrize("literal", ["[1e30]", "[1.5]"])
    def test_non_integer_json_numbers_are_not_rounded(self, literal: str) -> None:
        with pytest.raises(NormalizationError, match="Invalid integer for type uint256"):
            normalize_parameter_value(literal, "uint256[]")

    def test_large_json_integer_is_exact(self) -> None:
        assert normalize_parameter_value("[1000000000000000000000000000000]", "uint256[]") == [
            "1000000000000000000000000000000"
        ]

    def test_tuple_becomes_positional_list(self) -> None:
        value = f'{{"amount": "5", "maker": "{VALID_MIXED_CASE}"}}'

        result = normalize_parameter_value(value, "tuple", ORDER_COMPONENTS)

        assert result == [VALID_MIXED_CASE.lower(), "5"]

    def test_array_of_tuples(self) -> None:
        value = [{"maker": VALID_RECIPIENT, "amount": 1}, {"maker": VALID_RECIPIENT, "amount": 2}]

        result = normalize_parameter_value(value, "tuple[]", ORDER_COMPONENTS)

        assert result == [[VALID_RECIPIENT, "1"], [VALID_RECIPIENT, "2"]]

    def test_tuple_with_array_field(self) -> None:
        components = [
            {"name": "owners", "type": "address[]"},
            {"name": "threshold", "type": "uint8"},
        ]
        value = {"owners": [VALID_MIXED_CASE], "threshold": "2"}

        result = normalize_parameter_value(value, "tuple", components)

        assert result == [[VALID_MIXED_CASE.lower()], "2"]

    def test_missing_tuple_field(self) -> None:
        with pytest.raises(NormalizationError, match="Missing tuple field: amount"):
            normalize_parameter_value({"maker": VALID_RECIPIENT}, "tuple", ORDER_COMPONENTS)

    def test_tuple_without_components(self) -> None:
        with pytest.raises(NormalizationError):
            normalize_parameter_value("{}", "tuple")

    @pytest.mark.parametrize(
        "value,abi_type",
        [("[1,", "uint256[]"), ('{"a": 1}', "uint256[]"), ("{", "tuple"), ("[]", "tuple")],
    )
    def test_structural_errors(self, value: str, abi_type: str) -> None:
        with pytest.raises(NormalizationError):
            normalize_parameter_value(value, abi_type, ORDER_COMPONENTS)


# =============================================================================
# Denormalization
# =============================================================================


class TestDenormalize:
    """Tests for rendering decoded values as display text."""

    @pytest.mark.parametrize(
        "value,abi_type,expected",
        [
            (1000, "uint256", "1000"),
            (-5, "int8", "-5"),
            (2**256 - 1, "uint256", str(2**256 - 1)),
            (True, "bool", "true"),
            (False, "bool", "false"),
            (None, "string", ""),
            (b"\xde\xad", "bytes", "0xdead"),
            (b"", "bytes", "0x"),
            ("hello", "string", "hello"),
        ],
    )
    def test_scalars(self, value: object, abi_type: str, expected: str) -> None:
        assert denormalize_parameter_value(value, abi_type) == expected

    def test_address_lowercased(self) -> None:
        assert denormalize_parameter_value(VALID_MIXED_CASE, "address") == (
            VALID_MIXED_CASE.lower()
        )

    def test_array(self) -> None:
        assert denormalize_parameter_value((1, 2), "uint256[]") == '["1","2"]'

    def test_nested_array_elements_are_strings(self) -> None:
        """Test inner arrays are rendered as their own JSON text."""
        text = denormalize_parameter_value(((1, 2), (3, 4), (5, 6)), "uint256[2][3]")

        rows = json.loads(text)
        assert len(rows) == 3
        assert [json.loads(row) for row in rows] == [["1", "2"], ["3", "4"], ["5", "6"]]

    def test_tuple_keyed_by_component(self) -> None:
        text = denormalize_parameter_value(
            (VALID_MIXED_CASE, 5), "tuple", ORDER_COMPONENTS
        )

        assert json.loads(text) == {"maker": VALID_MIXED_CASE.lower(), "amount": "5"}

    def test_tuple_missing_positions_render_empty(self) -> None:
        text = denormalize_parameter_value((VALID_RECIPIENT,), "tuple", ORDER_COMPONENTS)

        assert json.loads(text) == {"maker": VALID_RECIPIENT, "amount": ""}


class TestDenormalizeValidates:
    """Tests that denormalized text validates back to the same value."""

    @pytest.mark.parametrize(
        "decoded,abi_type,components,expected",
        [
            (1000, "uint256", None, 1000),
            (-1, "int256", None, -1),
            (True, "bool", None, True),
            (b"\x01\x02", "bytes", None, "0x0102"),
            (VALID_MIXED_CASE, "address", None, VALID_MIXED_CASE.lower()),
            ((1, 2, 3), "uint8[]", None, [1, 2, 3]),
            (((1, 2), (3, 4), (5, 6)), "uint256[2][3]", None, [[1, 2], [3, 4], [5, 6]]),
            (
                (VALID_MIXED_CASE, 9),
                "tuple",
                ORDER_COMPONENTS,
                {"maker": VALID_MIXED_CASE.lower(), "amount": 9},
            ),
            (
                ((VALID_RECIPIENT, 1), (VALID_RECIPIENT, 2)),
                "tuple[]",
                ORDER_COMPONENTS,
                [{"maker": VALID_RECIPIENT, "amount": 1}, {"maker": VALID_RECIPIENT, "amount": 2}],
            ),
        ],
    )
    def test_round_trip(
        self, decoded: object, abi_type: str, components: object, expected: object
    ) -> None:
        text = denormalize_parameter_value(decoded, abi_type, components)

        result = validate_parameter_type(text, abi_type, components)

        assert result.is_valid, result.error
        assert result.normalized_value == expected


# =============================================================================
# Parameter Preparation
# =============================================================================


class TestPrepareParameters:
    """Tests for prepare_parameters_for_encoding."""

    def test_declaration_order(self) -> None:
        inputs = [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}]

        arguments = prepare_parameters_for_encoding(
            {"amount": "0x10", "to": VALID_MIXED_CASE}, inputs
        )

        assert arguments == [VALID_MIXED_CASE.lower(), "16"]

    @pytest.mark.parametrize("parameters", [{"to": VALID_RECIPIENT}, {"to": VALID_RECIPIENT, "amount": None}])
    def test_missing_parameter(self, parameters: dict) -> None:
        inputs = [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}]

        with pytest.raises(NormalizationError, match="Missing parameter: amount"):
            prepare_parameters_for_encoding(parameters, inputs)
