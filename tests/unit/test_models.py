"""Tests for failure records, reports and document nodes."""

from __future__ import annotations

from yamltags.models.errors import (
    DocumentValidationError,
    FailureCode,
    OpaqueFailure,
    PositionedFailure,
    ValidationReport,
)
from yamltags.models.fields import FieldDescriptor
from yamltags.models.node import Node, NodeKind


class TestFailures:
    def test_positioned_str(self) -> None:
        failure = PositionedFailure(message="field 'age' must be greater than 18", line=2, column=6)
        assert str(failure) == "line 2, column 6: field 'age' must be greater than 18"
        assert failure.code == FailureCode.CONSTRAINT_VIOLATION

    def test_opaque_str(self) -> None:
        failure = OpaqueFailure(code=FailureCode.UNKNOWN_RULE, message="no validator")
        assert str(failure) == "no validator"

    def test_report_parses_tagged_union(self) -> None:
        report = ValidationReport.model_validate(
            {
                "failures": [
                    {"kind": "positioned", "message": "m", "line": 1, "column": 2},
                    {"kind": "opaque", "code": "PARAMETER_PARSE_FAILURE", "message": "p"},
                ]
            }
        )
        assert isinstance(report.failures[0], PositionedFailure)
        assert isinstance(report.failures[1], OpaqueFailure)
        assert report.valid is False


class TestValidationReport:
    def test_empty_report_is_valid(self) -> None:
        assert ValidationReport().valid is True
        assert ValidationReport().render() == ""

    def test_render(self) -> None:
        report = ValidationReport(
            failures=[
                PositionedFailure(message="required field 'name' is missing", line=1, column=1),
                OpaqueFailure(code=FailureCode.PARAMETER_PARSE_FAILURE, message="bad gt"),
            ]
        )
        assert report.render() == "  line 1, column 1: required field 'name' is missing\n  bad gt"

    def test_document_validation_error(self) -> None:
        report = ValidationReport(failures=[PositionedFailure(message="boom", line=3, column=4)])
        exc = DocumentValidationError(report, filename="person.yaml")
        assert str(exc) == "person.yaml: validation errors:\n  line 3, column 4: boom"
        assert exc.failures == report.failures


class TestNode:
    def test_pairs(self) -> None:
        node = Node.mapping(Node.scalar("a"), Node.scalar("1"), Node.scalar("b"), Node.scalar("2"))
        assert [(k.value, v.value) for k, v in node.pairs()] == [("a", "1"), ("b", "2")]

    def test_dangling_key_dropped(self) -> None:
        node = Node.mapping(Node.scalar("a"), Node.scalar("1"), Node.scalar("b"))
        assert [k.value for k, _ in node.pairs()] == ["a"]

    def test_pairs_of_non_mapping(self) -> None:
        assert list(Node.sequence(Node.scalar("a"), Node.scalar("b")).pairs()) == []

    def test_kind_values(self) -> None:
        assert NodeKind.MAPPING == "mapping"
        assert NodeKind.SCALAR == "scalar"


class TestFieldDescriptor:
    def test_key_defaults_to_name(self) -> None:
        assert FieldDescriptor(name="age", annotation=int).key == "age"
        assert FieldDescriptor(name="age", annotation=int, yaml="years").key == "years"
