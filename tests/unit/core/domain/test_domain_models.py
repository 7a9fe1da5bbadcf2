# tests/unit/core/domain/test_domain_models.py

"""Tests for domain records, models and the exception hierarchy"""

# Third party imports
from pydantic import ValidationError
from pytest import mark
from pytest import raises

# Local imports
from json_workbench.core.domain.enums import FilterOperator
from json_workbench.core.domain.filter_condition import FilterCondition
from json_workbench.core.domain.results import DiffSummary
from json_workbench.core.domain.results import ParseError
from json_workbench.core.domain.results import ParseResult
from json_workbench.core.domain.results import SchemaCheckResult
from json_workbench.core.domain.validation_issue import ValidationIssue
from json_workbench.core.exceptions import JsonSyntaxError
from json_workbench.core.exceptions import JsonWorkbenchError
from json_workbench.core.exceptions import QueryExpressionError
from json_workbench.core.exceptions import RepairFailure
from json_workbench.core.exceptions import SchemaCompileError


class TestResults:
    """Test result records"""

    def test_null_document_is_ok(self):
        """Test that validity depends on the error alone"""
        assert ParseResult(value=None).ok is True

    def test_parse_error_str(self):
        """Test the human-readable form of a parse error"""
        error = ParseError(message="Unexpected token", line=2, column=5, offset=9)
        assert str(error) == "Unexpected token (line 2, column 5)"
        assert ParseResult(error=error).ok is False

    def test_schema_check_validity(self):
        """Test that a check is valid only without a parse error or issues"""
        issue = ValidationIssue(message="Expected string, got number", keyword="type")
        assert SchemaCheckResult(value=1).valid is True
        assert SchemaCheckResult(value=1, issues=[issue]).valid is False

    def test_diff_summary_total(self):
        """Test the total count"""
        assert DiffSummary(added=1, removed=2, changed=3).total == 6


class TestModels:
    """Test pydantic domain models"""

    def test_validation_issue_defaults(self):
        """Test defaults for an issue"""
        issue = ValidationIssue(message="m", keyword="required")
        assert (issue.path, issue.params, issue.schema_path) == ("/", {}, "#")

    def test_validation_issue_frozen(self):
        """Test that issues are immutable"""
        issue = ValidationIssue(message="m", keyword="type")
        with raises(ValidationError):
            issue.path = "/a"

    def test_filter_condition_operator_by_value(self):
        """Test that operators may be given by name"""
        condition = FilterCondition.model_validate({"field": "a", "operator": "isNotEmpty"})
        assert condition.operator is FilterOperator.IS_NOT_EMPTY
        assert condition.is_complete is True

    def test_filter_condition_unknown_operator(self):
        """Test that unknown operators are rejected"""
        with raises(ValidationError):
            FilterCondition(field="a", operator="between", value=1)


class TestExceptions:
    """Test the exception hierarchy"""

    @mark.parametrize(
        "error",
        [
            JsonSyntaxError("Unexpected token", 3),
            RepairFailure("nothing to do"),
            SchemaCompileError("bad schema"),
            QueryExpressionError("$[", "unclosed bracket", 2),
        ],
    )
    def test_common_base(self, error):
        """Test that every error derives from the workbench base"""
        assert isinstance(error, JsonWorkbenchError)

    def test_query_error_message(self):
        """Test that the message echoes the expression and position"""
        error = QueryExpressionError("$[", "unclosed bracket", 2)
        assert str(error) == "Invalid path expression '$[' at position 2: unclosed bracket"
        assert error.reason == "unclosed bracket"

    def test_syntax_error_offset(self):
        """Test that syntax errors carry their offset"""
        error = JsonSyntaxError("Unexpected token", 3)
        assert (error.message, error.offset) == ("Unexpected token", 3)
