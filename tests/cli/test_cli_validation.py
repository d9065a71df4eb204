"""
Test suite for CLI validation functions.

Tests path validation and the .astra input file checks.
"""

import pytest
from pathlib import Path

from astra.cli.validation import validate_path, validate_source_file
from astra.cli.errors import CLIValidationError


class TestValidatePath:
    """Test validate_path() function."""

    def test_valid_string_path(self):
        """Test converting string to Path."""
        result = validate_path("/tmp/test.astra")
        assert isinstance(result, Path)
        assert str(result) == "/tmp/test.astra"

    def test_valid_path_object(self):
        """Test passing Path object directly."""
        input_path = Path("/tmp/test.astra")
        assert validate_path(input_path) == input_path

    def test_none_without_allow_none(self):
        """Test that None raises error by default."""
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(None)
        assert "cannot be None" in str(exc_info.value)

    def test_none_with_allow_none(self):
        assert validate_path(None, allow_none=True) is None

    def test_must_exist_with_existing_file(self, tmp_path):
        """Test must_exist=True with a file that exists."""
        test_file = tmp_path / "existing.astra"
        test_file.write_text("x = 1")

        result = validate_path(str(test_file), must_exist=True)
        assert result == test_file

    def test_must_exist_with_nonexistent_file(self, tmp_path):
        """Test must_exist=True with a file that doesn't exist."""
        nonexistent = tmp_path / "missing.astra"

        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(nonexistent, must_exist=True)

        assert "does not exist" in str(exc_info.value)
        assert str(nonexistent) in str(exc_info.value)

    def test_invalid_type(self):
        """Test non-path values are rejected."""
        with pytest.raises(CLIValidationError) as exc_info:
            validate_path(42)
        assert "Expected path-like value, got int" in str(exc_info.value)


class TestValidateSourceFile:
    """Test validate_source_file() function."""

    def test_astra_file_is_accepted(self):
        assert validate_source_file("hello.astra") == Path("hello.astra")

    def test_existence_is_not_checked(self, tmp_path):
        """Missing files are reported when they are read."""
        missing = tmp_path / "missing.astra"
        assert validate_source_file(missing) == missing

    @pytest.mark.parametrize("name", ["hello.cpp", "hello", "hello.astra.txt", "hello.ASTRA"])
    def test_wrong_extension(self, name):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_source_file(name)
        assert str(exc_info.value) == f"File must have .astra extension: {name}"
        assert exc_info.value.code == "CLI_VALIDATION_ERROR"

    def test_no_file(self):
        with pytest.raises(CLIValidationError) as exc_info:
            validate_source_file(None)
        assert "No input file given" in str(exc_info.value)
        assert "Usage: astra" in exc_info.value.hint
