"""Tests for the unsupported-version error."""

from workflow_validator import ErrorKind, UnsupportedVersionError, ValidationError
from workflow_validator.models.error_factory import (
    DOCS_LINK,
    UNSUPPORTED_VERSION_ACTION,
    build_unsupported_version_error,
)


class TestBuildUnsupportedVersionError:
    """Test build_unsupported_version_error."""

    def test_error_shape(self):
        error = build_unsupported_version_error("3.7")

        assert isinstance(error, UnsupportedVersionError)
        assert isinstance(error, ValidationError)
        assert error.kind is ErrorKind.VALIDATION
        assert error.message == "Current version: 3.7 is invalid. please change version to 1.0"
        assert str(error) == error.message

    def test_single_detail(self):
        (detail,) = build_unsupported_version_error("3.7").details

        assert detail.message == "Current version: 3.7 is invalid. please change version to 1.0"
        assert detail.type == "Validation"
        assert detail.context == {"key": "version"}
        assert detail.level == "workflow"
        assert detail.docs_link == DOCS_LINK
        assert detail.action_items == UNSUPPORTED_VERSION_ACTION
        assert detail.lines == 0

    def test_wire_representation(self):
        (detail,) = build_unsupported_version_error("latest").details

        assert detail.to_dict() == {
            "message": "Current version: latest is invalid. please change version to 1.0",
            "type": "Validation",
            "context": {"key": "version"},
            "level": "workflow",
            "docsLink": DOCS_LINK,
            "actionItems": "Please change the version to valid one",
            "lines": 0,
        }
