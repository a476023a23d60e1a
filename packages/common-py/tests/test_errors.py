"""Tests for the demiurgos error hierarchy."""

from pathlib import Path

import pytest
from demiurgos_common import (
    DemiurgosError,
    InstallError,
    LoadError,
    NotFoundError,
    RenderError,
    ResolveError,
    SourceError,
    ValidationError,
)


class TestErrors:
    """Test error classes"""

    @pytest.mark.parametrize(
        "error_class,code",
        [
            (ValidationError, "VALIDATION_ERROR"),
            (SourceError, "SOURCE_ERROR"),
            (LoadError, "LOAD_ERROR"),
            (InstallError, "INSTALL_ERROR"),
            (ResolveError, "RESOLVE_ERROR"),
            (RenderError, "RENDER_ERROR"),
            (NotFoundError, "NOT_FOUND"),
        ],
    )
    def test_default_codes(self, error_class, code):
        error = error_class("Something broke")
        assert isinstance(error, DemiurgosError)
        assert error.code == code
        assert error.message == "Something broke"
        assert str(error) == "Something broke"

    def test_custom_code(self):
        error = DemiurgosError("Boom", code="CUSTOM")
        assert error.code == "CUSTOM"

    def test_error_to_dict(self):
        """Test error serialization"""
        error = LoadError("Manifest not found")
        assert error.to_dict() == {
            "error": "LoadError",
            "code": "LOAD_ERROR",
            "message": "Manifest not found",
        }

    def test_resolve_error_carries_path_and_entity(self):
        error = ResolveError("File not found", path=Path("refs/user.json"), entity="user")
        data = error.to_dict()
        assert data["path"] == str(Path("refs/user.json"))
        assert data["entity"] == "user"
        assert data["code"] == "RESOLVE_ERROR"

    def test_resolve_error_without_path(self):
        data = ResolveError("Bad config").to_dict()
        assert data["path"] is None
        assert data["entity"] is None

    def test_errors_are_catchable_as_base(self):
        with pytest.raises(DemiurgosError):
            raise RenderError("Destination is not a directory")
