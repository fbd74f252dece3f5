"""Unit tests for bearer token extraction."""

import pytest
from fastapi import HTTPException

from papertrail.config import AuthSettings
from papertrail.domain.service import SessionService
from papertrail.interface.api.security import (
    NOT_AUTHORIZED,
    authenticate,
    extract_bearer_token,
)


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc.def.ghi", "abc.def.ghi"),
            ("bearer abc.def.ghi", "abc.def.ghi"),
            ("Basic dXNlcjpwYXNz", None),
            ("Bearer", None),
            ("Bearer   ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extraction(self, header, expected):
        assert extract_bearer_token(header) == expected


class TestAuthenticate:
    def test_invalid_token_is_401(self):
        service = SessionService(AuthSettings(jwt_secret="secret-for-security-tests"))

        with pytest.raises(HTTPException) as exc_info:
            authenticate("Bearer not-a-token", service)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == NOT_AUTHORIZED
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    def test_missing_header_is_401(self):
        service = SessionService(AuthSettings(jwt_secret="secret-for-security-tests"))

        with pytest.raises(HTTPException) as exc_info:
            authenticate(None, service)

        assert exc_info.value.status_code == 401
