"""Tests del parseo del sobre de respuesta."""

import json

import pytest
from pydantic import ValidationError

from adapters.envelope import error_for, parse_envelope, unwrap_envelope
from core.domain.models import ApiFailure, ApiResponse, EmptyResponse, FileList, UploadFileData
from core.exceptions import ApiError, ApiValidationError


def _envelope(code: str, data=None, messages=None) -> str:
    return json.dumps({"response": {"code": code, "data": data, "messages": messages or []}})


class TestParseEnvelope:
    def test_success_with_data(self):
        outcome = parse_envelope(
            _envelope("SUCCESS", {"stringCount": 1, "wordCount": 2, "overWritten": True}),
            UploadFileData,
        )

        assert isinstance(outcome, ApiResponse)
        assert outcome.code == "SUCCESS"
        assert outcome.data == UploadFileData(string_count=1, word_count=2, over_written=True)

    def test_success_without_data(self):
        outcome = parse_envelope(_envelope("SUCCESS"), EmptyResponse)
        assert isinstance(outcome, ApiResponse)
        assert outcome.data is None

    def test_unknown_data_keys_ignored(self):
        outcome = parse_envelope(_envelope("SUCCESS", {"fileCount": 0, "fileList": [], "extra": 1}), FileList)
        assert outcome.data.file_count == 0

    def test_failure_variant(self):
        outcome = parse_envelope(_envelope("AUTHENTICATION_ERROR", messages=["bad key"]), FileList)

        assert isinstance(outcome, ApiFailure)
        assert outcome.code == "AUTHENTICATION_ERROR"
        assert outcome.messages == ["bad key"]
        assert outcome.is_validation_error is False

    def test_not_json(self):
        with pytest.raises(json.JSONDecodeError):
            parse_envelope("<html>Bad gateway</html>", FileList)

    def test_missing_response_key(self):
        with pytest.raises(ValidationError):
            parse_envelope('{"code": "SUCCESS"}', FileList)


class TestErrorMapping:
    def test_validation(self):
        error = error_for(ApiFailure(code="VALIDATION_ERROR", messages=["fileUri parameter is required"]))
        assert isinstance(error, ApiValidationError)
        assert error.messages == ["fileUri parameter is required"]

    @pytest.mark.parametrize("code", ["GENERAL_ERROR", "RESOURCE_LOCKED", "UNKNOWN_STATUS"])
    def test_generic(self, code):
        error = error_for(ApiFailure(code=code, messages=["nope"]))
        assert type(error) is ApiError
        assert error.code == code

    def test_unwrap_raises(self):
        with pytest.raises(ApiValidationError) as exc_info:
            unwrap_envelope(_envelope("VALIDATION_ERROR", messages=["a", "b"]), EmptyResponse)
        assert exc_info.value.messages == ["a", "b"]

    def test_unwrap_success(self):
        response = unwrap_envelope(_envelope("SUCCESS", {"fileCount": 2, "fileList": []}), FileList)
        assert response.data.file_count == 2
