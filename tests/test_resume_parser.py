"""Tests for the AI resume parser (Gemini mocked)."""

import json
from unittest.mock import MagicMock, patch

import pytest

from jobboard.services.resume_parser import (
    PARSE_FAILED_MESSAGE, ParsedResume, ResumeParseError, ResumeParser
)

PAYLOAD = {
    "name": "Asha Kumar",
    "email": "asha@kumar.dev",
    "skills": ["React", "TypeScript"],
    "location": "Pune, MH",
    "bio": "Frontend engineer",
}


def _parser_returning(text):
    parser = ResumeParser(api_key="test-key", model_name="gemini-test")
    model = MagicMock()
    model.generate_content.return_value = MagicMock(text=text)
    parser._model = model
    return parser, model


def test_parse_json_response():
    parser, model = _parser_returning(json.dumps(PAYLOAD))

    result = parser.parse(b"%PDF-1.4 ...", "application/pdf")

    assert result == ParsedResume(**PAYLOAD)
    parts = model.generate_content.call_args[0][0]
    assert parts[0] == {"mime_type": "application/pdf", "data": b"%PDF-1.4 ..."}


def test_parse_fenced_json():
    parser, _ = _parser_returning("```json\n" + json.dumps(PAYLOAD) + "\n```")
    assert parser.parse(b"x").skills == ["React", "TypeScript"]


def test_default_mime_type():
    parser, model = _parser_returning(json.dumps(PAYLOAD))
    parser.parse(b"x", None)
    assert model.generate_content.call_args[0][0][0]["mime_type"] == "application/pdf"


def test_missing_fields_default_to_empty():
    parser, _ = _parser_returning(json.dumps({"name": "Only Name"}))
    result = parser.parse(b"x")
    assert result.skills == []
    assert result.bio == ""


def test_garbage_response():
    parser, _ = _parser_returning("I could not read that file")
    with pytest.raises(ResumeParseError, match=PARSE_FAILED_MESSAGE):
        parser.parse(b"x")


def test_model_error_is_wrapped():
    parser, model = _parser_returning("")
    model.generate_content.side_effect = RuntimeError("quota exceeded")
    with pytest.raises(ResumeParseError) as exc:
        parser.parse(b"x")
    assert isinstance(exc.value.__cause__, RuntimeError)


def test_empty_file():
    parser, model = _parser_returning(json.dumps(PAYLOAD))
    with pytest.raises(ResumeParseError):
        parser.parse(b"")
    model.generate_content.assert_not_called()


def test_missing_api_key():
    with pytest.raises(ResumeParseError, match="GEMINI_API_KEY"):
        ResumeParser(api_key="").parse(b"x")


def test_model_configured_lazily():
    with patch("jobboard.services.resume_parser.genai") as genai:
        parser = ResumeParser(api_key="k", model_name="gemini-test")
        genai.configure.assert_not_called()

        parser.model
        genai.configure.assert_called_once_with(api_key="k")
        assert genai.GenerativeModel.call_args.kwargs["model_name"] == "gemini-test"
