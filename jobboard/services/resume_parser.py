"""
AI Resume Parser
Uses Google Gemini to pull profile fields out of an uploaded resume.
The store never sees this module; the profile view merges the result
into the draft form.
"""
import json
import logging
from typing import List, Optional, TypedDict

import google.generativeai as genai
from pydantic import BaseModel, Field, ValidationError

from jobboard.core.config import settings

logger = logging.getLogger(__name__)

PARSE_FAILED_MESSAGE = "Failed to parse resume. Please try again or fill manually."

PROMPT = (
    "Analyze this resume and extract the following information. "
    "Be accurate and professional. If information is missing, "
    "use reasonable defaults or empty strings."
)


class ResumeParseError(Exception):
    """Raised when a resume cannot be turned into profile fields"""


class ResumeSchema(TypedDict):
    name: str           # Full name of the candidate
    email: str          # Email address
    skills: List[str]   # Top 5 technical skills
    location: str       # City and State/Country
    bio: str            # Professional summary, max 150 characters


class ParsedResume(BaseModel):
    name: str = ""
    email: str = ""
    skills: List[str] = Field(default_factory=list)
    location: str = ""
    bio: str = ""


def _strip_code_fence(text: str) -> str:
    """Remove a ```json ... ``` wrapper if the model added one"""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        if lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)
    return text


class ResumeParser:
    """Sends the raw file inline to Gemini and asks for JSON back"""

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model_name = model_name or settings.GEMINI_MODEL
        self._model = None

    @property
    def model(self):
        if self._model is None:
            if not self.api_key:
                raise ResumeParseError("GEMINI_API_KEY is not configured")
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                model_name=self.model_name,
                generation_config={
                    "temperature": 0.2,
                    "response_mime_type": "application/json",
                    "response_schema": ResumeSchema,
                },
            )
        return self._model

    def parse(self, content: bytes, mime_type: Optional[str] = None) -> ParsedResume:
        """
        Extract name, email, skills, location and bio from a resume.

        Raises:
            ResumeParseError: On an empty file, a missing API key, a failed
                model call or a response that is not the expected JSON.
        """
        if not content:
            raise ResumeParseError("Resume file is empty")

        try:
            response = self.model.generate_content([
                {"mime_type": mime_type or "application/pdf", "data": content},
                PROMPT,
            ])
            raw_text = response.text
        except ResumeParseError:
            raise
        except Exception as e:
            logger.error("Resume parsing request failed: %s", e)
            raise ResumeParseError(PARSE_FAILED_MESSAGE) from e

        if not raw_text:
            raise ResumeParseError(PARSE_FAILED_MESSAGE)

        try:
            return ParsedResume.model_validate(json.loads(_strip_code_fence(raw_text)))
        except (ValueError, ValidationError) as e:
            logger.error("Resume parser returned unusable output: %s", e)
            raise ResumeParseError(PARSE_FAILED_MESSAGE) from e


# Singleton instance
resume_parser = ResumeParser()
