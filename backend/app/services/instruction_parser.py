"""
Recover a JSON array of instruction steps from raw model output.

Models often wrap the array in markdown fences or add prose around it, so the
text is first cut down to something shaped like an array and only then handed
to the JSON decoder. Anything that still fails to decode becomes an empty list.
"""

import json
import logging
from typing import List, Optional

from pydantic import StrictStr, TypeAdapter, ValidationError

log = logging.getLogger(__name__)

EMPTY_JSON_ARRAY = "[]"
CODE_FENCE = "```"

_steps_adapter = TypeAdapter(Optional[List[StrictStr]])
_decoder = json.JSONDecoder()


class InstructionParser:

    @staticmethod
    def strip_wrapping_code_fences(text: str) -> str:
        """Remove one pair of outer triple-backtick fences, if present."""
        if len(text) >= 2 * len(CODE_FENCE) and text.startswith(CODE_FENCE) and text.endswith(CODE_FENCE):
            return text[len(CODE_FENCE):-len(CODE_FENCE)].strip()
        return text

    @staticmethod
    def extract_bracketed_array(text: str) -> str:
        """Slice from the first ``[`` to the last ``]``; the whole text when there is no such pair."""
        start = text.find("[")
        end = text.rfind("]")
        if start >= 0 and end > start:
            return text[start:end + 1].strip()
        return text.strip()

    @staticmethod
    def looks_like_json_array(text: Optional[str]) -> bool:
        return text is not None and text.startswith("[") and text.endswith("]")

    @classmethod
    def sanitize(cls, raw: Optional[str]) -> str:
        """
        Reduce ``raw`` to an array-shaped candidate, or ``"[]"``.

        Only the shape is checked here; the interior is left to the decoder.
        """
        if raw is None:
            return EMPTY_JSON_ARRAY

        text = cls.strip_wrapping_code_fences(raw.strip())
        candidate = cls.extract_bracketed_array(text)

        if not cls.looks_like_json_array(candidate):
            return EMPTY_JSON_ARRAY
        return candidate

    @classmethod
    def parse_steps(cls, raw: Optional[str]) -> List[str]:
        """
        Decode the sanitized text into steps. Never raises; failures give ``[]``.

        Only the first JSON value is read, so trailing notes after the array are ignored.
        """
        cleaned = cls.sanitize(raw)
        try:
            value, _ = _decoder.raw_decode(cleaned)
            steps = _steps_adapter.validate_python(value)
        except json.JSONDecodeError as e:
            log.warning(f"Failed to parse instructions as JSON array. Returning empty array. Error: {e}")
            return []
        except ValidationError as e:
            log.warning(
                f"Failed to parse instructions as JSON array. Returning empty array. "
                f"Error: {e.errors(include_url=False)}"
            )
            return []
        return [] if steps is None else steps


sanitize_to_json_array = InstructionParser.sanitize
parse_steps = InstructionParser.parse_steps
