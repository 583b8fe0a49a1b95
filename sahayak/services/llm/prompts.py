"""
Prompt builders for the welfare scheme assistant.
"""

import json
import re
from typing import Any, Dict, List, Optional, Sequence

from sahayak.core.conversation import ConversationTurn
from sahayak.core.languages import LanguageCode, get_language_info

EXTRACTED_FIELDS = ("age", "income", "state", "occupation", "familySize")

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def build_system_prompt(
    language: LanguageCode,
    scheme_summaries: Optional[Sequence[str]] = None
) -> str:
    """System prompt for reply generation."""
    language_name = get_language_info(language).prompt_name

    prompt = f"""You are Sahayak, a friendly assistant that helps Indian citizens discover government welfare schemes.

CRITICAL INSTRUCTIONS:
1. Respond ONLY in {language_name}
2. Keep answers short and simple - many users listen to the reply as speech
3. Explain who is eligible, what the benefit is and which documents are needed
4. If eligibility depends on details the user has not shared (age, income, state, occupation, family size), ask for them
5. Never invent schemes, amounts or websites - only describe schemes you are sure about
6. Point users to the official application website or the nearest Common Service Center

RESPONSE STYLE:
- Warm, respectful and patient
- Avoid bureaucratic jargon
- Use numbered steps for application processes
"""

    if scheme_summaries:
        prompt += "\nAVAILABLE SCHEMES:\n" + "\n".join(f"- {s}" for s in scheme_summaries) + "\n"

    return prompt


def build_chat_messages(
    message: str,
    language: LanguageCode,
    history: Sequence[ConversationTurn],
    window: int,
    scheme_summaries: Optional[Sequence[str]] = None
) -> List[Dict[str, str]]:
    """Build LLM messages: system prompt, the last `window` turns, the user message."""
    language_name = get_language_info(language).prompt_name

    messages = [{"role": "system", "content": build_system_prompt(language, scheme_summaries)}]

    recent = list(history)[-window:] if window > 0 else []
    for turn in recent:
        messages.append(turn.to_llm_message())

    messages.append({
        "role": "user",
        "content": (
            f"{message}\n\n"
            f"IMPORTANT: You MUST respond ONLY in {language_name}. "
            "Do not use any other language in your response."
        )
    })

    return messages


def build_extraction_messages(message: str, language: LanguageCode) -> List[Dict[str, str]]:
    """Build LLM messages asking for the user's details as JSON."""
    return [
        {
            "role": "system",
            "content": (
                "Extract user information from the query in JSON format. "
                "Only include fields that are explicitly mentioned:\n"
                "- age (number)\n"
                "- income (monthly income in rupees, number)\n"
                "- state (Indian state name in English)\n"
                "- occupation (job/profession in English)\n"
                "- familySize (number of family members)\n\n"
                'Respond with only valid JSON. Example: {"age": 25, "state": "Maharashtra"}'
            )
        },
        {
            "role": "user",
            "content": f'Query: "{message}"\nLanguage: {get_language_info(language).name}'
        }
    ]


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        digits = re.sub(r"[^\d.]", "", value)
        try:
            return float(digits) if "." in digits else int(digits)
        except ValueError:
            return None
    return None


def parse_extracted_info(raw: str) -> Dict[str, Any]:
    """
    Parse the extraction reply.

    Tolerates code fences and prose around the JSON object. Unknown keys
    and empty values are dropped.

    Raises:
        ValueError: if no JSON object can be read
    """
    cleaned = _CODE_FENCE.sub("", raw or "").strip()
    match = _JSON_OBJECT.search(cleaned)
    if not match:
        raise ValueError("No JSON object in extraction output")

    data = json.loads(match.group(0))
    if not isinstance(data, dict):
        raise ValueError("Extraction output is not a JSON object")

    info: Dict[str, Any] = {}
    for key in EXTRACTED_FIELDS:
        value = data.get(key)
        if value in (None, "", []):
            continue
        if key in ("age", "income", "familySize"):
            value = _as_number(value)
            if value is None:
                continue
        else:
            value = str(value).strip()
        info[key] = value

    return info
