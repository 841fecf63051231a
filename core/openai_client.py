# core/openai_client.py
import json
from typing import Any, Dict, Optional
import httpx
from config.settings import settings
from core.entities import PageJudgment
from model.analysis import RaviStatus
from util import functions
from util.types import RawJudgment
import logging
from util.timing import timed

logger = logging.getLogger(__name__)

FALLBACK_CONTEXT = "Reference found"


async def _post_json(
    url: str, headers: Dict[str, str], payload: Dict[str, Any], timeout: float = 60.0
) -> Dict[str, Any]:
    """
    Make a JSON POST to `url`. Raises for non-2xx. Returns parsed JSON dict or {} on parse failure.
    """
    async with httpx.AsyncClient(timeout=timeout) as client:
        r = await client.post(url, headers=headers, json=payload)
        r.raise_for_status()
        try:
            return r.json()
        except ValueError:
            logger.warning(
                "ai.judge.bad_body status=%d bytes=%d", r.status_code, len(r.content)
            )
            return {}


def build_prompt(book_name: str, page_number: int, page_text: str) -> str:
    return settings.REFINE_PROMPT.format(
        page_number=page_number, book_name=book_name, page_text=page_text
    )


def _message_text(data: Dict[str, Any]) -> str:
    try:
        choices = data.get("choices") or []
        if choices and isinstance(choices, list):
            message = choices[0].get("message") or {}
            return message.get("content") or ""
    except (AttributeError, TypeError):
        pass
    return ""


def parse_judgment(raw: str) -> Optional[PageJudgment]:
    """
    Parse the model's JSON reply. Returns None for an empty reply and raises
    ValueError when the reply is not a JSON object.
    """
    text = functions.strip_code_fences(raw)
    if not text:
        return None
    parsed: RawJudgment = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("judgment is not a JSON object")

    context = str(parsed.get("context") or "").strip() or FALLBACK_CONTEXT
    return PageJudgment(
        found=bool(parsed.get("found")),
        status=RaviStatus.parse(parsed.get("status")),
        context=functions.clip_chars(context),
    )


class OpenAIPageJudge:
    """
    PageJudge backed by an OpenAI-compatible chat completions endpoint.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str = settings.OPENAI_MODEL,
        api_url: str = settings.OPENAI_API_URL,
        timeout: float = settings.OPENAI_TIMEOUT_SECONDS,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._api_url = api_url
        self._timeout = timeout

    async def judge_page(
        self, *, book_name: str, page_number: int, page_text: str
    ) -> Optional[PageJudgment]:
        headers = {
            "authorization": f"Bearer {self._api_key}",
            "content-type": "application/json",
        }
        payload = {
            "model": self._model,
            "messages": [
                {
                    "role": "user",
                    "content": build_prompt(book_name, page_number, page_text),
                }
            ],
            "temperature": 0.3,
            "max_tokens": 500,
        }
        with timed(logger, "ai.judge", page=page_number, model=self._model):
            data = await _post_json(
                self._api_url, headers, payload, timeout=self._timeout
            )

        judgment = parse_judgment(_message_text(data))
        if judgment is None:
            logger.warning("ai.judge.empty page=%d", page_number)
        else:
            logger.info(
                "ai.judge.result page=%d found=%s status=%s",
                page_number,
                judgment.found,
                judgment.status.value,
            )
        return judgment
