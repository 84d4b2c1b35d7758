"""LangChain ChatAnthropic wrapper."""

from __future__ import annotations

import logging

from swivl.config import settings
from swivl.llm.model_router import get_model_for_task
from swivl.llm.prompts import get_prompt_template

logger = logging.getLogger(__name__)


async def get_completion(
    prompt: str,
    task: str = "text",
    image_base64: str | None = None,
    media_type: str = "image/jpeg",
) -> str:
    """Run one generation turn. Returns "" when no API key is configured."""
    if not settings.anthropic_api_key:
        logger.debug("No API key — skipping %s generation", task)
        return ""

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    model_id = get_model_for_task(task)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        max_tokens=2048,
    )

    if image_base64:
        content: str | list = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": media_type,
                    "data": image_base64,
                },
            },
            {"type": "text", "text": prompt},
        ]
    else:
        content = prompt

    messages = [
        SystemMessage(content=get_prompt_template(task)),
        HumanMessage(content=content),
    ]

    response = await llm.ainvoke(messages)
    if isinstance(response.content, list):
        return "".join(
            block.get("text", "") for block in response.content if isinstance(block, dict)
        )
    return str(response.content)
