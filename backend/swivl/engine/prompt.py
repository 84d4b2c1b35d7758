"""Blend-aware prompt compiler — subject + weights → generation instructions."""

from __future__ import annotations

import math
from typing import Any

from swivl.engine.blend import BlendWeights

# Dominance threshold for the style line, and a looser one for the time scope.
_DOMINANT = 0.6
_TIME_SCOPE = 0.4
# Minimum weight for an axis to be named in a blended style.
_MENTION = 0.2

_WILD_STYLE = "Be experimental, surreal, and boundary-pushing. Break rules and explore the absurd."
_WILD_HOOK = "What makes this delightfully strange or rule-breaking"

_ACTIONABLE_STYLE = (
    "Be practical, immediate, and doable. Focus on quick wins and simple daily practices."
)
_ACTIONABLE_HOOK = "Why this small action creates momentum or immediate satisfaction"

_DEEP_STYLE = (
    "Be substantial, meaningful, and project-oriented. Think long-term creative endeavors."
)
_DEEP_HOOK = "What makes this worth the sustained effort and what you'll gain"

_BLENDED_HOOK = "What makes this interesting given the creative blend"

_TIME_ACTIONABLE = "Each idea should be startable today or completable in 5-30 minutes."
_TIME_DEEP = "Each idea should be a multi-week or multi-month journey."
_TIME_WILD = "Focus on imaginative leaps regardless of time commitment."
_TIME_MIXED = "Mix time commitments from quick wins to longer projects."

_OUTPUT_FORMAT = """Format each as:
1. TITLE: [2-4 intriguing words]
IDEA: [One clear sentence that explores "{subject}" through this creative lens]
HOOK: [{hook}]"""

_EXAMPLE = """Example for "learning piano" with 60% actionable, 30% deep, 10% wild:
1. TITLE: Daily Chord Victory
IDEA: Learn one new chord each morning and immediately play a simple song that uses it before breakfast
HOOK: Builds piano skills through tiny daily wins that create instant musical satisfaction"""

_BLENDED_TEMPLATE = """Generate {count} compelling creative ideas about: "{subject}"

STYLE BLEND: {style}
TIME SCOPE: {time_scope}
CREATIVE MIX: {wild}% Wild Inspiration + {actionable}% Daily Actionable + {deep}% Deep Projects

Always make the ideas directly about "{subject}" - be imaginative but clear and actionable for the given blend.

{output_format}

{example}"""

_EXPLORE_TEMPLATE = """Generate {count} new creative ideas inspired by this existing idea: "{title}" - {description}

Make them related but unique variations or extensions of this concept. Keep the spirit of the original and push it somewhere new.

{output_format}"""


def percent(weight: float) -> int:
    """Round-half-up percentage. Independent per axis; sums may miss 100."""
    return int(math.floor(weight * 100 + 0.5))


def style_guidance(weights: BlendWeights) -> tuple[str, str]:
    """Return (style line, hook guidance) for the dominant axis or the blend."""
    if weights.wild > _DOMINANT:
        return _WILD_STYLE, _WILD_HOOK
    if weights.actionable > _DOMINANT:
        return _ACTIONABLE_STYLE, _ACTIONABLE_HOOK
    if weights.deep > _DOMINANT:
        return _DEEP_STYLE, _DEEP_HOOK

    styles = []
    if weights.wild > _MENTION:
        styles.append(f"{percent(weights.wild)}% experimental/surreal")
    if weights.actionable > _MENTION:
        styles.append(f"{percent(weights.actionable)}% practical/immediate")
    if weights.deep > _MENTION:
        styles.append(f"{percent(weights.deep)}% substantial/long-term")
    return f"Blend these creative approaches: {', '.join(styles)}.", _BLENDED_HOOK


def time_scope(weights: BlendWeights) -> str:
    if weights.actionable > _TIME_SCOPE:
        return _TIME_ACTIONABLE
    if weights.deep > _TIME_SCOPE:
        return _TIME_DEEP
    if weights.wild > _TIME_SCOPE:
        return _TIME_WILD
    return _TIME_MIXED


def compile_prompt(subject: str, weights: BlendWeights, count: int = 5) -> str:
    """Build the generation prompt for `subject` under the given blend.

    The subject is embedded verbatim (including the empty string). The
    generator is asked for numbered TITLE / IDEA / HOOK entries.
    """
    style, hook = style_guidance(weights)
    return _BLENDED_TEMPLATE.format(
        count=count,
        subject=subject,
        style=style,
        time_scope=time_scope(weights),
        wild=percent(weights.wild),
        actionable=percent(weights.actionable),
        deep=percent(weights.deep),
        output_format=_OUTPUT_FORMAT.format(subject=subject, hook=hook),
        example=_EXAMPLE,
    )


def compile_explore_prompt(parent: Any, count: int = 3) -> str:
    """Prompt for variations of an existing card (anything with title/description)."""
    return _EXPLORE_TEMPLATE.format(
        count=count,
        title=parent.title,
        description=parent.description,
        output_format=_OUTPUT_FORMAT.format(
            subject=parent.title,
            hook="How this builds on the original idea",
        ),
    )
