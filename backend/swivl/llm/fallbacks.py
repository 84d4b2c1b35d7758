"""Template ideas used when the model is unavailable or returns nothing usable."""

from __future__ import annotations

import random

_HOOK = "What makes this interesting is how it connects your passion with community engagement and learning."

_TEXT_TEMPLATES = [
    ("Community Challenge", "Start a creative challenge around {topic} - invite others to share their unique approaches and build a collection of diverse perspectives."),
    ("Daily Practice", "Create a 30-day {topic} practice where you explore one small aspect each day and document your discoveries."),
    ("Collaborative Project", "Partner with someone who has a different perspective on {topic} and create something that neither of you could make alone."),
    ("Learning Journey", "Teach yourself about {topic} by creating something new every week and sharing your process with others."),
    ("Creative Remix", "Take the concept of {topic} and apply it to a completely different field or medium you've never tried before."),
    ("Storytelling Angle", "Document the stories behind {topic} - interview people, collect experiences, and share the human side."),
    ("Problem-Solving Focus", "Identify a common problem related to {topic} and create an innovative solution that helps others."),
    ("Experimental Approach", "Test unusual methods or combinations with {topic} and share what works, what doesn't, and what surprises you discover."),
]

_IMAGE_HOOK = "What makes this interesting is how visual inspiration can spark completely unexpected creative directions."

_IMAGE_TEMPLATES = [
    ("Visual Art Series", "Create a series of artworks inspired by the themes and colors in this image"),
    ("Photo Story", "Use this image as inspiration for a creative photography project or story"),
    ("Color Palette Study", "Extract the color palette from this image and make something new using only those colors"),
    ("Mood Board Creation", "Build a comprehensive mood board around the aesthetic of this image"),
    ("Creative Writing", "Write a story, poem, or creative piece inspired by the mood and setting of this image"),
    ("Musical Composition", "Compose music that captures the feeling and atmosphere conveyed by this image"),
]

_EXPLORE_TEMPLATES = [
    ("Expand the Vision", "Take \"{title}\" and apply it to a different space, medium or audience and see which principles still hold."),
    ("Add a Personal Touch", "Rework \"{title}\" around photos, objects or memories that make it unmistakably yours."),
    ("Mix Materials", "Rebuild \"{title}\" with contrasting textures and materials to give it more depth."),
    ("Shrink It Down", "Find the smallest version of \"{title}\" you could finish this afternoon."),
]


def text_fallbacks(topic: str, count: int) -> list[dict[str, str]]:
    chosen = random.sample(_TEXT_TEMPLATES, min(count, len(_TEXT_TEMPLATES)))
    topic = topic.lower()
    return [
        {"title": title, "description": f"{template.format(topic=topic)} - {_HOOK}"}
        for title, template in chosen
    ]


def image_fallbacks(count: int) -> list[dict[str, str]]:
    chosen = random.sample(_IMAGE_TEMPLATES, min(count, len(_IMAGE_TEMPLATES)))
    return [
        {"title": title, "description": f"{template} - {_IMAGE_HOOK}"}
        for title, template in chosen
    ]


def explore_fallbacks(parent_title: str, count: int) -> list[dict[str, str]]:
    chosen = random.sample(_EXPLORE_TEMPLATES, min(count, len(_EXPLORE_TEMPLATES)))
    return [
        {"title": title, "description": template.format(title=parent_title)}
        for title, template in chosen
    ]
