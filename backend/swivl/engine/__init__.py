"""SWIVL interaction core — blend weights, prompts, card queue, gestures, illustrations."""

from swivl.engine.blend import BlendController, BlendWeights, TrianglePosition, compute_weights
from swivl.engine.card_queue import CardQueue
from swivl.engine.card_stack import CardAction, CardStackController, SwipeOutcome
from swivl.engine.gesture import GestureClassifier, GestureConfig, SwipeDirection
from swivl.engine.illustration import generate_illustration
from swivl.engine.prompt import compile_prompt

__all__ = [
    "BlendController",
    "BlendWeights",
    "TrianglePosition",
    "compute_weights",
    "CardQueue",
    "CardAction",
    "CardStackController",
    "SwipeOutcome",
    "GestureClassifier",
    "GestureConfig",
    "SwipeDirection",
    "generate_illustration",
    "compile_prompt",
]
