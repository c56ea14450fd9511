"""
Script Generator for short-form promotional videos.
Builds a one-line hook-driven script around the requested topic.
"""

import random
from typing import Callable, Optional, Sequence

HOOKS = (
    "You won't believe this...",
    "Stop scrolling! This will change everything...",
    "I tried this for 30 days and...",
    "This is the secret they don't want you to know...",
    "Wait until you see this...",
)

PROMO_SUFFIX = (
    "It's absolutely game-changing and here's why you need it right now. "
    "Don't miss out on this incredible recommendation!"
)

HookSelector = Callable[[Sequence[str]], str]


class ScriptGenerator:
    """
    Composes the voice-over script for a topic.
    The hook choice goes through `selector` so tests can pin it.
    """

    def __init__(self, selector: Optional[HookSelector] = None):
        self.selector = selector or random.choice

    def compose(self, topic: str) -> str:
        hook = self.selector(HOOKS)
        return f"{hook} {topic}. {PROMO_SUFFIX}"
