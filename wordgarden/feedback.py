"""Mindfulness prompts, found-word sounds and best-effort audio playback."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from wordgarden.constants import (
    DEFAULT_SOUND,
    FALLBACK_PROMPT,
    MINDFULNESS_PROMPTS,
    WIN_ACTION,
    WIN_MESSAGE,
    WIN_TITLE,
    WORD_SOUNDS,
)

logger = logging.getLogger(__name__)

SoundPolicy = Literal["per-word", "single"]
SoundPlayer = Callable[[str], None]


@dataclass(frozen=True)
class WinPayload:
    title: str = WIN_TITLE
    message: str = WIN_MESSAGE
    action: str = WIN_ACTION


def get_mindfulness_prompt(word: str) -> str:
    return MINDFULNESS_PROMPTS.get(word) or FALLBACK_PROMPT.format(word=word)


def sound_for(word: str | None, policy: SoundPolicy = "per-word") -> str:
    """Sound file to play for a found word."""
    if policy == "single" or word is None:
        return DEFAULT_SOUND
    return WORD_SOUNDS.get(word, DEFAULT_SOUND)


def play_audio(path: str | None, player: SoundPlayer | None) -> bool:
    """Play a sound if possible. Never raises; returns whether playback started.

    PermissionError stands for playback being blocked until the user has
    interacted; any other failure is unexpected and logged as an error.
    """
    if not path:
        logger.warning("No sound path.")
        return False
    if player is None:
        logger.debug("No audio output configured; skipping %s", path)
        return False
    try:
        player(path)
    except PermissionError:
        logger.warning("Audio (%s) prevented: user interaction needed.", path)
        return False
    except OSError as e:
        logger.error("Audio play failed: %s (%s)", path, e)
        return False
    except Exception as e:
        logger.error("Audio error: %s (%s)", path, e)
        return False
    return True
