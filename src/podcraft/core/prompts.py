"""Prompt templates for the podcast orchestration stages.

Each builder combines caller-supplied values with fixed instruction
boilerplate.  The boilerplate is constant rather than configuration because it
defines the voice of every generated episode; callers control variation
through the topic, key points and duration.

Template Structure (script)::

    [Fixed: host persona and tone]

    Topic: [topic]
    Key points to cover: [points]
    Target duration: [duration]

    [Fixed: output constraints]

Sections are separated by double newlines.

Usage
-----
::

    script_prompt = build_script_prompt("Urban beekeeping", "hives, honey, city rules", "10 minutes")
    title_prompt = build_title_prompt("Urban beekeeping")
    poster_prompt = build_poster_prompt("City Hive Secrets", "Urban beekeeping")
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Fixed instruction boilerplate.
# ---------------------------------------------------------------------------

_SCRIPT_PERSONA = (
    "You are the host of a popular podcast. Write the complete spoken script for one "
    "episode. Open by introducing yourself as the host and welcoming the listeners, then "
    "walk through the subject in a warm, conversational tone, as if talking to a friend. "
    "Keep it engaging and easy to follow when heard aloud."
)

_SCRIPT_CONSTRAINTS = (
    "Write only the words the host will say, as plain flowing sentences. Do not use "
    "headings, bullet points, asterisks, hash signs or any other special characters. Do "
    "not include stage directions, and do not mention music, jingles or sound effects."
)

_TITLE_INSTRUCTIONS = (
    "Suggest one catchy podcast episode title between one and five words long. It should "
    "appeal to a broad audience. Reply with the title only, without quotes, symbols, "
    "numbering or punctuation."
)

_POSTER_ART_DIRECTION = (
    "Bold, modern podcast cover art. Clean composition with a single strong focal point, "
    "vibrant but harmonious colours, soft studio lighting and subtle depth. Square format, "
    "high detail, professional graphic design. No text on the image other than the title."
)


def build_script_prompt(topic: str, points: str, duration: str) -> str:
    """Compile the prompt for the script stage.

    Args:
        topic: Subject of the episode.
        points: Key points the host should cover.
        duration: Target spoken length (free text, e.g. ``"10 minutes"``).

    Returns:
        The prompt string with sections separated by double newlines.
    """
    details = "\n".join(
        [
            f"Topic: {topic.strip()}",
            f"Key points to cover: {points.strip()}",
            f"Target duration: {duration.strip()}",
        ]
    )
    return "\n\n".join([_SCRIPT_PERSONA, details, _SCRIPT_CONSTRAINTS])


def build_title_prompt(topic: str) -> str:
    """Compile the prompt for the title stage.

    Only the topic is embedded; the title does not depend on the script.
    """
    return "\n\n".join([_TITLE_INSTRUCTIONS, f"Topic: {topic.strip()}"])


def build_poster_prompt(title: str, topic: str) -> str:
    """Compile the image prompt for the poster stage."""
    return "\n\n".join(
        [
            f'Podcast cover for an episode titled "{title.strip()}" about {topic.strip()}.',
            _POSTER_ART_DIRECTION,
        ]
    )
