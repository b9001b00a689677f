"""Naive script segmentation into scenes."""

from video_producer.domain.models import Scene

FALLBACK_DIRECTION = "Create an engaging visual for this narration"


def placeholder_direction(number: int, paragraph: str) -> str:
    return f'Scene {number}: Visual representation of "{paragraph[:50]}..."'


def parse_script_into_scenes(script: str, visual_directions: str = "") -> list[Scene]:
    """Split a script into scenes.

    - With visual directions: one scene per non-empty direction line, paired
      with the script line at the same index (empty text when the script is
      shorter).
    - Without: one scene per blank-line separated paragraph, each with a
      placeholder direction.
    - If neither yields anything, the whole script becomes a single scene.
    """
    script_lines = [line for line in script.split("\n") if line.strip()]
    visual_lines = [line for line in visual_directions.split("\n") if line.strip()]

    scenes: list[Scene] = []
    if visual_lines:
        for i, direction in enumerate(visual_lines):
            text = script_lines[i] if i < len(script_lines) else ""
            scenes.append(Scene(number=i + 1, text=text, visual_direction=direction))
    else:
        paragraphs = [p for p in script.split("\n\n") if p.strip()]
        for i, paragraph in enumerate(paragraphs):
            scenes.append(
                Scene(
                    number=i + 1,
                    text=paragraph,
                    visual_direction=placeholder_direction(i + 1, paragraph),
                )
            )

    if not scenes:
        return [Scene(number=1, text=script, visual_direction=FALLBACK_DIRECTION)]
    return scenes
