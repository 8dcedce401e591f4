import asyncio
import html
from typing import List, Optional

from codecritic.constants import SCORE_TICK_INTERVAL
from codecritic.view import Label


def classify_review_line(line: str) -> Optional[str]:
    """
    Returns the bullet text of a review line, or None for a blank line.

    Everything up to and including the first ``*`` is dropped. A line without
    an asterisk is kept whole.
    """
    stripped = line.strip()
    if not stripped:
        return None
    return stripped[stripped.find("*") + 1:].strip()


def review_items(review: str) -> List[str]:
    items = (classify_review_line(line) for line in review.splitlines())
    return [item for item in items if item is not None]


def format_review_as_html(review: str) -> str:
    items = "".join(f'<li class="ml-5 list-disc">{html.escape(item)}</li>' for item in review_items(review))
    return f'<ul class="space-y-2">{items}</ul>'


class ScoreAnimator:
    """Counts a label up from 0 to the final score, one step per interval."""

    def __init__(self, label: Label, interval: float = SCORE_TICK_INTERVAL):
        self.label = label
        self.interval = interval
        self.task: Optional[asyncio.Task] = None

    def start(self, final_score: int) -> asyncio.Task:
        # only one animation may write to the label at a time
        self.cancel()
        self.task = asyncio.get_running_loop().create_task(self._count_up(final_score))
        return self.task

    def cancel(self) -> None:
        if self.task is not None and not self.task.done():
            self.task.cancel()
        self.task = None

    async def _count_up(self, final_score: int) -> None:
        if final_score <= 0:
            self.label.text = str(final_score)
            return

        current = 0
        while current < final_score:
            await asyncio.sleep(self.interval)
            current += 1
            self.label.text = str(current)
