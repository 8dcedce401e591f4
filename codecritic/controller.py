import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

import codecritic.errors as errors
from codecritic.constants import (
    COPIED_LABEL,
    COPY_LABEL,
    COPY_RESET_DELAY,
    ERROR_PREFIX,
    NO_CHANGES_MESSAGE,
    REVIEW_PLACEHOLDER,
    SCORE_PLACEHOLDER,
    SCORE_TICK_INTERVAL,
)
from codecritic.renderer import ScoreAnimator, format_review_as_html
from codecritic.schemas import ReviewResult
from codecritic.utils import require_code
from codecritic.view import Clipboard, ReviewView


class UIState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ReviewController:
    """
    Drives a ReviewView through Idle -> Loading -> Success/Error.

    At most one review request is in flight. ``clear()`` supersedes it, and
    a superseded request never writes into the view.
    """

    def __init__(
        self,
        view: ReviewView,
        reviewer: Callable[[str], Awaitable[ReviewResult]],
        clipboard: Clipboard,
        score_interval: float = SCORE_TICK_INTERVAL,
        copy_reset_delay: float = COPY_RESET_DELAY,
    ):
        self.view = view
        self.state = UIState.IDLE
        self.animator = ScoreAnimator(view.score_display, score_interval)
        self._reviewer = reviewer
        self._clipboard = clipboard
        self._copy_reset_delay = copy_reset_delay
        self._copy_reset: Optional[asyncio.TimerHandle] = None
        self._inflight: Optional[asyncio.Task] = None
        self._generation = 0

    @property
    def busy(self) -> bool:
        return self.state is UIState.LOADING

    async def submit(self) -> None:
        if self.busy or self.view.review_button.disabled:
            return

        try:
            code = require_code(self.view.input_code.value)
        except errors.ValidationError as e:
            self._show_error(str(e))
            return

        self._enter_loading()
        generation = self._generation
        self._inflight = asyncio.ensure_future(self._reviewer(code))

        try:
            result = await self._inflight
        except asyncio.CancelledError:
            if generation != self._generation:
                return
            raise
        except Exception as e:
            if generation != self._generation:
                return
            logging.error(f"Error during AI review: {e!r}")
            self.state = UIState.ERROR
            self._show_error(f"{ERROR_PREFIX}{self._describe(e)}")
        else:
            if generation != self._generation:
                return
            self._render(result)
            self.state = UIState.SUCCESS
        finally:
            if generation == self._generation:
                self._leave_loading()

    def clear(self) -> None:
        self._supersede()
        self.animator.cancel()

        self.view.input_code.value = ""
        self.view.review_output.html = REVIEW_PLACEHOLDER
        self.view.output_code.value = ""
        self.view.score_display.text = SCORE_PLACEHOLDER
        self._hide_error()
        self._leave_loading()
        self.state = UIState.IDLE

    async def copy(self) -> bool:
        text = self.view.output_code.value
        if not text:
            return False

        await self._clipboard.write_text(text)

        self.view.copy_button.label = COPIED_LABEL
        if self._copy_reset is not None:
            self._copy_reset.cancel()
        self._copy_reset = asyncio.get_running_loop().call_later(self._copy_reset_delay, self._restore_copy_label)
        return True

    def _render(self, result: ReviewResult) -> None:
        self.view.review_output.html = format_review_as_html(result.review)
        if result.updated_code.strip():
            self.view.output_code.value = result.updated_code
        else:
            self.view.output_code.value = NO_CHANGES_MESSAGE
        self.animator.start(result.score)

    def _supersede(self) -> None:
        self._generation += 1
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

    def _enter_loading(self) -> None:
        self.state = UIState.LOADING
        self._hide_error()
        self.view.loader.hidden = False
        self.view.review_button.disabled = True

    def _leave_loading(self) -> None:
        if self.state is UIState.LOADING:
            self.state = UIState.IDLE
        self.view.loader.hidden = True
        self.view.review_button.disabled = False
        self._inflight = None

    def _restore_copy_label(self) -> None:
        self.view.copy_button.label = COPY_LABEL
        self._copy_reset = None

    def _show_error(self, message: str) -> None:
        self.view.error_message.text = message
        self.view.error_box.hidden = False

    def _hide_error(self) -> None:
        self.view.error_box.hidden = True

    @staticmethod
    def _describe(error: Exception) -> str:
        # ReviewError subclasses carry a user-facing message
        return str(error) or type(error).__name__
