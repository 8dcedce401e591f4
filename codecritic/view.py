from dataclasses import dataclass, field
from typing import Protocol

from codecritic.constants import COPY_LABEL, REVIEW_PLACEHOLDER, SCORE_PLACEHOLDER


@dataclass
class Element:
    hidden: bool = False


@dataclass
class TextArea:
    value: str = ""


@dataclass
class Label:
    text: str = ""


@dataclass
class HtmlPanel:
    html: str = ""


@dataclass
class Button:
    label: str = ""
    disabled: bool = False


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


@dataclass
class ReviewView:
    """Handles to every element the controller reads or writes."""

    input_code: TextArea = field(default_factory=TextArea)
    review_output: HtmlPanel = field(default_factory=lambda: HtmlPanel(REVIEW_PLACEHOLDER))
    output_code: TextArea = field(default_factory=TextArea)
    score_display: Label = field(default_factory=lambda: Label(SCORE_PLACEHOLDER))
    review_button: Button = field(default_factory=lambda: Button("Review My Code"))
    copy_button: Button = field(default_factory=lambda: Button(COPY_LABEL))
    loader: Element = field(default_factory=lambda: Element(hidden=True))
    error_box: Element = field(default_factory=lambda: Element(hidden=True))
    error_message: Label = field(default_factory=Label)
