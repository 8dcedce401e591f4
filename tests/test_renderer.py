import asyncio

from codecritic.renderer import ScoreAnimator, classify_review_line, format_review_as_html, review_items
from codecritic.view import Label


def test_two_bullets():
    html = format_review_as_html("* a\n* b")

    assert html == '<ul class="space-y-2"><li class="ml-5 list-disc">a</li><li class="ml-5 list-disc">b</li></ul>'


def test_empty_review_is_an_empty_list():
    assert format_review_as_html("") == '<ul class="space-y-2"></ul>'
    assert review_items("\n  \n") == []


def test_classify_review_line():
    assert classify_review_line("   ") is None
    assert classify_review_line("  *  padded  ") == "padded"
    assert classify_review_line("- * nested marker") == "nested marker"
    assert classify_review_line("No asterisk here") == "No asterisk here"


def test_items_are_escaped():
    html = format_review_as_html("* Avoid <script> in .innerHTML & friends")

    assert "&lt;script&gt;" in html
    assert "&amp; friends" in html
    assert "<script>" not in html


def test_score_counts_up_and_stops():
    async def scenario():
        label = Label("N/A")
        animator = ScoreAnimator(label, interval=0)

        task = animator.start(42)
        await task
        assert label.text == "42"

        for _ in range(5):
            await asyncio.sleep(0)
        assert label.text == "42"
        assert task.done()

    asyncio.run(scenario())


def test_new_animation_cancels_previous():
    async def scenario():
        label = Label("N/A")
        animator = ScoreAnimator(label, interval=0)

        first = animator.start(100)
        second = animator.start(5)
        await second

        assert first.cancelled()
        assert label.text == "5"

    asyncio.run(scenario())


def test_zero_score():
    async def scenario():
        label = Label("N/A")
        await ScoreAnimator(label, interval=0).start(0)
        assert label.text == "0"

    asyncio.run(scenario())
