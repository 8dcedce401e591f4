from codecritic.constants import PROXY_REVIEW_PROMPT, REVIEW_PROMPT


def build_review_prompt(code: str) -> str:
    return REVIEW_PROMPT.format(code=code)


def build_proxy_prompt(code: str) -> str:
    # Maintained separately from REVIEW_PROMPT, it also asks for the language
    return PROXY_REVIEW_PROMPT.format(code=code)
