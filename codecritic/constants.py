GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-2.5-flash"

JSON_MIME_TYPE = "application/json"

# UI strings
REVIEW_PLACEHOLDER = "AI's feedback will appear here..."
NO_CHANGES_MESSAGE = "No changes needed. Your code is looking great!"
EMPTY_INPUT_MESSAGE = "Please paste some code in the input box before reviewing."
INVALID_RESPONSE_MESSAGE = "The AI returned an invalid response. Please try again."
ERROR_PREFIX = "An error occurred: "
SCORE_PLACEHOLDER = "N/A"
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"

# UI timings, in seconds
SCORE_TICK_INTERVAL = 0.02
COPY_RESET_DELAY = 2.0

MISSING_KEY_MESSAGE = "API key is not configured on the server."

REVIEW_PROMPT = """
Please act as an expert code reviewer. Analyze the following code snippet.
Your analysis MUST check for the following specific issues:
1.  XSS vulnerabilities (e.g., from using .innerHTML).
2.  Global variable pollution.
3.  Missing error handling (e.g., lack of try...catch in async functions).
4.  Inefficient logic or performance bottlenecks.
5.  Outdated practices (e.g., using 'var' instead of 'let'/'const').
6.  Hardcoded "magic strings".

Based on your analysis, provide a concise, summarized review. Use markdown bullet points (e.g., "* Point 1") to list the most important issues.

Then, determine the purpose of the code and check if it correctly achieves that purpose.
- If the code is already perfect and achieves its goal, your review should state that, and "updatedCode" should be an empty string.
- If the code works but can be improved for style, performance, or best practices, provide the updated version.
- If the code is broken or incorrect, provide the corrected version.

Finally, give a score from 0 to 100 for the ORIGINAL code.

Return your response ONLY as a valid JSON object with the following structure:
{{
  "review": "Your summarized review in markdown bullet points here.",
  "updatedCode": "The fully corrected and improved code here, or an empty string if no changes are needed.",
  "score": <the score as an integer>
}}

Here is the code to review:
```
{code}
```
"""

PROXY_REVIEW_PROMPT = """
Act as an expert senior software developer and code reviewer.
Your task is to provide a detailed, constructive review of the following code snippet.

Analyze the code based on these criteria:
1.  **Correctness and Bugs:** Identify any logic errors, potential runtime errors, or edge cases that are not handled.
2.  **Best Practices & Readability:** Check for adherence to modern coding standards, clarity, and maintainability. Suggest improvements for variable names, comments, and structure.
3.  **Performance & Efficiency:** Highlight any inefficient code, unnecessary computations, or memory leaks. Suggest more performant alternatives.
4.  **Security:** Point out potential security vulnerabilities (e.g., injection risks, exposed secrets, improper error handling).

After the analysis, provide a response in a single, clean JSON object with no extra text or commentary outside the JSON. The JSON object must have these exact keys:
-   "language": A string identifying the programming language (e.g., "JavaScript", "Python").
-   "review": A string containing your feedback as Markdown bullet points, one per line, each starting with "* ".
-   "updatedCode": A string with the refactored code, incorporating all your suggestions. If no changes are needed, return an empty string.
-   "score": An integer from 0 to 100, where 0 is poor and 100 is excellent, representing the overall quality of the code.

Code to review:
```
{code}
```
"""
