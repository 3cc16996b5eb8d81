# llm_analyzer.py
import asyncio
import json
import re
import textwrap
import threading

import google.generativeai as genai

from config import GEMINI_API_KEY, GEMINI_MODEL, ADVISORY_TIMEOUT_SECONDS
from threshold_config import SCORES
from water_quality import classify

# --- LLM Configuration ---
LLM_ENABLED = False
llm_model = None

try:
    if not GEMINI_API_KEY:
        raise ValueError("GEMINI_API_KEY environment variable not set.")
    genai.configure(api_key=GEMINI_API_KEY)
    llm_model = genai.GenerativeModel(GEMINI_MODEL)
    LLM_ENABLED = True
    print("Gemini LLM for water advisories configured successfully.")
except Exception as e:
    print(f"Warning: Gemini LLM not configured. Advisories will use the standard TDS tiers. Error: {e}")
    LLM_ENABLED = False
    llm_model = None

REQUIRED_KEYS = ("score", "recommendation", "explanation")
LIST_KEYS = ("side_effects", "improvement_tips")

_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

# Shared loop for resolve_blocking(); see _get_advisory_loop().
_advisory_loop = None
_advisory_loop_lock = threading.Lock()


def summarize_reports(reports):
    """Joins community reports as 'Issue: description' pairs, or 'None' if there are none."""
    summary = ", ".join(
        f"{report.get('issue_type')}: {report.get('description')}" for report in reports or []
    )
    return summary or "None"


def strip_code_fences(text):
    """Removes a ```json ... ``` wrapper from the model output, if present."""
    text = text.strip()
    match = _FENCE_PATTERN.match(text)
    if match:
        return match.group(1).strip()
    return text


def build_prompt(tds, reports, baseline):
    report_summary = summarize_reports(reports)
    side_effects = "; ".join(baseline["side_effects"])
    tips = "; ".join(baseline["improvement_tips"])

    return textwrap.dedent(f"""
    Analyze water quality with TDS level: {tds} ppm.
    Community reports in the area: {report_summary}.

    The standard TDS guidelines classify this water as '{baseline['score']}'
    (recommendation: {baseline['recommendation']}).
    Known side effects at this level: {side_effects}.
    Known improvement tips at this level: {tips}.

    Provide:
    1. A safety score (Safe, Risk, Unsafe).
    2. A clear recommendation (Boil, Filter, Avoid, Remineralize, or Drink Directly).
    3. A brief explanation that considers the community reports.
    4. A list of potential side effects of drinking this water.
    5. A list of practical tips to improve this water quality at home.

    Return ONLY a JSON object with keys: score, tds_level, recommendation, explanation, side_effects, improvement_tips.
    side_effects and improvement_tips must be JSON arrays of strings.
    """)


def parse_advisory(raw_text, baseline):
    """
    Parses the model output into an assessment.

    Raises ValueError when the top level is unusable. List fields that are
    missing, not lists, or empty are replaced with the baseline's lists.
    """
    parsed = json.loads(strip_code_fences(raw_text))
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}.")

    missing = [key for key in REQUIRED_KEYS if key not in parsed]
    if missing:
        raise ValueError(f"Advisory is missing required keys: {missing}")
    if parsed["score"] not in SCORES:
        raise ValueError(f"Advisory has an unknown score: {parsed['score']!r}")

    tds_level = parsed.get("tds_level")
    if isinstance(tds_level, bool) or not isinstance(tds_level, (int, float)):
        parsed["tds_level"] = baseline["tds_level"]

    for key in LIST_KEYS:
        value = parsed.get(key)
        if not isinstance(value, list) or not value:
            parsed[key] = list(baseline[key])
        else:
            parsed[key] = [str(item) for item in value]

    return parsed


async def resolve(tds, reports, model=None):
    """
    Returns the AI advisory for a TDS reading, grounded on the standard tiers.

    The baseline from classify() is returned unchanged when the model is not
    configured or when the call fails for any reason. No timeout is applied
    here; see resolve_with_timeout().
    """
    baseline = classify(tds)
    model = model or llm_model
    if model is None:
        return baseline

    try:
        prompt = build_prompt(tds, reports, baseline)
        response = await model.generate_content_async(
            prompt,
            generation_config={"response_mime_type": "application/json"},
        )
        return parse_advisory(response.text, baseline)
    except Exception as e:
        print(f"ADVISORY: AI advisory failed for TDS={tds}. Using standard tiers. Error: {e}")
        return baseline


async def resolve_with_timeout(tds, reports, timeout=ADVISORY_TIMEOUT_SECONDS, model=None):
    """Same as resolve(), but gives up after `timeout` seconds and returns the baseline."""
    try:
        return await asyncio.wait_for(resolve(tds, reports, model=model), timeout)
    except asyncio.TimeoutError:
        print(f"ADVISORY: AI advisory timed out after {timeout}s. Using standard tiers.")
        return classify(tds)


def _get_advisory_loop():
    """
    Returns the event loop that runs blocking advisory calls, starting it on first use.
    The Gemini async client stays bound to the loop of its first call, so every
    blocking call is submitted to this same long-lived loop.
    """
    global _advisory_loop
    with _advisory_loop_lock:
        if _advisory_loop is None or _advisory_loop.is_closed():
            loop = asyncio.new_event_loop()
            threading.Thread(target=loop.run_forever, name="advisory-loop", daemon=True).start()
            _advisory_loop = loop
        return _advisory_loop


def resolve_blocking(tds, reports, timeout=ADVISORY_TIMEOUT_SECONDS, model=None):
    """Runs resolve_with_timeout() to completion from synchronous code such as a Flask view."""
    future = asyncio.run_coroutine_threadsafe(
        resolve_with_timeout(tds, reports, timeout=timeout, model=model),
        _get_advisory_loop(),
    )
    return future.result()
