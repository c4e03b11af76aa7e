import re

_ATS_SCORE = re.compile(
    r"ATS\s+(?:Compatibility\s+)?(?:Score|Rating)[\s*_]*:[\s*_]*(\d+(?:\.\d+)?)\s*/\s*10(?!\d)",
    re.IGNORECASE,
)


def parse_ats_score(feedback_text: str) -> float | None:
    """Return the first 'ATS Score: X/10' value found in the text, or None.

    Accepts 'ATS Score', 'ATS Rating', 'ATS Compatibility Score' and
    'ATS Compatibility Rating'. The value is returned as written; range
    checks belong to the persistence layer.
    """
    match = _ATS_SCORE.search(feedback_text)
    if match is None:
        return None
    return float(match.group(1))
