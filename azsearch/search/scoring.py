from azsearch.models.search import MatchType

BASE_SCORE = 100
EXACT_MATCH_BONUS = 1000
PREFIX_MATCH_BONUS = 500
FILTER_MATCH_SCORE = 100

_MATCH_TYPE_WEIGHTS = {
    MatchType.NAME:           800,
    MatchType.TYPE:           600,
    MatchType.RESOURCE_GROUP: 400,
    MatchType.LOCATION:       300,
    MatchType.TAG:            200,
}


def calculate_score(match_type: MatchType, match_term: str, full_text: str) -> int:
    """
    Relevance of one (field, term) match. Always >= 1.

    Exact and prefix bonuses stack, so an exact match also earns the prefix
    bonus. Longer field text loses one point per ten characters.
    """
    if match_type == MatchType.FILTER:
        return FILTER_MATCH_SCORE

    term = match_term.lower()
    text = full_text.lower()
    score = BASE_SCORE

    if term == text:
        score += EXACT_MATCH_BONUS
    if text.startswith(term):
        score += PREFIX_MATCH_BONUS

    score += _MATCH_TYPE_WEIGHTS.get(match_type, 0)
    score -= len(full_text) // 10

    return max(score, 1)
