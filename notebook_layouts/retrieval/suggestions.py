"""Follow-up prompt suggestions keyed on words in the query text."""

from typing import List, Tuple

MAX_SUGGESTIONS = 3

# (trigger substrings, suggestions), scanned in order
SUGGESTION_TABLE: List[Tuple[Tuple[str, ...], Tuple[str, str]]] = [
    (("weekly", "week"), (
        'Try "bullet journal weekly spread" for task management',
        'Consider "weekly meal planner" for nutrition tracking',
    )),
    (("study", "notes"), (
        'Try "Cornell note-taking system" for academic notes',
        'Consider "mind map template" for visual learning',
    )),
    (("mood", "journal"), (
        'Try "mood tracker & journal" for wellness tracking',
        'Consider "gratitude journal" for positive thinking',
    )),
    (("meeting", "business"), (
        'Try "meeting notes template" for professional use',
        'Consider "project planning template" for task management',
    )),
    (("fitness", "workout"), (
        'Try "workout & nutrition tracker" for health goals',
        'Consider "habit tracker" for routine building',
    )),
]


def suggest(query_text: str) -> List[str]:
    text = query_text.lower()
    suggestions: List[str] = []
    for triggers, pair in SUGGESTION_TABLE:
        if any(trigger in text for trigger in triggers):
            suggestions.extend(pair)
    return suggestions[:MAX_SUGGESTIONS]
