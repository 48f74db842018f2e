"""
Tag extraction for todo descriptions.

A description is split on whitespace and each word is classified as one of:

- ``@context``   (leading ``@`` plus at least one character)
- ``+project``   (leading ``+`` plus at least one character)
- ``key:value``  (split on the first ``:``; both halves non-empty)
- plain text     (everything else, including ``key:`` and ``:value``)

Plain words are rejoined with single spaces in their original order.
"""

from typing import Dict, List, Tuple


def extract_tags(text: str) -> Tuple[str, List[str], List[str], Dict[str, str]]:
    """
    Split free text into (plain_text, contexts, projects, metadata).

    Duplicate contexts and projects are kept in encounter order. For a
    repeated metadata key the last value wins.
    """
    plain: List[str] = []
    contexts: List[str] = []
    projects: List[str] = []
    metadata: Dict[str, str] = {}

    for word in text.split():
        if word.startswith("@") and len(word) > 1:
            contexts.append(word[1:])
        elif word.startswith("+") and len(word) > 1:
            projects.append(word[1:])
        elif ":" in word and not word.startswith(("@", "+")):
            key, _, value = word.partition(":")
            if key and value:
                metadata[key] = value
            else:
                plain.append(word)
        else:
            plain.append(word)

    return " ".join(plain), contexts, projects, metadata
