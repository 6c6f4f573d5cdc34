"""Choose between the computed "When" line and the organizer's own text."""

from __future__ import annotations

import logging

from .tokens import extract_time_tokens, first_time_token, tokens_equivalent

logger = logging.getLogger(__name__)


def _disagrees(raw_token: str | None, computed_token: str | None) -> bool:
    if not raw_token:
        return False
    return not computed_token or not tokens_equivalent(raw_token, computed_token)


def reconcile_when_label(
    computed: str | None,
    fallback: str | None,
    raw_start_label: str | None,
    raw_end_label: str | None,
) -> str | None:
    """Return ``fallback`` when the typed times contradict ``computed``.

    Structured timestamps can drift from what the organizer typed (a wrong
    timezone upstream, for example); the typed text wins in that case.
    """

    if not computed:
        return fallback
    if not fallback:
        return computed

    computed_tokens = extract_time_tokens(computed)
    computed_start = computed_tokens[0].text if computed_tokens else None
    computed_end = computed_tokens[-1].text if computed_tokens else None
    raw_start = first_time_token(raw_start_label)
    raw_end = first_time_token(raw_end_label)

    if _disagrees(raw_start, computed_start) or _disagrees(raw_end, computed_end):
        logger.info(
            "Typed times disagree with computed label %r; using %r", computed, fallback
        )
        return fallback
    return computed
