from __future__ import annotations

import logging
from typing import List, Sequence

from github_activity.models import PUSH, Event

logger = logging.getLogger(__name__)


def group_events(events: Sequence[Event]) -> List[Event]:
    """Collapse consecutive push events to the same repository into one.

    The merged event keeps the first push's fields with ``size`` summed over
    the run. Every other event passes through untouched and order is kept.
    """
    grouped: List[Event] = []
    i = 0
    while i < len(events):
        current = events[i]
        if current.kind != PUSH:
            grouped.append(current)
            i += 1
            continue

        total = current.payload.size
        j = i + 1
        while (
            j < len(events)
            and events[j].kind == PUSH
            and events[j].repository_name == current.repository_name
        ):
            total += events[j].payload.size
            j += 1

        if j - i == 1:
            grouped.append(current)
        else:
            logger.debug(
                "Grouped %d pushes to %s (%d commits)", j - i, current.repository_name, total
            )
            payload = current.payload.model_copy(update={"size": total})
            grouped.append(current.model_copy(update={"payload": payload}))
        i = j
    return grouped
