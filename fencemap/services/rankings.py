"""
rankings.py — "Top N divisions" for the selected metric.

Only divisions with a non-zero value are ranked, the placeholder division
never is, and ties keep dataset order.
"""

from typing import Iterable, Union

from fencemap.models.division import DerivedDivision, RankedDivision
from fencemap.models.metric import DominantMetric, SimpleMetric

DEFAULT_TOP_N = 5


def top_divisions(
    divisions: Iterable[DerivedDivision],
    metric: Union[SimpleMetric, DominantMetric],
    limit: int = DEFAULT_TOP_N,
) -> list[RankedDivision]:
    scored = [
        (d, metric.value_for(d))
        for d in divisions
        if not d.is_placeholder
    ]
    scored = [(d, v) for d, v in scored if v > 0]
    scored.sort(key=lambda item: item[1], reverse=True)

    return [
        RankedDivision(
            rank=i + 1,
            name=d.name,
            value=value,
            color=metric.color,
            weapon=metric.weapon_for(d),
        )
        for i, (d, value) in enumerate(scored[:limit])
    ]
