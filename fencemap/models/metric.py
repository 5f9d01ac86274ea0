"""
metric.py — The metric a map bubble is sized and coloured by.

Two kinds, one interface:

  SimpleMetric    reads a stored field (members, total_foil, ...) and always
                  uses its own legend colour.
  DominantMetric  "Most Popular Weapon" — derived per division from
                  DerivedDivision.dominant_weapon(); value, colour and label all come from
                  whichever weapon wins in that division.

Callers never branch on the kind: they call value_for / color_for / label_for.
The `kind` field is the pydantic discriminator, so either variant can be
accepted in a request body as `Metric`.
"""

from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from fencemap.models.division import DerivedDivision

SimpleMetricKey = Literal["members", "total_foil", "total_epee", "total_saber"]
MetricKey = Literal["members", "total_foil", "total_epee", "total_saber", "most_popular_weapon"]


class SimpleMetric(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind:  Literal["simple"] = "simple"
    key:   SimpleMetricKey
    label: str
    color: str

    def value_for(self, division: DerivedDivision) -> int:
        return getattr(division, self.key, 0) or 0

    def color_for(self, division: DerivedDivision) -> str:
        return self.color

    def weapon_for(self, division: DerivedDivision) -> None:
        return None

    def label_for(self, division: DerivedDivision) -> str:
        return f"{self.label}: {self.value_for(division)}"


class DominantMetric(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind:  Literal["dominant"] = "dominant"
    key:   Literal["most_popular_weapon"] = "most_popular_weapon"
    label: str = "Most Popular Weapon"
    color: str = "#9467bd"   # legend swatch only; bubbles use the winning weapon's colour

    def value_for(self, division: DerivedDivision) -> int:
        return division.dominant_weapon().total

    def color_for(self, division: DerivedDivision) -> str:
        return division.dominant_weapon().color

    def weapon_for(self, division: DerivedDivision) -> str:
        return division.dominant_weapon().name

    def label_for(self, division: DerivedDivision) -> str:
        top = division.dominant_weapon()
        return f"Most Popular: {top.name} ({top.total})"


Metric = Annotated[Union[SimpleMetric, DominantMetric], Field(discriminator="kind")]

METRICS: tuple[Union[SimpleMetric, DominantMetric], ...] = (
    SimpleMetric(key="members",     label="Total Members", color="#1f77b4"),
    SimpleMetric(key="total_foil",  label="Foil Rated",    color="#2ca02c"),
    SimpleMetric(key="total_epee",  label="Epee Rated",    color="#ff7f0e"),
    SimpleMetric(key="total_saber", label="Saber Rated",   color="#d62728"),
    DominantMetric(),
)

METRICS_BY_KEY = MappingProxyType({m.key: m for m in METRICS})

DEFAULT_METRIC = "members"


def get_metric(key: str) -> Union[SimpleMetric, DominantMetric]:
    """Look up a metric by key. Raises KeyError for unknown keys."""
    return METRICS_BY_KEY[key]
