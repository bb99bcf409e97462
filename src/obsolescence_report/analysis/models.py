from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

END_OF_LIFE = "endOfLife"
NOT_DEFINED_LABEL = "Not defined"

_KNOWN_FIELDS = {"id", "name", "category", "lifecycle"}


@dataclass(frozen=True)
class LifecyclePhase:
    phase: str
    start_date: Optional[str] = None


@dataclass(frozen=True)
class Lifecycle:
    lifecycle_phase: Optional[str] = None
    phases: Tuple[LifecyclePhase, ...] = ()

    def find_phase(self, name: str) -> Optional[LifecyclePhase]:
        return next((p for p in self.phases if p.phase == name), None)

    @classmethod
    def from_node(cls, node: Optional[Mapping[str, Any]]) -> Optional["Lifecycle"]:
        if node is None:
            return None
        phases = tuple(
            LifecyclePhase(phase=str(p.get("phase")), start_date=p.get("startDate"))
            for p in (node.get("phases") or [])
            if isinstance(p, Mapping)
        )
        return cls(lifecycle_phase=node.get("lifecyclePhase"), phases=phases)


@dataclass(frozen=True)
class ITComponent:
    """One IT component fact sheet as delivered by the catalog."""

    id: str
    name: str
    category: Optional[str] = None
    lifecycle: Optional[Lifecycle] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_node(cls, node: Mapping[str, Any]) -> "ITComponent":
        return cls(
            id=str(node["id"]),
            name=node.get("name") or "",
            category=node.get("category"),
            lifecycle=Lifecycle.from_node(node.get("lifecycle")),
            extra={k: v for k, v in node.items() if k not in _KNOWN_FIELDS},
        )


@dataclass(frozen=True)
class CategoryDescriptor:
    key: Optional[str]
    label: str
    bg_color: Optional[str] = None
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "label": self.label, "bgColor": self.bg_color, "color": self.color}


@dataclass(frozen=True)
class ObsoleteComponent:
    id: str
    name: str
    category: CategoryDescriptor
    obsolescence_date: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "category": self.category.to_dict(),
            "obsolescenceDate": self.obsolescence_date,
        }


@dataclass
class CategoryAggregate:
    descriptor: CategoryDescriptor
    items: List[ObsoleteComponent] = field(default_factory=list)

    @property
    def key(self) -> Optional[str]:
        return self.descriptor.key

    @property
    def label(self) -> str:
        return self.descriptor.label

    @property
    def bg_color(self) -> Optional[str]:
        return self.descriptor.bg_color

    @property
    def color(self) -> Optional[str]:
        return self.descriptor.color

    @property
    def count(self) -> int:
        return len(self.items)


__all__ = [
    "END_OF_LIFE",
    "NOT_DEFINED_LABEL",
    "CategoryAggregate",
    "CategoryDescriptor",
    "ITComponent",
    "Lifecycle",
    "LifecyclePhase",
    "ObsoleteComponent",
]
