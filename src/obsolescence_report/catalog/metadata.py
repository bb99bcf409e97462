from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from ..analysis.models import CategoryDescriptor
from ..analysis.obsolescence import describe_category

FACT_SHEET_TYPE = "ITComponent"


class CategoryMetadata:
    """Labels and display colors for IT component category codes."""

    def __init__(
        self,
        labels: Optional[Mapping[str, str]] = None,
        colors: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self._labels: Dict[str, str] = dict(labels or {})
        self._colors: Dict[str, Mapping[str, Any]] = dict(colors or {})

    def label(self, code: str) -> str:
        return self._labels.get(code) or code

    def colors(self, code: str) -> Tuple[Optional[str], Optional[str]]:
        entry = self._colors.get(code) or {}
        return entry.get("bgColor"), entry.get("color")

    def describe(self, code: Optional[str]) -> CategoryDescriptor:
        return describe_category(code, self)

    def codes(self):
        return list(dict.fromkeys(list(self._colors) + list(self._labels)))

    @classmethod
    def from_report_setup(cls, setup: Mapping[str, Any]) -> "CategoryMetadata":
        settings = setup.get("settings") or {}
        fact_sheets = (settings.get("viewModel") or {}).get("factSheets") or []
        view_model = next((fs for fs in fact_sheets if fs.get("type") == FACT_SHEET_TYPE), None)
        if view_model is None:
            raise KeyError(f"No {FACT_SHEET_TYPE} view model in report setup")
        category_meta = (view_model.get("fieldMetaData") or {}).get("category") or {}
        colors = category_meta.get("values") or {}

        translations = settings.get("translations") or {}
        labels = (translations.get(FACT_SHEET_TYPE) or {}).get("category") or {}
        return cls(labels=labels, colors=colors)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "CategoryMetadata":
        labels: Dict[str, str] = {}
        colors: Dict[str, Dict[str, Any]] = {}
        for code, entry in (cfg.get("categories") or {}).items():
            entry = entry or {}
            if entry.get("label"):
                labels[str(code)] = str(entry["label"])
            colors[str(code)] = {"bgColor": entry.get("bg_color"), "color": entry.get("color")}
        return cls(labels=labels, colors=colors)


__all__ = ["CategoryMetadata", "FACT_SHEET_TYPE"]
