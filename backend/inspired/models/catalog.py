from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Catalog:
    """In-memory goods dataset, built once at startup and shared read-only.

    ``goods`` keeps the order of the source document. ``categories`` and
    ``colors`` are opaque reference data returned to clients as loaded.
    """

    goods: Tuple[Dict[str, Any], ...] = ()
    categories: Any = field(default_factory=dict)
    colors: Any = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Catalog':
        data = data or {}
        return cls(
            goods=tuple(data.get('goods') or ()),
            categories=data.get('categories') or {},
            colors=data.get('colors') or [],
        )

    def find(self, item_id: str) -> Optional[Dict[str, Any]]:
        for item in self.goods:
            if str(item.get('id')) == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self.goods)
