from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 12


def _positive_int(raw: Optional[str], default: int) -> int:
    """Coerce a query value to a positive int; anything else gives ``default``."""
    try:
        parsed = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return default
    return parsed if parsed >= 1 else default


def _text(raw: Optional[str]) -> Optional[str]:
    # Empty values behave as if the key was never sent.
    return raw if raw else None


@dataclass(frozen=True)
class GoodsQuery:
    """Typed view of the ``/api/goods`` query string.

    Only the keys below are read; anything else in the query string is
    dropped when the query is built.
    """

    page: int = DEFAULT_PAGE
    count: int = DEFAULT_PAGE_SIZE
    gender: Optional[str] = None
    category: Optional[str] = None
    goods_type: Optional[str] = None
    search: Optional[str] = None
    id_list: Optional[str] = None
    top: Optional[str] = None

    @classmethod
    def from_params(cls, params: Optional[Mapping[str, str]] = None) -> 'GoodsQuery':
        params = params or {}
        return cls(
            page=_positive_int(params.get('page'), DEFAULT_PAGE),
            count=_positive_int(params.get('count'), DEFAULT_PAGE_SIZE),
            gender=_text(params.get('gender')),
            category=_text(params.get('category')),
            goods_type=_text(params.get('type')),
            search=_text(params.get('search')),
            id_list=_text(params.get('list')),
            top=_text(params.get('top')),
        )


@dataclass(frozen=True)
class PageResult:
    items: List[Dict[str, Any]] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    pages: int = 0
    total_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items': self.items,
            'page': self.page,
            'pages': self.pages,
            'totalCount': self.total_count,
        }
