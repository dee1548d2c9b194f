"""
商品过滤器 - 负责过滤和随机选择逻辑
"""

import random
from typing import Any, Dict, Iterable, List, Optional

TOP_GOODS_COUNT = 8


def _field(item: Dict[str, Any], key: str) -> str:
    value = item.get(key)
    return '' if value is None else str(value)


def shuffle(items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return a uniformly shuffled copy; the input is left untouched."""
    shuffled = list(items)
    random.shuffle(shuffled)
    return shuffled


def select_top(goods: Iterable[Dict[str, Any]], gender: str,
               count: int = TOP_GOODS_COUNT) -> List[Optional[Dict[str, Any]]]:
    """Random pick of ``top`` goods for one gender, always ``count`` long.

    Short selections are padded with ``None``.
    """
    picked = shuffle(
        item for item in goods
        if item.get('top') and item.get('gender') == gender
    )[:count]
    return picked + [None] * (count - len(picked))


def filter_by_gender(goods: List[Dict[str, Any]], gender: Optional[str]) -> List[Dict[str, Any]]:
    if not gender:
        return goods
    return [item for item in goods if item.get('gender') == gender]


def filter_by_category(goods: List[Dict[str, Any]], category: Optional[str]) -> List[Dict[str, Any]]:
    if not category:
        return goods
    return [item for item in goods if item.get('category') == category]


def filter_by_type(goods: List[Dict[str, Any]], goods_type: Optional[str]) -> List[Dict[str, Any]]:
    if not goods_type:
        return goods
    return [item for item in goods if item.get('type') == goods_type]


def search_goods(goods: Iterable[Dict[str, Any]], keyword: str) -> List[Dict[str, Any]]:
    """Case-insensitive substring match on title or description."""
    keyword = (keyword or '').strip().lower()
    return [
        item for item in goods
        if keyword in _field(item, 'title').lower()
        or keyword in _field(item, 'description').lower()
    ]


def filter_by_id_list(goods: Iterable[Dict[str, Any]], id_list: str) -> List[Dict[str, Any]]:
    """Goods whose id occurs anywhere inside the comma-joined ``id_list``.

    This is a substring test, so ``"12"`` also matches ids ``"1"`` and ``"2"``.
    """
    id_list = (id_list or '').strip().lower()
    return [item for item in goods if _field(item, 'id') in id_list]
