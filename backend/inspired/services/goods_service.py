"""
商品服务 - 查询、分页和按 ID 查找

本模块只包含业务逻辑，过滤细节委托给 goods_filters。
所有函数都接收显式的 Catalog，不依赖模块级全局状态。
"""

import logging
import math
from typing import Any, Dict, List

from ..models.catalog import Catalog
from ..models.goods_query import DEFAULT_PAGE_SIZE, GoodsQuery, PageResult
from ..models.result import Err, Ok, Result
from . import goods_filters as filters

logger = logging.getLogger(__name__)


def paginate(goods: List[Dict[str, Any]], page: int = 1,
             count: int = DEFAULT_PAGE_SIZE) -> PageResult:
    end = count * page
    start = 0 if page == 1 else end - count
    return PageResult(
        items=goods[start:end],
        page=page,
        pages=math.ceil(len(goods) / count),
        total_count=len(goods),
    )


def list_goods(catalog: Catalog, query: GoodsQuery) -> Result:
    """
    商品列表

    过滤顺序:
    - top: 随机推荐 8 个，直接返回（不分页）
    - gender -> category (需要 gender，否则 403) -> type
    - search: 在全部商品中重新按标题/描述搜索
    - list: 按 ID 列表返回（不分页）
    - 其余结果分页返回
    """
    logger.info("params: %s", query)

    if query.top:
        return Ok(filters.select_top(catalog.goods, query.top))

    data = list(catalog.goods)
    data = filters.filter_by_gender(data, query.gender)

    if query.category:
        if not query.gender:
            return Err.message(403, 'Not gender params')
        data = filters.filter_by_category(data, query.category)

    data = filters.filter_by_type(data, query.goods_type)

    if query.search:
        data = filters.search_goods(catalog.goods, query.search)

    if query.id_list:
        return Ok(filters.filter_by_id_list(catalog.goods, query.id_list))

    return Ok(paginate(data, query.page, query.count).to_dict())


def get_item(catalog: Catalog, item_id: str) -> Result:
    """按 ID 获取商品"""
    item = catalog.find(item_id)
    if item is None:
        return Err.message(404, 'Item Not Found')
    return Ok(item)
