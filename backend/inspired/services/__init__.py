# Services package
#
# Module structure:
# - catalog_repository.py: dataset loading (db.json -> Catalog)
# - goods_service.py: listing, pagination and lookup by id
# - goods_filters.py: filtering, search and random top selection
# - env_utils.py: environment value parsing used by config

from .catalog_repository import load_catalog
from .goods_service import get_item, list_goods, paginate
from . import goods_filters

__all__ = [
    'load_catalog',
    'list_goods',
    'get_item',
    'paginate',
    'goods_filters',
]
