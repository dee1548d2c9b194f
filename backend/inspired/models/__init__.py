from .catalog import Catalog
from .goods_query import GoodsQuery, PageResult
from .result import Err, Ok, Result

__all__ = [
    'Catalog',
    'GoodsQuery',
    'PageResult',
    'Ok',
    'Err',
    'Result',
]
