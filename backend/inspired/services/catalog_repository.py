"""
商品数据仓库 - 负责在启动时加载 db.json
"""

import json
import os
from typing import Union

from ..models.catalog import Catalog


def load_catalog(path: Union[str, os.PathLike]) -> Catalog:
    """Read the dataset file into an immutable ``Catalog``.

    A missing file or malformed JSON raises. An empty file, or a document
    that is not a JSON object, gives an empty catalog.
    """
    with open(path, 'r', encoding='utf-8') as f:
        raw = f.read()

    data = json.loads(raw or '{}')
    if not isinstance(data, dict):
        return Catalog()
    return Catalog.from_dict(data)
