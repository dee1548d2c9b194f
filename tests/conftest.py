import pytest

from inspired import create_app
from inspired.models import Catalog


def _item(item_id, gender, category, goods_type, top, title, description):
    return {
        "id": item_id,
        "title": title,
        "description": description,
        "gender": gender,
        "category": category,
        "type": goods_type,
        "top": top,
        "price": 1000,
    }


SAMPLE_GOODS = [
    _item("1", "women", "dress", "midi", True, "Summer dress", "Linen dress for hot days"),
    _item("2", "men", "dress", "maxi", False, "Kilt dress", "Wool dress for men"),
    _item("3", "women", "shirts", "blouse", True, "Silk blouse", "Shirt-cut blouse in silk"),
    _item("4", "women", "shirts", "tshirt", False, "Basic tee", "Cotton T-shirt"),
    _item("5", "men", "shirts", "oxford", True, "Oxford SHIRT", "Button-down collar"),
    _item("6", "men", "shirts", "tshirt", True, "Logo tee", "Tee with a printed shirt pocket"),
    _item("7", "men", "trousers", "chino", True, "Chinos", "Slim chinos"),
    _item("8", "women", "trousers", "jeans", True, "Mom jeans", "High waist jeans"),
    _item("9", "women", "socks", "socks", False, "Wool socks", "Warm socks"),
    _item("10", "men", "socks", "socks", False, "Sport socks", "Cushioned socks"),
    _item("11", "women", "dress", "maxi", True, "Maxi dress", "Floor length dress"),
]

SAMPLE_CATEGORIES = {"women": ["dress", "shirts", "trousers", "socks"], "men": ["dress", "shirts"]}
SAMPLE_COLORS = [{"id": 1, "title": "black"}, {"id": 2, "title": "white"}]


@pytest.fixture
def catalog():
    return Catalog.from_dict({
        "goods": SAMPLE_GOODS,
        "categories": SAMPLE_CATEGORIES,
        "colors": SAMPLE_COLORS,
    })


@pytest.fixture
def top_catalog():
    goods = [
        _item(str(i), "women", "dress", "midi", True, f"Dress {i}", "Top dress")
        for i in range(1, 13)
    ]
    goods.append(_item("m1", "men", "shirts", "tshirt", True, "Tee", "Top tee"))
    return Catalog.from_dict({"goods": goods})


@pytest.fixture
def app(catalog, tmp_path):
    class TestConfig:
        TESTING = True
        APP_ENV = "test"
        IMAGE_ROOT = str(tmp_path)

    return create_app(TestConfig, catalog=catalog)


@pytest.fixture
def client(app):
    return app.test_client()
