from app.repositories.product_repo import ProductRepository
from scripts.seed_products import seed


def test_seed_products(database, db):
    assert seed(database, 3) == 3
    products = ProductRepository(db).list()
    assert [(p.name, float(p.price)) for p in products] == [
        ("Product 0", 10.0),
        ("Product 1", 20.0),
        ("Product 2", 30.0),
    ]


def test_seed_reset_restarts_ids(database, db):
    seed(database, 2)
    seed(database, 1, reset=True)
    products = ProductRepository(db).list()
    assert [(p.id, p.name) for p in products] == [(1, "Product 0")]
