import random
import unittest
from decimal import Decimal

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database.base import Base
from app.database.engine import build_engine
from app.dependencies import get_db, get_price_rng
from app.main import app


class ProductsApiTest(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        Base.metadata.create_all(bind=self.engine)
        TestingSession = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

        def override_get_db():
            db = TestingSession()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_price_rng] = lambda: random.Random(11)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def _create_product(self, **overrides):
        payload = {
            "name": "Harbor Lighthouse",
            "description": "Modular lighthouse",
            "netto_price": "10.00",
            "category": "Architecture",
        }
        payload.update(overrides)
        response = self.client.post("/products", json=payload)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "ok")

    def test_create_product_starts_without_stock(self):
        product = self._create_product(in_stock=50)
        self.assertEqual(product["in_stock"], 0)
        self.assertEqual(Decimal(product["netto_price"]), Decimal("10.00"))

    def test_purchase_delivery_and_sale_flow(self):
        product = self._create_product()
        product_id = product["id"]

        response = self.client.post(
            "/products/{}/purchases".format(product_id),
            json={"quantity": 5, "expected_delivery": "2026-03-01"},
        )
        self.assertEqual(response.status_code, 201, response.text)
        purchase = response.json()
        self.assertFalse(purchase["delivered"])
        self.assertTrue(Decimal("9.00") <= Decimal(purchase["unit_price"]) <= Decimal("11.00"))

        response = self.client.post("/purchases/{}/deliver".format(purchase["id"]))
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["delivered"])

        response = self.client.post("/purchases/{}/deliver".format(purchase["id"]))
        self.assertEqual(response.status_code, 200)

        response = self.client.post(
            "/products/{}/sales".format(product_id),
            json={
                "quantity": 3,
                "unit_price": "12.00",
                "buyer_company": "Acme",
                "sale_date": "2026-03-05",
            },
        )
        self.assertEqual(response.status_code, 201, response.text)

        response = self.client.post(
            "/products/{}/sales".format(product_id),
            json={
                "quantity": 5,
                "unit_price": "12.00",
                "buyer_company": "Acme",
                "sale_date": "2026-03-06",
            },
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "Not enough stock available for this sale.")

        detail = self.client.get("/products/{}".format(product_id)).json()
        self.assertEqual(detail["in_stock"], 2)
        self.assertEqual(len(detail["purchases"]), 1)
        self.assertEqual(len(detail["sales"]), 1)
        self.assertEqual(Decimal(detail["sales"][0]["unit_price"]), Decimal("12.00"))

    def test_delete_purchase(self):
        product_id = self._create_product()["id"]
        purchase = self.client.post(
            "/products/{}/purchases".format(product_id),
            json={"quantity": 2, "expected_delivery": "2026-03-01"},
        ).json()

        response = self.client.delete("/purchases/{}".format(purchase["id"]))
        self.assertEqual(response.status_code, 204)

        response = self.client.delete("/purchases/{}".format(purchase["id"]))
        self.assertEqual(response.status_code, 404)

    def test_update_price_and_version_conflict(self):
        product = self._create_product()
        url = "/products/{}/price".format(product["id"])

        response = self.client.post(url, json={"netto_price": "15.50", "version": product["version"]})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(Decimal(response.json()["netto_price"]), Decimal("15.50"))

        response = self.client.post(url, json={"netto_price": "16.00", "version": product["version"]})
        self.assertEqual(response.status_code, 409)

        detail = self.client.get("/products/{}".format(product["id"])).json()
        self.assertEqual(Decimal(detail["netto_price"]), Decimal("15.50"))

    def test_update_product_metadata(self):
        product = self._create_product()
        response = self.client.put(
            "/products/{}".format(product["id"]),
            json={"name": "Harbor Lighthouse XL", "category": "Maritime"},
        )
        self.assertEqual(response.status_code, 200, response.text)
        body = response.json()
        self.assertEqual(body["name"], "Harbor Lighthouse XL")
        self.assertEqual(body["category"], "Maritime")
        self.assertEqual(body["description"], "Modular lighthouse")
        self.assertEqual(body["in_stock"], 0)

    def test_update_product_clears_image_link(self):
        product = self._create_product(image_link="https://example.com/lighthouse.png")
        url = "/products/{}".format(product["id"])

        response = self.client.put(url, json={"description": "Lighthouse with lamp"})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["image_link"], "https://example.com/lighthouse.png")

        response = self.client.put(url, json={"image_link": None})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertIsNone(response.json()["image_link"])
        self.assertEqual(response.json()["description"], "Lighthouse with lamp")

        response = self.client.put(url, json={"name": None})
        self.assertEqual(response.status_code, 422)

    def test_app_registers_ledger_tables(self):
        self.assertTrue({"products", "purchases", "sales"} <= set(Base.metadata.tables))

    def test_list_products_with_filters(self):
        self._create_product()
        self._create_product(name="Lunar Rover", description="Rover", netto_price="19.99", category="Space")

        body = self.client.get("/products").json()
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["categories"], ["Architecture", "Space"])

        body = self.client.get("/products", params={"category": "Space"}).json()
        self.assertEqual([p["name"] for p in body["results"]], ["Lunar Rover"])
        self.assertEqual(body["categories"], ["Architecture", "Space"])

        body = self.client.get("/products", params={"stock": "in"}).json()
        self.assertEqual(body["count"], 0)

        body = self.client.get("/products", params={"min_price": "10.00", "max_price": "10.00"}).json()
        self.assertEqual([p["name"] for p in body["results"]], ["Harbor Lighthouse"])

        response = self.client.get("/products", params={"stock": "sometimes"})
        self.assertEqual(response.status_code, 422)

        self.assertEqual(self.client.get("/products/categories").json(), ["Architecture", "Space"])

    def test_validation_and_not_found(self):
        product_id = self._create_product()["id"]

        response = self.client.post(
            "/products/{}/purchases".format(product_id),
            json={"quantity": 0, "expected_delivery": "2026-03-01"},
        )
        self.assertEqual(response.status_code, 422)

        response = self.client.post(
            "/products/{}/sales".format(product_id),
            json={"quantity": 1, "unit_price": "1.00", "buyer_company": "", "sale_date": "2026-03-01"},
        )
        self.assertEqual(response.status_code, 422)

        self.assertEqual(self.client.get("/products/999").status_code, 404)
        self.assertEqual(self.client.post("/purchases/999/deliver").status_code, 404)
        response = self.client.post("/products/999/price", json={"netto_price": "1.00"})
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
