def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json()["status"] == "healthy"


# ---------------------------------------------------------------------------
# productos
# ---------------------------------------------------------------------------


def test_list_products(client):
    response = client.get("/api/v1/products")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()["data"]] == [5, 6, 7]


def test_create_product(client):
    response = client.post("/api/v1/products", json={"name": "Monitor", "price": 120.5, "stock": 3})

    assert response.status_code == 201
    product = response.json()["data"]
    assert product["name"] == "Monitor"
    assert product["price"] == 120.5
    assert client.get(f"/api/v1/products/{product['id']}").status_code == 200


def test_create_product_requires_fields(client):
    assert client.post("/api/v1/products", json={"name": "Monitor"}).status_code == 422
    assert client.post("/api/v1/products", json={"name": " ", "price": 1, "stock": 1}).status_code == 422
    assert client.post("/api/v1/products", json={"name": "X", "price": -1, "stock": 1}).status_code == 422
    assert client.post("/api/v1/products", json={"name": "X", "price": 1, "stock": -1}).status_code == 422


def test_update_product_replaces_given_fields(client):
    response = client.put("/api/v1/products/5", json={"price": 11.0, "stock": 40})

    assert response.status_code == 200
    product = response.json()["data"]
    assert product == {"id": 5, "name": "Teclado", "price": 11.0, "stock": 40}


def test_update_missing_product(client):
    response = client.put("/api/v1/products/999", json={"name": "X"})

    assert response.status_code == 404
    assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"


def test_delete_product(client):
    assert client.delete("/api/v1/products/6").status_code == 204
    assert client.get("/api/v1/products/6").status_code == 404
    assert client.delete("/api/v1/products/6").status_code == 404


def test_delete_product_used_in_a_sale_is_rejected(client):
    sale = {"customer_id": 1, "items": [{"product_id": 6, "quantity": 1, "subtotal": 4.5}]}
    assert client.post("/api/v1/sales", json=sale).status_code == 201

    response = client.delete("/api/v1/products/6")

    assert response.status_code == 500
    assert response.json()["error_code"] == "STORE_ERROR"
    assert client.get("/api/v1/products/6").status_code == 200


# ---------------------------------------------------------------------------
# clientes
# ---------------------------------------------------------------------------


def test_customer_crud(client):
    created = client.post("/api/v1/customers", json={"name": "Carla", "email": "carla@example.com"})
    assert created.status_code == 201
    customer_id = created.json()["data"]["id"]

    updated = client.put(f"/api/v1/customers/{customer_id}", json={"email": "c@example.com"})
    assert updated.json()["data"] == {"id": customer_id, "name": "Carla", "email": "c@example.com"}

    assert client.delete(f"/api/v1/customers/{customer_id}").status_code == 204
    assert client.get(f"/api/v1/customers/{customer_id}").status_code == 404


def test_create_customer_requires_name_and_email(client):
    assert client.post("/api/v1/customers", json={"name": "Carla"}).status_code == 422
    assert client.post("/api/v1/customers", json={"name": "Carla", "email": ""}).status_code == 422


def test_get_missing_customer(client):
    response = client.get("/api/v1/customers/999")

    assert response.status_code == 404
    assert response.json()["message"] == "Cliente 999 no encontrado"


def test_delete_customer_with_sales_is_rejected(client):
    sale = {"customer_id": 2, "items": [{"product_id": 5, "quantity": 1, "subtotal": 10.0}]}
    assert client.post("/api/v1/sales", json=sale).status_code == 201

    response = client.delete("/api/v1/customers/2")

    assert response.status_code == 500
    assert client.get("/api/v1/customers").json()["count"] == 2
