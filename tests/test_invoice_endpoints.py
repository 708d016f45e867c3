def test_get_invoice(client):
    response = client.get("/v1/invoices/42")

    assert response.status_code == 200
    data = response.json()
    assert data["invoice"]["number"].startswith("KA-")
    assert data["invoice"]["number"].endswith("/0042")
    assert data["invoice"]["date"] == "01 Oct 2026"
    assert len(data["items"]) == 2
    assert data["grand_total"] == 294.9
    assert data["taxable_value"] == 230.0
    assert data["total_tax"] == 34.9
    assert data["amount_in_words"] == "Rupees Two Hundred and Ninety-Five Only"
    assert data["company"]["name"] == "KAUTHUK"


def test_get_missing_invoice(client):
    response = client.get("/v1/invoices/404")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "INVOICE_NOT_FOUND"
    assert error["details"] == {"order_id": 404}
    assert error["request_id"] == response.headers["X-Request-Id"]


def test_generate_draft_invoice(client):
    payload = {
        "customer_name": "Walk-in",
        "items": [{"rate": 100, "quantity": 2, "tax_rate_percent": 18, "description": "Diya"}],
        "additional": {"shipping": 0, "adjustment": -50},
    }
    response = client.post("/v1/invoices", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["buyer"]["name"] == "Walk-in"
    assert data["invoice"]["supplier_ref"] == "Draft Order"
    assert data["items"][0]["description"] == "Diya"
    assert data["grand_total"] == 186.0


def test_update_invoice(client):
    current = client.get("/v1/invoices/42").json()
    payload = {
        "items": current["items"],
        "additional": {"shipping": 0, "adjustment": 0, "round_off": 0.1},
        "terms": "Net 15",
    }
    response = client.patch("/v1/invoices/42", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["items"] == current["items"]
    assert data["terms"] == "Net 15"
    assert data["grand_total"] == 265.0
    assert data["amount_in_words"] == "Rupees Two Hundred and Sixty-Five Only"


def test_update_missing_invoice(client):
    response = client.patch("/v1/invoices/404", json={"terms": "Net 15"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"
