"""Tests for query codec API endpoints."""


class TestQueryEndpoints:
    """Tests for /api/query endpoints."""

    def test_parse(self, client):
        """Parsed values come back as strings and lists."""
        response = client.get("/api/query/parse", params={"q": "?category=A&category=B&sort=newest"})
        assert response.status_code == 200
        assert response.json() == {"category": ["A", "B"], "sort": "newest"}

    def test_toggle(self, client):
        """Toggle promotes a scalar to a list."""
        response = client.post("/api/query/toggle", json={
            "query": "category=Kitchen",
            "key": "category",
            "value": "Bath",
        })
        assert response.status_code == 200
        assert response.json() == {"query": "category=Kitchen&category=Bath"}

    def test_toggle_requires_value(self, client):
        """Missing value is a bad request."""
        response = client.post("/api/query/toggle", json={"query": "", "key": "category"})
        assert response.status_code == 400

    def test_remove(self, client):
        """Remove drops a whole key."""
        response = client.post("/api/query/remove", json={
            "query": "price_min=100&price_max=500",
            "key": "price_min",
        })
        assert response.json() == {"query": "price_max=500"}

    def test_update(self, client):
        """Update replaces the sort key."""
        response = client.post("/api/query/update", json={
            "query": "sort=featured",
            "patch": {"sort": "price_asc"},
        })
        assert response.json() == {"query": "sort=price_asc"}

    def test_update_requires_patch(self, client):
        """Missing patch is a bad request."""
        response = client.post("/api/query/update", json={"query": "sort=featured"})
        assert response.status_code == 400

    def test_clear(self, client):
        """Clear keeps unrelated keys."""
        response = client.post("/api/query/clear", json={"query": "category=Kitchen&sort=newest&foo=bar"})
        assert response.json() == {"query": "foo=bar"}

    def test_price_range(self, client):
        """Slider positions at the catalog bounds clear the price filter."""
        facets = client.get("/api/products/facets").json()
        response = client.post("/api/query/price-range", json={
            "query": "category=Kitchen&price_min=2000",
            "low": facets["price"]["min"],
            "high": facets["price"]["max"],
        })
        assert response.json() == {"query": "category=Kitchen"}

    def test_price_range_rejects_inverted(self, client):
        """Low above high is a bad request."""
        response = client.post("/api/query/price-range", json={"query": "", "low": 10, "high": 1})
        assert response.status_code == 400
