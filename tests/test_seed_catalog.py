"""Tests for the catalog seed script."""

import duckdb


class TestSeedCatalog:
    """Tests for scripts/seed_catalog.py."""

    def test_seed_sample_catalog(self):
        """The built-in sample catalog loads into an empty database."""
        from api.services.database import DatabaseService
        from scripts.seed_catalog import load_frames, seed

        db = DatabaseService(connection=duckdb.connect(":memory:"))
        counts = seed(db, load_frames(None))

        assert counts == {"stores": 3, "products": 4, "orders": 3}
        db.close()

    def test_seed_reset_replaces_rows(self):
        """Reset deletes rows before loading."""
        from api.services.database import DatabaseService
        from scripts.seed_catalog import load_frames, seed

        db = DatabaseService(connection=duckdb.connect(":memory:"))
        seed(db, load_frames(None))
        counts = seed(db, load_frames(None), reset=True)

        assert counts["products"] == 4
        db.close()

    def test_seed_from_csv(self, tmp_path):
        """CSV files in the seed directory replace the samples."""
        from api.services.database import DatabaseService
        from scripts.seed_catalog import load_frames, seed

        (tmp_path / "products.csv").write_text(
            "id,name,price,category,created_at\n"
            "p1,Mug,350,Kitchen,2024-01-01 00:00:00\n"
        )

        db = DatabaseService(connection=duckdb.connect(":memory:"))
        counts = seed(db, load_frames(tmp_path))

        assert counts["products"] == 1
        assert counts["stores"] == 3
        db.close()

    def test_failed_seed_keeps_nothing(self):
        """A constraint failure rolls back every table, including earlier ones."""
        import pandas as pd
        import pytest
        from api.services.database import DatabaseService
        from scripts.seed_catalog import SAMPLE_STORES, load_frames, seed

        db = DatabaseService(connection=duckdb.connect(":memory:"))
        seed(db, load_frames(None))

        frames = load_frames(None)
        frames["stores"] = pd.DataFrame([
            {"id": "store_9", "name": "Late Shop", "status": "pending", "is_active": False},
        ])
        with pytest.raises(duckdb.ConstraintException):
            seed(db, frames)

        conn = db.connect()
        assert conn.execute("SELECT COUNT(*) FROM stores").fetchone()[0] == len(SAMPLE_STORES)
        assert conn.execute("SELECT COUNT(*) FROM stores WHERE id = 'store_9'").fetchone()[0] == 0
        db.close()

    def test_failed_reset_restores_deleted_rows(self):
        """Rows deleted by reset come back when the load fails."""
        import pandas as pd
        import pytest
        from api.services.database import DatabaseService
        from scripts.seed_catalog import SAMPLE_PRODUCTS, load_frames, seed

        db = DatabaseService(connection=duckdb.connect(":memory:"))
        seed(db, load_frames(None))

        frames = load_frames(None)
        frames["products"] = pd.concat([SAMPLE_PRODUCTS, SAMPLE_PRODUCTS.head(1)])
        with pytest.raises(duckdb.ConstraintException):
            seed(db, frames, reset=True)

        conn = db.connect()
        assert conn.execute("SELECT COUNT(*) FROM products").fetchone()[0] == len(SAMPLE_PRODUCTS)
        assert conn.execute("SELECT COUNT(*) FROM stores").fetchone()[0] == 3
        db.close()
