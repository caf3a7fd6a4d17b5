"""Aggregations behind the admin analytics charts."""

from typing import Any, Dict, List

import pandas as pd

from config.logging_config import get_logger

logger = get_logger("store_metrics")


def store_performance(
    stores: pd.DataFrame,
    orders: pd.DataFrame,
    products: pd.DataFrame,
) -> List[Dict[str, Any]]:
    """
    Order count, revenue and product count per store.

    Args:
        stores: DataFrame with ``id`` and ``name``.
        orders: DataFrame with ``store_id`` and ``total``.
        products: DataFrame with ``store_id``.

    Returns:
        One dict per store, in store order, with name, orders, revenue, products.
    """
    if stores.empty:
        return []

    order_stats = (
        orders.groupby("store_id")["total"].agg(["count", "sum"])
        if not orders.empty
        else pd.DataFrame(columns=["count", "sum"])
    )
    product_counts = (
        products.groupby("store_id").size()
        if not products.empty
        else pd.Series(dtype="int64")
    )

    df = stores[["id", "name"]].copy()
    df["orders"] = df["id"].map(order_stats["count"]).fillna(0).astype(int)
    df["revenue"] = df["id"].map(order_stats["sum"]).fillna(0.0).astype(float)
    df["products"] = df["id"].map(product_counts).fillna(0).astype(int)

    return df[["name", "orders", "revenue", "products"]].to_dict("records")


def store_status_distribution(stores: pd.DataFrame) -> List[Dict[str, Any]]:
    """Count stores per status, with capitalized status names for the pie chart."""
    if stores.empty:
        return []

    counts = stores["status"].value_counts(sort=False)
    return [
        {"name": str(status).capitalize(), "value": int(count)}
        for status, count in counts.items()
    ]


def sales_overview(orders: pd.DataFrame, products: pd.DataFrame) -> Dict[str, Any]:
    """Total revenue, order count and product count for the dashboard cards."""
    revenue = float(orders["total"].sum()) if not orders.empty else 0.0
    return {
        "revenue": revenue,
        "orders": int(len(orders)),
        "products": int(len(products)),
    }


def store_overview(stores: pd.DataFrame) -> Dict[str, int]:
    """Total, active and pending store counts."""
    if stores.empty:
        return {"total": 0, "active": 0, "pending": 0}

    return {
        "total": int(len(stores)),
        "active": int(stores["is_active"].fillna(False).astype(bool).sum()),
        "pending": int((stores["status"] == "pending").sum()),
    }


def sales_by_date(orders: pd.DataFrame) -> List[Dict[str, Any]]:
    """Sum order totals per calendar day, oldest first."""
    if orders.empty:
        return []

    df = orders[["created_at", "total"]].copy()
    df["date"] = pd.to_datetime(df["created_at"]).dt.date
    daily = df.groupby("date")["total"].sum().sort_index()

    logger.debug(f"Aggregated {len(orders)} orders into {len(daily)} days")
    return [
        {"date": day.isoformat(), "sales": float(total)}
        for day, total in daily.items()
    ]


def products_by_category(products: pd.DataFrame) -> List[Dict[str, Any]]:
    """Number of products per category, in first-seen order."""
    if products.empty:
        return []

    counts = products["category"].value_counts(sort=False)
    return [
        {"name": category, "products": int(count)}
        for category, count in counts.items()
    ]
