#!/usr/bin/env python3
"""
Seed the dashboard database from the static JSON asset.

Usage:
    python -m fleetboard.seed [path/to/seed.json]

Records are inserted only when their business key is absent, so the
seeder can be re-run safely. Stat tiles and pricing rules have no business
key and are replaced wholesale on every run.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.config import get_settings
from fleetboard.core.logging_config import configure_logging
from fleetboard.database import async_session_maker, init_db
from fleetboard.models import (
    Order,
    Driver,
    Vehicle,
    FleetItem,
    Payout,
    PricingRule,
    Stat,
    MonthlyPerformance,
    StatusDistribution,
)


logger = logging.getLogger("fleetboard.seed")


def load_seed_data(path: Path) -> Dict[str, Any]:
    """Read the seed asset."""
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


async def _insert_missing(
    db: AsyncSession,
    model,
    key_field: str,
    rows: Iterable[Dict[str, Any]],
) -> int:
    """Insert rows whose ``key_field`` value is not stored yet."""
    rows = list(rows)
    if not rows:
        return 0
    
    key_column = getattr(model, key_field)
    wanted = [row[key_field] for row in rows]
    result = await db.execute(select(key_column).where(key_column.in_(wanted)))
    existing = set(result.scalars().all())
    
    inserted = 0
    for row in rows:
        if row[key_field] in existing:
            continue
        db.add(model(**row))
        existing.add(row[key_field])
        inserted += 1
    return inserted


async def _replace_all(db: AsyncSession, model, rows: Iterable[Dict[str, Any]]) -> int:
    await db.execute(delete(model))
    count = 0
    for row in rows:
        db.add(model(**row))
        count += 1
    return count


def _positioned(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Copy report rows, recording their index in the asset as display order."""
    return [{**row, "position": index} for index, row in enumerate(rows)]


def _order_row(order: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "order_id": order["id"],
        "customer": order["customer"],
        "destination": order["destination"],
        "status": order["status"],
        "priority": order["priority"],
        "service_type": order.get("serviceType", "Standard Delivery"),
    }


def _driver_row(driver: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "driver_id": driver["id"],
        "name": driver["name"],
        "status": driver["status"],
        "rating": driver.get("rating", 0.0),
        "deliveries": driver.get("deliveries", 0),
        "experience": driver.get("experience"),
        "contact": driver.get("contact"),
        "avatar": driver.get("avatar"),
    }


def _vehicle_row(vehicle: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "vehicle_id": vehicle["id"],
        "type": vehicle["type"],
        "model": vehicle["model"],
        "capacity": vehicle.get("capacity"),
        "fuel_level": vehicle.get("fuelLevel"),
        "last_maintenance": vehicle.get("lastMaintenance"),
        "status": vehicle["status"],
        "vin": vehicle.get("vin"),
        "year": vehicle.get("year"),
        "mileage": vehicle.get("mileage"),
        "engine_status": vehicle.get("engineStatus"),
        "tire_pressure": vehicle.get("tirePressure"),
        "current_driver": vehicle.get("currentDriver"),
        "current_location": vehicle.get("currentLocation"),
    }


def _fleet_row(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "vehicle_id": item["id"],
        "status": item["status"],
        "location": item["location"],
        "latitude": item.get("latitude") or 0.0,
        "longitude": item.get("longitude") or 0.0,
        "driver": item.get("driver"),
        "load": item.get("load"),
    }


def _payout_row(payout: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "payout_id": payout["payoutId"],
        "driver": payout["driver"],
        "amount": payout["amount"],
        "status": payout["status"],
        "request_date": payout.get("requestDate"),
        "bank": payout.get("bank"),
        "account_end": payout.get("accountEnd"),
        "payout_type": payout.get("payoutType"),
        "wallet_total_balance": payout.get("walletTotalBalance"),
        "wallet_available_balance": payout.get("walletAvailableBalance"),
    }


def _pricing_row(rule: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": rule["name"],
        "type": rule["type"],
        "value": rule["value"],
        "region": rule["region"],
        "status": rule["status"],
        "last_updated": rule.get("lastUpdated"),
    }


async def seed_database(db: AsyncSession, data: Dict[str, Any]) -> Dict[str, int]:
    """
    Load every section of ``data`` into the store.
    
    Returns:
        Number of rows written per table
    """
    analytics = data.get("analytics", {})
    counts = {
        "orders": await _insert_missing(
            db, Order, "order_id", map(_order_row, data.get("orders", []))
        ),
        "drivers": await _insert_missing(
            db, Driver, "driver_id", map(_driver_row, data.get("drivers", []))
        ),
        "vehicles": await _insert_missing(
            db, Vehicle, "vehicle_id", map(_vehicle_row, data.get("vehicles", []))
        ),
        "fleet_items": await _insert_missing(
            db, FleetItem, "vehicle_id", map(_fleet_row, data.get("live_fleet", []))
        ),
        "payouts": await _insert_missing(
            db, Payout, "payout_id", map(_payout_row, data.get("payouts", []))
        ),
        "monthly_performance": await _insert_missing(
            db, MonthlyPerformance, "month", _positioned(analytics.get("monthlyPerformance", []))
        ),
        "status_distribution": await _insert_missing(
            db, StatusDistribution, "status", analytics.get("statusDistribution", [])
        ),
        "stats": await _replace_all(db, Stat, _positioned(data.get("stats", []))),
        "pricing_rules": await _replace_all(
            db, PricingRule, map(_pricing_row, data.get("pricing_rules", []))
        ),
    }
    await db.flush()
    return counts


async def run_seed(path: Path) -> Dict[str, int]:
    """Create tables and seed them inside one transaction."""
    data = load_seed_data(path)
    await init_db()
    async with async_session_maker() as db:
        counts = await seed_database(db, data)
        await db.commit()
    return counts


def main(argv: Optional[list] = None) -> int:
    """CLI entry point."""
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else get_settings().seed_data_path
    
    logger.info(f"Seeding database from {path}")
    try:
        counts = asyncio.run(run_seed(path))
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read seed data: {e}")
        return 1
    
    for table, count in counts.items():
        logger.info(f"  {table:<20} {count}")
    logger.info("Database seeded successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
