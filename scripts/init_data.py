#!/usr/bin/env python3
"""
Standalone data initialization script
Creates the meal catalog and an empty orders file under the data directory
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings

logger = logging.getLogger("foodorder.scripts.init_data")

SAMPLE_MEALS = [
    {
        "id": "m1",
        "name": "Mac & Cheese",
        "price": 8.99,
        "description": "Creamy cheddar cheese mixed with perfectly cooked macaroni, topped with crispy breadcrumbs.",
        "image": "images/mac-and-cheese.jpg",
    },
    {
        "id": "m2",
        "name": "Margherita Pizza",
        "price": 12.99,
        "description": "A classic pizza with fresh mozzarella, tomatoes, and basil on a thin and crispy crust.",
        "image": "images/margherita-pizza.jpg",
    },
    {
        "id": "m3",
        "name": "Caesar Salad",
        "price": 7.99,
        "description": "Romaine lettuce tossed in Caesar dressing, topped with croutons and parmesan shavings.",
        "image": "images/caesar-salad.jpg",
    },
    {
        "id": "m4",
        "name": "Sushi Roll Platter",
        "price": 15.99,
        "description": "An assortment of fresh sushi rolls including California, Spicy Tuna, and Vegetable rolls.",
        "image": "images/sushi-roll-platter.jpg",
    },
    {
        "id": "m5",
        "name": "Chicken Curry",
        "price": 13.99,
        "description": "Tender chicken pieces simmered in a rich and aromatic curry sauce, served with rice.",
        "image": "images/chicken-curry.jpg",
    },
]


def init_data(data_dir: Path, reset_orders: bool = False, overwrite_meals: bool = False) -> dict:
    """
    Create the data files if they are missing.

    Args:
        data_dir: Directory for the JSON files
        reset_orders: Truncate orders.json to an empty list even if it exists
        overwrite_meals: Replace an existing catalog with the sample meals

    Returns:
        Which files were written, e.g. {"meals": True, "orders": False}
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    meals_path = data_dir / settings.meals_file
    orders_path = data_dir / settings.orders_file
    written = {"meals": False, "orders": False}

    if overwrite_meals or not meals_path.exists():
        meals_path.write_text(json.dumps(SAMPLE_MEALS, indent=2), encoding="utf-8")
        written["meals"] = True
        logger.info("Wrote %d sample meals to %s", len(SAMPLE_MEALS), meals_path)

    if reset_orders or not orders_path.exists():
        orders_path.write_text("[]", encoding="utf-8")
        written["orders"] = True
        logger.info("Initialized empty orders file %s", orders_path)

    return written


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize FoodOrder data files")
    parser.add_argument("--data-dir", type=Path, default=settings.data_dir)
    parser.add_argument("--reset-orders", action="store_true", help="empty orders.json")
    parser.add_argument(
        "--overwrite-meals", action="store_true", help="replace the meal catalog"
    )
    args = parser.parse_args(argv)

    try:
        written = init_data(args.data_dir, args.reset_orders, args.overwrite_meals)
    except OSError as e:
        logger.error("Could not initialize data files: %s", e)
        return 1

    print("\n" + "=" * 60)
    print(f"FoodOrder data directory: {args.data_dir}")
    for name, changed in written.items():
        print(f"  • {name}: {'written' if changed else 'kept'}")
    print("=" * 60 + "\n")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=settings.log_format)
    sys.exit(main())
