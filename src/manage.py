"""Delivery database management CLI.

Usage:
    python src/manage.py setup-db    # Create all tables
    python src/manage.py drop-db     # Drop all tables
    python src/manage.py seed-menu   # List the starter dishes on the menu
"""

import argparse
import sys

# Starter menu; dishes already on the menu (by name) are skipped
MENU = [
    {
        "name": "Pad Thai",
        "description": "Rice noodles wok-fried with egg, tofu, peanuts and tamarind",
        "price": 11.5,
        "category": "Wok",
        "image": "pad-thai.jpg",
        "vegetarian": False,
    },
    {
        "name": "Vegetable Chow Mein",
        "description": "Egg noodles with crisp vegetables in soy and sesame",
        "price": 9.9,
        "category": "Wok",
        "image": "chow-mein.jpg",
        "vegetarian": True,
    },
    {
        "name": "Margherita",
        "description": "Tomato, mozzarella and basil",
        "price": 8.5,
        "category": "Pizza",
        "image": "margherita.jpg",
        "vegetarian": True,
    },
    {
        "name": "Pepperoni",
        "description": "Tomato, mozzarella and spicy pepperoni",
        "price": 10.0,
        "category": "Pizza",
        "image": "pepperoni.jpg",
        "vegetarian": False,
    },
    {
        "name": "Tom Yum",
        "description": "Hot and sour soup with shrimp and lemongrass",
        "price": 7.25,
        "category": "Soup",
        "image": "tom-yum.jpg",
        "vegetarian": False,
    },
    {
        "name": "Tiramisu",
        "description": "Mascarpone, espresso-soaked savoiardi and cocoa",
        "price": 5.5,
        "category": "Dessert",
        "image": "tiramisu.jpg",
        "vegetarian": True,
    },
    {
        "name": "Lemonade",
        "description": "Freshly squeezed, lightly sweetened",
        "price": 3.0,
        "category": "Drink",
        "image": "lemonade.jpg",
        "vegetarian": True,
    },
]


def setup_database():
    """Create the database schema for the delivery domain."""
    from delivery.domain import delivery
    from delivery.utils.db import setup_db

    print("Initializing delivery domain...")
    delivery.init()
    print("Creating delivery database schema...")
    setup_db(delivery)
    print("Done.")


def drop_database():
    """Drop the database schema of the delivery domain."""
    from delivery.domain import delivery
    from delivery.utils.db import drop_db

    print("Initializing delivery domain...")
    delivery.init()
    print("Dropping delivery database schema...")
    drop_db(delivery)
    print("Done.")


def seed_menu():
    from delivery.catalogue.menu import ListDish, list_dishes
    from delivery.domain import delivery

    delivery.init()
    with delivery.domain_context():
        listed = {dish.name for dish in list_dishes()}
        for item in MENU:
            if item["name"] in listed:
                print(f"  {item['name']} already on the menu, skipped.")
                continue
            delivery.process(ListDish(**item), asynchronous=False)
            print(f"  {item['name']} listed.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Delivery database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-menu", help="List the starter dishes on the menu")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-menu":
        seed_menu()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
