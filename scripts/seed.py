"""Database seeder: fills the products table with sample rows and gives
most of them a stock count."""
import argparse
import asyncio
import random
import time

from app.database import Base, async_session, engine
from app.models import Inventory, Product

CATEGORIES = ["Laptop", "Smartphone", "Tablet", "Monitor", "Keyboard", "Mouse",
              "Headphones", "Camera", "Printer", "Router", "Speaker", "Webcam"]


async def seed(count: int, reset: bool = False):
    print(f"Seeding {count} products")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        batch_size = 500
        for batch_start in range(0, count, batch_size):
            batch_end = min(batch_start + batch_size, count)
            products = [
                Product(
                    name=f"{random.choice(CATEGORIES)} Model {i:05d}",
                    price=round(random.uniform(5, 2500), 2),
                )
                for i in range(batch_start, batch_end)
            ]
            session.add_all(products)
            await session.flush()

            # Roughly one product in ten is left without a stock row.
            session.add_all(
                Inventory(product_id=p.id, quantity=random.randint(0, 500))
                for p in products
                if random.random() >= 0.1
            )
            await session.flush()
            print(f"  Batch {batch_start}-{batch_end}: products created")

        await session.commit()

    await engine.dispose()
    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the product database")
    parser.add_argument("--count", type=int, default=1000, help="Number of products to create")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate the tables first")
    args = parser.parse_args()
    asyncio.run(seed(args.count, reset=args.reset))


if __name__ == "__main__":
    main()
