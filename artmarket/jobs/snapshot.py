"""
Log a snapshot of an account's cart, wishlist and orders.

Logs in with the configured token and role, loads every collection once and
logs a summary line for each. Useful for checking credentials and API
reachability from a shell.
"""

import asyncio
import logging

from artmarket.config import Settings, settings
from artmarket.marketplace import Marketplace
from artmarket.storage import MemoryLocalStore

logger = logging.getLogger(__name__)


async def run_snapshot(config: Settings | None = None) -> dict[str, int]:
    """
    Load all collections for the configured account.

    Args:
        config: Settings to use. Defaults to the environment settings.

    Returns:
        Dict mapping collection name to its count

    Raises:
        ValueError: If no API token is configured
    """
    config = config or settings
    if not config.api_token:
        raise ValueError("No API token configured (set ARTMARKET_API_TOKEN)")

    # Credentials for a one-off run never touch the persistent store
    async with Marketplace(config=config, store=MemoryLocalStore()) as market:
        await market.session.log_in(config.api_token, config.role)

        summary = market.cart.summary
        logger.info(
            "Cart: %d item(s), subtotal %.2f, total %.2f",
            market.cart.count,
            summary.subtotal,
            summary.total,
        )
        logger.info(
            "Wishlist: %d item(s), value %.2f",
            market.wishlist.count,
            market.wishlist.total_value,
        )
        logger.info(
            "Orders: %d total, %d in progress, %d shipped, %d delivered",
            market.orders.count,
            len(market.orders.in_progress),
            len(market.orders.shipped),
            len(market.orders.delivered),
        )

        return {
            "cart": market.cart.count,
            "wishlist": market.wishlist.count,
            "orders": market.orders.count,
        }


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_snapshot())


if __name__ == "__main__":
    main()
