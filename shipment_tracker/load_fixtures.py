"""
Schema and fixture loading script.

Drops and recreates the four tables on the configured database, inserts the
fixture rows, then logs the verification reports.

    python -m shipment_tracker.load_fixtures
"""

import asyncio
import logging

from shipment_tracker.app.core.config import settings
from shipment_tracker.app.core.observability import configure_logging
from shipment_tracker.app.db.session import engine, AsyncSessionLocal
from shipment_tracker.app.services.reports import ReportService
from shipment_tracker.app.services.seeding import load_database, find_orphans

logger = logging.getLogger("shipment_tracker.load_fixtures")


async def run_reports(consignment_no: int) -> None:
    async with AsyncSessionLocal() as db:
        for row in await ReportService.row_count_summary(db):
            logger.info("%-15s %d", row.table_name, row.row_count)

        for row in await ReportService.shipment_listing(db):
            logger.info(
                "%d %s -> %s %s %s %s %s",
                row.consignment_no, row.sender_city, row.receiver_city,
                row.booking_mode.value, row.date_of_booking, row.charge_amount, row.courier_name,
            )

        for row in await ReportService.consignment_items(db, consignment_no):
            logger.info("%d %s (%s)", row.consignment_no, row.item_name, row.shipment_type)

        for row in await ReportService.tracking_history(db, consignment_no):
            logger.info(
                "%d %s -> %s: %s",
                row.consignment_no, row.sender_city, row.receiver_city, row.tracking_status.value,
            )

        orphans = await find_orphans(db)
        if any(orphans.values()):
            logger.error("Dangling references found", extra={"orphans": orphans})


async def main() -> None:
    configure_logging()
    try:
        counts = await load_database(engine, drop_existing=settings.drop_existing)
        logger.info("Loaded %s", ", ".join(f"{table}={n}" for table, n in counts.items()))
        await run_reports(settings.sample_consignment_no)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
