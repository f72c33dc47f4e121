#!/usr/bin/env python3
"""
Database Reset Script
Drop and recreate every table

Notes:
- Wipes events, bookings and admin users
- Run `python script/create_admin_user.py` afterwards to get an admin back
"""

import asyncio
import time

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger


async def reset_database() -> None:
    database = Database()
    try:
        await database.drop_tables()
        Logger.base.info('🗑️  Tables dropped')
        await database.create_tables()
        Logger.base.info('🏗️  Tables created')
    finally:
        await database.dispose()


def main() -> None:
    start = time.perf_counter()
    Logger.base.info('🚀 Resetting database...')
    asyncio.run(reset_database())
    Logger.base.info(f'✅ Database reset in {time.perf_counter() - start:.2f}s')


if __name__ == '__main__':
    main()
