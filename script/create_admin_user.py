#!/usr/bin/env python3
"""
Admin User Script
Create an admin account, or reset the password of an existing one

Features:
1. New email    - insert an active admin with a bcrypt-hashed password
2. Known email  - replace the password hash and re-activate the admin

Usage:
    python script/create_admin_user.py --email admin@example.com --name "Site Admin"
    (the password is prompted for unless --password is given)
"""

import argparse
import asyncio
import getpass
import sys
from typing import Optional

from pydantic import SecretStr

from src.platform.database.orm_db_setting import Database
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_admin_user_use_case import CreateAdminUserUseCase
from src.service.ticketing.domain.entity.admin_user_entity import AdminRole
from src.service.ticketing.driven_adapter.repo.admin_user_command_repo_impl import (
    AdminUserCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.admin_user_query_repo_impl import (
    AdminUserQueryRepoImpl,
)
from src.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Create or reset an admin user')
    parser.add_argument('--email', required=True)
    parser.add_argument('--name', default='Administrator')
    parser.add_argument('--password', help='omit to be prompted')
    parser.add_argument(
        '--role', choices=[role.value for role in AdminRole], default=AdminRole.ADMIN.value
    )
    parser.add_argument('--database-url', help='defaults to the configured DATABASE_URL')
    return parser.parse_args(argv)


async def create_admin_user(
    *,
    email: str,
    password: SecretStr,
    name: str,
    role: AdminRole,
    database_url: Optional[str] = None,
) -> bool:
    """Returns True when a new admin was inserted, False when an existing one was reset."""
    database = Database(url=database_url)
    try:
        await database.create_tables()
        use_case = CreateAdminUserUseCase(
            admin_user_query_repo=AdminUserQueryRepoImpl(session_factory=database.session),
            admin_user_command_repo=AdminUserCommandRepoImpl(session_factory=database.session),
            password_hasher=BcryptPasswordHasher(),
        )
        _, created = await use_case.execute(email=email, password=password, name=name, role=role)
        return created
    finally:
        await database.dispose()


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)

    password = args.password or getpass.getpass('Admin password: ')
    if not password:
        Logger.base.error('❌ Password must not be empty')
        return 1

    created = asyncio.run(
        create_admin_user(
            email=args.email,
            password=SecretStr(password),
            name=args.name,
            role=AdminRole(args.role),
            database_url=args.database_url,
        )
    )
    if created:
        Logger.base.info(f'✅ Admin user {args.email} created')
    else:
        Logger.base.info(f'✅ Admin user {args.email} password updated and re-activated')
    return 0


if __name__ == '__main__':
    sys.exit(main())
