"""
composite_index — Hello World

Four string parts make one key. Create never overwrites,
update never creates, search turns absence into NotFoundError.
"""

import asyncio
import logging

from composite_index import IndexService, NotFoundError, ServiceConfig


async def main():
    logging.basicConfig(level=logging.DEBUG)

    # ──────────────────────────────────────
    #  1. Build the service (in-memory store by default)
    # ──────────────────────────────────────
    svc = IndexService.from_config(ServiceConfig())
    svc.boot()

    # ──────────────────────────────────────
    #  2. Create, then try to create again
    # ──────────────────────────────────────
    await svc.create("users", "email", "id", "alice@acme.com", "u-1")
    await svc.create("users", "email", "id", "alice@acme.com", "u-999")
    print("search  ->", await svc.search("users", "email", "id", "alice@acme.com"))

    # ──────────────────────────────────────
    #  3. Update an existing entry, then a missing one
    # ──────────────────────────────────────
    await svc.update("users", "email", "id", "alice@acme.com", "u-2")
    print("updated ->", await svc.search("users", "email", "id", "alice@acme.com"))

    try:
        await svc.update("users", "email", "id", "bob@acme.com", "u-3")
    except NotFoundError as exc:
        print("update  ->", exc)

    # ──────────────────────────────────────
    #  4. Delete and check
    # ──────────────────────────────────────
    await svc.delete("users", "email", "id", "alice@acme.com")
    print("exists  ->", await svc.exists("users", "email", "id", "alice@acme.com"))

    svc.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
