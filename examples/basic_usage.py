"""Store audit log entries and page through them newest first."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from typing import ClassVar

from scanstore import Storable, open_storage
from scanstore.models import QueryLeaf, and_, or_
from scanstore.renderers import render_listing
from scanstore.storage import ListFacade


class ChangeLogEntry(Storable):
    kind: ClassVar[str] = "change_log"

    time: datetime
    action: str
    context: dict[str, object] = {}


async def main() -> None:
    async with open_storage("sqlite://./example-data") as storage:
        start = datetime(2024, 1, 1, tzinfo=UTC)
        for day, (action, email) in enumerate(
            [
                ("create", "ada@example.com"),
                ("update", "grace@example.com"),
                ("delete", "ada@example.com"),
                ("update", "linus@example.com"),
            ]
        ):
            await storage.save(
                ChangeLogEntry(
                    id=f"entry-{day}",
                    time=start + timedelta(days=day),
                    action=action,
                    context={"account": {"email": email}},
                )
            )

        query = and_(
            QueryLeaf(path="time", op="gt", value=start),
            or_(
                QueryLeaf(path="context.account.email", value="ada@example.com"),
                QueryLeaf(path="context.account.email", value="grace@example.com"),
            ),
        )
        page = await ListFacade(storage).list(
            ChangeLogEntry,
            limit=50,
            query=query,
            order_by="time",
            order_by_direction="desc",
        )
        print(render_listing(page, columns=["id", "time", "action", "context.account.email"]))


if __name__ == "__main__":
    asyncio.run(main())
