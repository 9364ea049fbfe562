"""Example factory module: an async connection built from settings."""


class Connection:
    """Stand-in for a real database connection."""

    def __init__(self, dsn: str) -> None:
        self.dsn = dsn

    def fetch_user(self, user_id: int) -> dict:
        return {"id": user_id, "name": f"user-{user_id}"}


async def db(settings):
    return Connection(settings["dsn"])
