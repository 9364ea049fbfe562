"""Example class module; its export and dependencies come from users_meta.yaml."""


class UserRepo:
    def __init__(self, connection):
        self.connection = connection

    def get(self, user_id: int) -> dict:
        return self.connection.fetch_user(user_id)
