"""Example module exporting a factory through __export__."""


def make_greeter(settings, users):
    def greet(user_id: int) -> str:
        user = users.get(user_id)
        return f"{settings['greeting']}, {user['name']}!"

    return greet


__export__ = make_greeter
