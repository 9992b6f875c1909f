"""
Basic maybe: construction, chaining, batch combinators and tracing.

Run: python examples/basic_maybe.py
"""
from maybepy import some, none, of_nullable, traverse, map_n, traced, default_logger


USERS = {1: {"name": "ada", "email": "ada@example.com"}, 2: {"name": "bob"}}


def find_user(user_id):
    return of_nullable(USERS.get(user_id))


def email_of(user_id):
    return find_user(user_id).flat_map(lambda u: of_nullable(u.get("email")))


def main():
    default_logger.set_level("DEBUG")

    # Chain map/filter/flat_map, then leave the container
    name = traced(find_user(1), "user 1").map(lambda u: u["name"].title())
    print("name =>", name.value_or_default("anonymous"))                 # Ada
    print("email 2 =>", email_of(2).value_or_get(lambda: "<missing>"))     # <missing>

    # Handle both cases at once
    print(email_of(1).match(some=lambda e: f"mail {e}", none=lambda: "no mail"))

    # Collect what can be found, none only if nothing was
    print("emails =>", traverse([1, 2, 3], email_of))                     # Some(value=['ada@example.com'])
    print("emails =>", traverse([2, 3], email_of))                        # Nothing

    # All-or-nothing over several optional arguments
    print("sum =>", map_n(lambda a, b: a + b, some(1), some(2)))          # Some(value=3)
    print("sum =>", map_n(lambda a, b: a + b, some(1), none()))           # Nothing


if __name__ == "__main__":
    main()
