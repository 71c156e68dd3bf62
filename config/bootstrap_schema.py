# SqliteTypes/config/bootstrap_schema.py

# --- Demo Schema ---
# Applied on every run before introspection. Both statements are no-ops
# once the tables exist.

CREATE_PEOPLE_TABLE = """
CREATE TABLE IF NOT EXISTS people (
    id integer PRIMARY KEY AUTOINCREMENT,
    first_name text NOT NULL,
    last_name text NOT NULL,
    is_child integer
)
"""

CREATE_ITEMS_TABLE = """
CREATE TABLE IF NOT EXISTS items (
    id integer PRIMARY KEY AUTOINCREMENT,
    name text NOT NULL,
    owner integer,
    FOREIGN KEY(owner) REFERENCES people(id)
)
"""

# Order matters: items references people.
BOOTSTRAP_STATEMENTS = [CREATE_PEOPLE_TABLE, CREATE_ITEMS_TABLE]
