"""Database schema DDL — table definitions for the contact book."""

SCHEMA_DDL = """
-- ==========================================================================
-- Address Table
-- ==========================================================================
CREATE TABLE IF NOT EXISTS address (
    id      INTEGER PRIMARY KEY,
    street  TEXT NOT NULL,
    zip     TEXT NOT NULL,
    city    TEXT NOT NULL,
    phone   TEXT
);

-- ==========================================================================
-- Person Table (address is a plain reference, no cascade)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS person (
    id          INTEGER PRIMARY KEY,
    first_name  TEXT NOT NULL,
    last_name   TEXT NOT NULL,
    mobile      TEXT,
    address     INTEGER,
    FOREIGN KEY(address) REFERENCES address(id)
);
"""

# person references address, so it goes first
DROP_DDL = """
DROP TABLE IF EXISTS person;
DROP TABLE IF EXISTS address;
"""
