"""Key-value slot table - holds the serialized analytics blob."""

KV_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key VARCHAR PRIMARY KEY,
    data VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""
