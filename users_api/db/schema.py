# users_api/db/schema.py

from sqlalchemy import JSON, Column, MetaData, String, Table


def build_users_table(name: str = "users") -> Table:
    """One row per document: generated id plus the document body as JSON."""
    metadata = MetaData()
    return Table(
        name,
        metadata,
        Column("id", String(20), primary_key=True),
        Column("data", JSON, nullable=False),
    )
