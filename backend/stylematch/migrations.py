"""
Idempotent index migration for the tables the suggestion query reads.

Runs on startup; can also be run by hand:

    cd backend
    python -m stylematch.migrations
"""
import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

INDEXES = [
    {
        "name": "ix_partner_garments_eligible",
        "table": "partner_garments",
        "sql": """
            CREATE INDEX ix_partner_garments_eligible
            ON partner_garments(owner_id, created_at)
            WHERE visibility = 'public' AND stock > 0
        """,
        "description": "Partial index over garments that can be suggested",
    },
    {
        "name": "ix_partner_garments_category_color",
        "table": "partner_garments",
        "sql": """
            CREATE INDEX ix_partner_garments_category_color
            ON partner_garments(category, color)
        """,
        "description": "Composite index for category and color filtering",
    },
    {
        "name": "ix_partners_approved",
        "table": "partners",
        "sql": """
            CREATE INDEX ix_partners_approved
            ON partners(id)
            WHERE is_approved = true
        """,
        "description": "Partial index over approved partners",
    },
]


def get_existing_indexes(conn, table_name: str) -> set:
    """Get set of existing index names for a table"""
    insp = inspect(conn)
    return {idx["name"] for idx in insp.get_indexes(table_name)}


def ensure_indexes(engine: Engine) -> int:
    """Create any missing suggestion indexes; returns how many were created."""
    created = 0
    with engine.connect() as conn:
        tables = set(inspect(conn).get_table_names())
        for idx_info in INDEXES:
            if idx_info["table"] not in tables:
                logger.warning(f"Skipping index '{idx_info['name']}': table '{idx_info['table']}' missing")
                continue
            if idx_info["name"] in get_existing_indexes(conn, idx_info["table"]):
                continue
            conn.execute(text(idx_info["sql"]))
            conn.commit()
            logger.info(f"Created index '{idx_info['name']}' - {idx_info['description']}")
            created += 1
    return created


if __name__ == "__main__":
    from stylematch.database import engine

    logging.basicConfig(level=logging.INFO)
    print(f"Created {ensure_indexes(engine)} index(es)")
