"""CLI adapter creating the ledger tables in the configured database."""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.tables import create_schema, metadata


def main() -> None:
    """Create every missing ledger table."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()

    create_schema(db_adapter.get_ledger_engine())

    table_names = ", ".join(sorted(metadata.tables))
    logger.info(f"Ensured ledger tables: {table_names}")
    print(f"Ledger schema ready ({table_names}).")


if __name__ == "__main__":  # pragma: no cover
    main()
