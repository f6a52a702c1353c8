#!/usr/bin/env python3
"""
Database migration runner for the Warden credential store.

Applies the SQL files in migrations/ to the Supabase PostgreSQL database,
in name order, recording each applied file with its checksum.

Usage:
    python run_migrations.py              # Apply pending migrations
    python run_migrations.py --status     # Show migration status
    python run_migrations.py --dry-run    # Show what would run

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


def checksum_of(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def connect():
    """Open a connection using SUPABASE_DB_URL or exit with a hint."""
    db_url = get_settings().supabase_db_url
    if not db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def applied_migrations(conn) -> dict[str, str]:
    """Ensure the tracking table exists and return {name: checksum}."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                "CREATE TABLE IF NOT EXISTS {} ("
                " name VARCHAR(255) PRIMARY KEY,"
                " checksum VARCHAR(64) NOT NULL,"
                " applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW())"
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
        cur.execute(
            sql.SQL("SELECT name, checksum FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        rows = dict(cur.fetchall())
    conn.commit()
    return rows


def pending_migrations(applied: dict[str, str]) -> list[Path]:
    pending = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        if path.name not in applied:
            pending.append(path)
        elif applied[path.name] != checksum_of(path):
            console.print(f"[yellow]Warning:[/yellow] {path.name} changed after it was applied")
    return pending


def apply(conn, path: Path) -> None:
    """Run one migration and record it in the same transaction."""
    console.print(f"[blue]Running:[/blue] {path.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (path.name, checksum_of(path)),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {path.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {path.name} applied")


def show_status(applied: dict[str, str], pending: list[Path]) -> None:
    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Checksum")
    for name, checksum in applied.items():
        table.add_row(name, "[green]Applied[/green]", checksum)
    for path in pending:
        table.add_row(path.name, "[yellow]Pending[/yellow]", checksum_of(path))
    console.print(table)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run Warden database migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    args = parser.parse_args()

    conn = connect()
    try:
        applied = applied_migrations(conn)
        pending = pending_migrations(applied)

        if args.status:
            show_status(applied, pending)
            return
        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return
        for path in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {path.name}")
            else:
                apply(conn, path)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
