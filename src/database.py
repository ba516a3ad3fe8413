import os
import sqlite3
from contextlib import contextmanager
from decimal import Decimal

from db_error import DbError
from entities import Customer, Project

CUSTOMERS_TABLE = "customers"
PROJECTS_TABLE = "projects"

# Decimals are stored as exact text in DECIMAL_TEXT columns (TEXT affinity)
sqlite3.register_adapter(Decimal, str)
sqlite3.register_converter("DECIMAL_TEXT", lambda value: Decimal(value.decode()))
sqlite3.register_converter("BOOLEAN", lambda value: bool(int(value)))


class Database:
    """Data access for the customers and projects tables.

    Every public method opens its own connection, runs inside one transaction,
    commits on success, rolls back on failure, and closes the connection.
    Failures surface as DbError.
    """

    def __init__(self, db_file, logger):
        self.db_file = os.path.abspath(db_file)
        self.logger = logger

    def create_connection(self):
        try:
            conn = sqlite3.connect(
                self.db_file,
                detect_types=sqlite3.PARSE_DECLTYPES,
                isolation_level=None  # transactions are opened explicitly
            )
        except sqlite3.Error as e:
            self.logger.log(f"[DB] Connection error: {e}")
            raise DbError(e) from e

        conn.row_factory = sqlite3.Row
        self._apply_pragmas(conn)
        return conn

    def _apply_pragmas(self, conn):
        conn.execute("PRAGMA foreign_keys = ON;")

    @contextmanager
    def _transaction(self):
        self.logger.log(f"[DB] Connecting to: {self.db_file}")
        conn = self.create_connection()
        try:
            conn.execute("BEGIN")
            yield conn
            conn.commit()
        except DbError:
            conn.rollback()
            raise
        except Exception as e:
            conn.rollback()
            self.logger.log(f"[DB] Rolled back: {e}")
            raise DbError(e) from e
        finally:
            conn.close()

    def _execute(self, conn, query, params=()):
        try:
            return conn.execute(query, params)
        except sqlite3.Error as e:
            self.logger.log(f"[DB] Query error: {e}\nSQL: {query}\nParams: {params}")
            raise

    # ——— Batch ———
    def execute_batch(self, statements):
        """Run all statements in order as one transaction."""
        with self._transaction() as conn:
            for sql in statements:
                self._execute(conn, sql)
        self.logger.log(f"[DB] Executed batch of {len(statements)} statements")

    # ——— Insert ———
    def insert_customer(self, customer):
        """Insert a customer and return it with its new customer_id."""
        with self._transaction() as conn:
            self._insert_customer(conn, customer)
        self.logger.log(f"[DB] Inserted customer {customer.customer_id}")
        return customer

    def insert_project(self, project):
        """Insert a project row; its customer_id must point at an existing customer."""
        with self._transaction() as conn:
            self._insert_project(conn, project)
        self.logger.log(f"[DB] Inserted project {project.project_id} for customer {project.customer_id}")
        return project

    def insert_customer_with_project(self, customer, project):
        """Insert a customer and its first project together; neither row is kept if either fails."""
        with self._transaction() as conn:
            self._insert_customer(conn, customer)
            project.customer_id = customer.customer_id
            self._insert_project(conn, project)
        self.logger.log(f"[DB] Inserted customer {customer.customer_id} with project {project.project_id}")
        return customer, project

    def _insert_customer(self, conn, customer):
        q = f"INSERT INTO {CUSTOMERS_TABLE} (customer_name) VALUES (?)"
        cur = self._execute(conn, q, (customer.customer_name,))
        customer.customer_id = cur.lastrowid

    def _insert_project(self, conn, project):
        data = project.get_full_info()
        q = (
            f"INSERT INTO {PROJECTS_TABLE} ({', '.join(data.keys())}) "
            f"VALUES ({', '.join(['?'] * len(data))})"
        )
        self._execute(conn, q, tuple(data.values()))

    # ——— Read ———
    def fetch_all_customers(self):
        q = f"SELECT customer_id, customer_name FROM {CUSTOMERS_TABLE} ORDER BY customer_id"
        with self._transaction() as conn:
            rows = self._execute(conn, q).fetchall()
        return [self._extract_customer(row) for row in rows]

    def fetch_all_projects(self):
        q = (
            f"SELECT {', '.join(Project.COLUMNS)} FROM {PROJECTS_TABLE} "
            "ORDER BY customer_id, project_id"
        )
        with self._transaction() as conn:
            rows = self._execute(conn, q).fetchall()
        return [Project.from_row(row) for row in rows]

    def fetch_customer_by_id(self, customer_id):
        """Return the customer with its projects, or None if there is no such customer."""
        q = f"SELECT customer_id, customer_name FROM {CUSTOMERS_TABLE} WHERE customer_id = ?"
        with self._transaction() as conn:
            row = self._execute(conn, q, (customer_id,)).fetchone()
            if row is None:
                return None

            customer = self._extract_customer(row)
            customer.projects.extend(self._fetch_customer_projects(conn, customer_id))
        return customer

    def _fetch_customer_projects(self, conn, customer_id):
        columns = ", ".join(f"p.{column}" for column in Project.COLUMNS)
        q = (
            f"SELECT {columns} FROM {CUSTOMERS_TABLE} c "
            f"JOIN {PROJECTS_TABLE} p ON c.customer_id = p.customer_id "
            "WHERE c.customer_id = ? "
            "ORDER BY p.project_id"
        )
        rows = self._execute(conn, q, (customer_id,)).fetchall()
        return [Project.from_row(row) for row in rows]

    def _extract_customer(self, row):
        customer = Customer()
        customer.customer_id = row["customer_id"]
        customer.customer_name = row["customer_name"]
        return customer
