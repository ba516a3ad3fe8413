from decimal import Decimal

import pytest

from db_error import DbError
from entities import Customer, Project


def test_create_and_populate_loads_seed_rows(seeded_service):
    assert len(seeded_service.fetch_customers()) == 3
    assert len(seeded_service.fetch_projects()) == 4


def test_create_and_populate_resets_tables(seeded_service):
    customer = Customer()
    customer.customer_name = "Temporary"
    seeded_service.add_customer(customer)

    seeded_service.create_and_populate_tables()
    assert [c.customer_name for c in seeded_service.fetch_customers()] == [
        "Maria Alvarez", "Derek Osei", "Priya Natarajan"
    ]


def test_add_customer_with_project_links_ids(seeded_service):
    customer = Customer()
    customer.customer_name = "Grace Hopper"
    project = Project()
    project.project_id = 5000
    project.gross_price = Decimal("20000")

    customer, project = seeded_service.add_customer_with_project(customer, project)

    assert project.customer_id == customer.customer_id
    fetched = seeded_service.fetch_customer_by_id(customer.customer_id)
    assert fetched.customer_name == "Grace Hopper"
    assert [p.project_id for p in fetched.projects] == [5000]


def test_unknown_customer_id_is_reported(seeded_service):
    with pytest.raises(DbError, match="Customer with ID=42 does not exist."):
        seeded_service.fetch_customer_by_id(42)


def test_custom_sql_directory(tmp_path, db):
    from project_service import ProjectService

    (tmp_path / "customers-schema.sql").write_text(
        "-- tiny schema\n"
        "CREATE TABLE customers (customer_id INTEGER PRIMARY KEY, customer_name TEXT);\n"
        "CREATE TABLE projects (customer_id INTEGER, project_id INTEGER, gross_price DECIMAL_TEXT,"
        " system_size_kw DECIMAL_TEXT, dealer_fees DECIMAL_TEXT, adders DECIMAL_TEXT, installed BOOLEAN,"
        " install_year INTEGER, install_month INTEGER, rep_commission DECIMAL_TEXT);\n",
        encoding="utf-8",
    )
    (tmp_path / "customers-data.sql").write_text(
        "INSERT INTO customers VALUES (7, 'Only One');", encoding="utf-8"
    )

    service = ProjectService(db, str(tmp_path))
    service.create_and_populate_tables()
    assert [c.customer_id for c in service.fetch_customers()] == [7]


def test_failed_add_leaves_no_customer_behind(seeded_service):
    for project_id in (1001, None):
        customer = Customer()
        customer.customer_name = "Typo"
        project = Project()
        project.project_id = project_id

        with pytest.raises(DbError):
            seeded_service.add_customer_with_project(customer, project)

    assert len(seeded_service.fetch_customers()) == 3
