"""
Money formatting and tabular output for the console listings and CSV export.
"""

import os
from datetime import datetime

import pandas as pd
from babel.numbers import format_currency

from entities import Project

CUSTOMER_HEADERS = ["ID", "Name"]
PROJECT_HEADERS = ["Customer ID", "Project ID", "Gross Price", "System Size (KW)", "Installed", "Commission"]
MONEY_FIELDS = ("gross_price", "dealer_fees", "adders", "rep_commission")


def format_money(value, currency="USD", locale="en_US"):
    """Format a Decimal in the given currency; unknown amounts print as blank."""
    if value is None:
        return ""
    return format_currency(value, currency, locale=locale)


def format_installed(value):
    if value is None:
        return ""
    return "Yes" if value else "No"


def customers_frame(customers):
    rows = [(c.customer_id, c.customer_name) for c in customers]
    return pd.DataFrame(rows, columns=CUSTOMER_HEADERS)


def projects_frame(projects, currency="USD", locale="en_US"):
    """Build the display table for a list of projects."""
    rows = [
        (
            p.customer_id,
            p.project_id,
            format_money(p.gross_price, currency, locale),
            "" if p.system_size_kw is None else str(p.system_size_kw),
            format_installed(p.installed),
            format_money(p.rep_commission, currency, locale),
        )
        for p in projects
    ]
    return pd.DataFrame(rows, columns=PROJECT_HEADERS)


def render(frame):
    return frame.to_string(index=False)


def export_projects_csv(projects, export_directory, file_name=None):
    """Write every project column to a CSV file and return its path."""
    os.makedirs(export_directory, exist_ok=True)
    if not file_name:
        file_name = f"projects_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    path = os.path.join(export_directory, file_name)

    records = []
    for p in projects:
        data = p.get_full_info()
        for field in MONEY_FIELDS + ("system_size_kw",):
            if data[field] is not None:
                data[field] = str(data[field])  # keep the exact decimal text
        data["install_year_and_month"] = p.install_year_and_month
        records.append(data)

    columns = list(Project.COLUMNS) + ["install_year_and_month"]
    df = pd.DataFrame(records, columns=columns, dtype=object)
    df.to_csv(path, index=False)
    return path
