from database import Database
from db_error import DbError
from sql_script import convert_to_statements, read_resource

SCHEMA_FILE = "customers-schema.sql"
DATA_FILE = "customers-data.sql"


class ProjectService:
    """Pass-through between the console menu and the database layer"""

    def __init__(self, db: Database, sql_directory=None):
        self.db = db
        self.sql_directory = sql_directory

    def create_and_populate_tables(self):
        """Drop and recreate the tables, then load the seed rows"""
        self.load_from_file(SCHEMA_FILE)
        self.load_from_file(DATA_FILE)

    def load_from_file(self, file_name):
        content = read_resource(file_name, self.sql_directory)
        self.db.execute_batch(convert_to_statements(content))

    def add_customer(self, customer):
        return self.db.insert_customer(customer)

    def add_project(self, project):
        return self.db.insert_project(project)

    def add_customer_with_project(self, customer, project):
        """Insert the customer and the project under the new customer id, all or nothing"""
        return self.db.insert_customer_with_project(customer, project)

    def fetch_customers(self):
        return self.db.fetch_all_customers()

    def fetch_projects(self):
        return self.db.fetch_all_projects()

    def fetch_customer_by_id(self, customer_id):
        customer = self.db.fetch_customer_by_id(customer_id)
        if customer is None:
            raise DbError(f"Customer with ID={customer_id} does not exist.")
        return customer
