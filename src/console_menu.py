from decimal import Decimal, InvalidOperation

from db_error import DbError
from entities import Customer, Project
from reporting import (
    customers_frame, export_projects_csv, format_installed, format_money,
    projects_frame, render
)


class ConsoleMenu:
    """Menu operations for the customer projects database"""

    OPERATIONS = [
        "1) Create and populate database tables",
        "2) Add a project",
        "3) List all customers",
        "4) List all projects",
        "5) Show a customer and their projects",
        "6) Export all projects to a CSV file",
    ]

    def __init__(self, service, config):
        """Initialize the menu with the service it drives"""
        self.service = service
        self.config = config

    def display_menu(self):
        """Print the menu selections, one per line"""
        print("\nPrinting available options below...")
        for line in self.OPERATIONS:
            print("   " + line)

    def get_user_selection(self):
        """Show the menu and return the selection, or -1 when nothing was entered"""
        self.display_menu()
        selection = self.get_int_input("Enter a menu selection here or press the Enter key to quit: ")
        return -1 if selection is None else selection

    def dispatch(self, selection):
        """Run one menu selection; returns False when the user asked to quit"""
        actions = {
            1: self.create_tables,
            2: self.add_project,
            3: self.list_customers,
            4: self.list_projects,
            5: self.show_customer,
            6: self.export_projects,
        }

        if selection == -1:
            print("Exiting the menu...")
            return False

        action = actions.get(selection)
        if action is None:
            print(f"\n{selection} is not a valid selection. Try again.")
        else:
            action()
        return True

    # ——— Operations ———
    def create_tables(self):
        self.service.create_and_populate_tables()
        print("\nSuccessfully connected to the database. "
              "Tables have been created and populated with provided files.\n")

    def add_project(self):
        """Gather a customer and project from the user and store both"""
        customer = Customer()
        customer.customer_name = self.get_string_input("Enter the customer's name: ")

        project = Project()
        project.project_id = self.get_int_input("Enter the project ID number: ")
        project.gross_price = self.get_decimal_input("Enter the project's gross price: ")
        project.system_size_kw = self.get_decimal_input("Enter the system size in KW: ")
        project.dealer_fees = self.get_decimal_input("Enter any dealer fees or press the Enter key to skip: ")
        project.adders = self.get_decimal_input("Enter the total adders cost or press the Enter key to skip: ")
        project.installed = self.get_boolean_input(
            "Has this project been installed? Enter Y or N, or press the Enter key to skip: ")
        project.install_year = self.get_int_input(
            "Enter the year this project was installed, or press the Enter key to skip: ")
        project.install_month = self.get_int_input(
            "Enter the month this project was installed using 2 numeric digits, or press the Enter key to skip: ")
        project.rep_commission = self.get_decimal_input("Enter commission for project: ")

        customer, project = self.service.add_customer_with_project(customer, project)
        print(f"\nYou have successfully entered the following project to the database: {customer}{project}")

    def list_customers(self):
        customers = self.service.fetch_customers()
        if not customers:
            print("\nNo customers in the database!")
            return

        print("\nCustomers in the database:\n")
        print(render(customers_frame(customers)))

    def list_projects(self):
        projects = self.service.fetch_projects()
        if not projects:
            print("\nNo projects in the database!")
            return

        print("\nProjects in the database:\n")
        print(render(projects_frame(projects, self.config.currency, self.config.locale)))

    def show_customer(self):
        customer_id = self.get_int_input("Enter a customer ID: ")
        if customer_id is None:
            print("\nNo customer ID entered.")
            return

        customer = self.service.fetch_customer_by_id(customer_id)
        print(customer)
        if not customer.projects:
            print("   No projects for this customer.")
            return

        for project in customer.projects:
            print("\n" + "=" * 50)
            print(f"Project ID: {project.project_id}\tInstalled: {format_installed(project.installed)} "
                  f"{project.install_year_and_month or ''}")
            print(f"Gross Price: {self._money(project.gross_price)}\tSystem Size: {project.system_size_kw} KW")
            print(f"Dealer Fees: {self._money(project.dealer_fees)}\tAdders: {self._money(project.adders)}")
            print(f"Commission: {self._money(project.rep_commission)}")
        print("=" * 50)

    def export_projects(self):
        projects = self.service.fetch_projects()
        path = export_projects_csv(projects, self.config.export_directory)
        print(f"\nExported {len(projects)} projects to {path}")

    def _money(self, value):
        return format_money(value, self.config.currency, self.config.locale)

    # ——— Input ———
    def get_string_input(self, prompt):
        """Return the trimmed input, or None if the user entered nothing"""
        value = input(prompt)
        return value.strip() or None

    def get_int_input(self, prompt):
        value = self.get_numeric_text(prompt)
        if value is None:
            return None

        try:
            return int(value)
        except ValueError:
            raise DbError(f"{value} is not a valid number.")

    def get_decimal_input(self, prompt):
        value = self.get_numeric_text(prompt)
        if value is None:
            return None

        try:
            number = Decimal(value)
        except InvalidOperation:
            raise DbError(f"{value} is not a valid number.")
        if not number.is_finite():
            raise DbError(f"{value} is not a valid number.")
        return number

    def get_numeric_text(self, prompt):
        """Like get_string_input, but refuses underscores and non-ASCII characters"""
        value = self.get_string_input(prompt)
        if value is not None and ("_" in value or not value.isascii()):
            raise DbError(f"{value} is not a valid number.")
        return value

    def get_boolean_input(self, prompt):
        """Y/y is True, N/n is False, anything else is unknown"""
        value = self.get_string_input(prompt)
        if value in ("Y", "y"):
            return True
        if value in ("N", "n"):
            return False
        return None
