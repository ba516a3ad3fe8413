class Customer:
    """A customer row plus the projects loaded with it"""

    def __init__(self):
        """Initialize empty customer attributes"""
        self.customer_id = None    # Assigned by the database on insert
        self.customer_name = None  # Display name
        self.projects = []         # Only filled when fetched by id

    def get_full_info(self):
        """Return customer data as dictionary"""
        return {
            'customer_id': self.customer_id,
            'customer_name': self.customer_name
        }

    def __str__(self):
        result = ""
        result += f"\n Customer ID: {self.customer_id}"
        result += f"\n Customer name: {self.customer_name}"
        return result


class Project:
    """A solar installation project sold to a customer"""

    COLUMNS = (
        'customer_id', 'project_id', 'gross_price', 'system_size_kw', 'dealer_fees',
        'adders', 'installed', 'install_year', 'install_month', 'rep_commission'
    )

    def __init__(self):
        """Initialize empty project attributes"""
        self.customer_id = None      # Foreign key to customers
        self.project_id = None       # Supplied by the user
        self.gross_price = None      # Decimal
        self.system_size_kw = None   # Decimal, in kW
        self.dealer_fees = None      # Decimal, optional
        self.adders = None           # Decimal, optional
        self.installed = None        # True, False or unknown
        self.install_year = None
        self.install_month = None
        self.rep_commission = None   # Decimal

    @property
    def install_year_and_month(self):
        """Year and month combined for display; not checked against a calendar"""
        if self.install_year is None:
            return None
        if self.install_month is None:
            return str(self.install_year)
        return f"{self.install_year} / {self.install_month}"

    def get_full_info(self):
        """Return all project columns as dictionary, in table order"""
        return {column: getattr(self, column) for column in self.COLUMNS}

    @classmethod
    def from_row(cls, row):
        """Build a project from a row keyed by column name"""
        project = cls()
        for column in cls.COLUMNS:
            setattr(project, column, row[column])
        return project

    def __str__(self):
        result = ""
        result += f"\n Project ID: {self.project_id}"
        result += f"\n Gross Price: {self.gross_price}"
        result += f"\n System Size (KW): {self.system_size_kw}"
        result += f"\n Dealer Fees ($): {self.dealer_fees}"
        result += f"\n Adders ($): {self.adders}"
        result += f"\n Installed: {self.install_year_and_month}"
        result += f"\n Commission ($): {self.rep_commission}"
        return result
