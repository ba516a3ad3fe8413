import os
from babel import Locale, UnknownLocaleError
from dotenv import load_dotenv

SQL_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sql")


class Config:
    def __init__(self):
        """Initialize configuration with default values."""
        # Database
        self.db_file = "customers.db"
        self.sql_directory = SQL_DIR

        # Logging
        self.debug = False
        self.log_file = None

        # Display
        self.locale = "en_US"
        self.currency = "USD"

        # Export
        self.export_directory = "./output"

    @classmethod
    def from_env(cls, env_file='.env'):
        """Create configuration from environment variables.

        Args:
            env_file (str): Path to environment file (default: '.env')
        """
        load_dotenv(env_file)  # Missing file is fine, the defaults apply

        config = cls()
        config.debug = os.getenv('CUSTOMERS_DEBUG', '').lower() == 'true'

        if os.getenv('CUSTOMERS_DB_FILE'):
            config.db_file = os.getenv('CUSTOMERS_DB_FILE')
        if os.getenv('CUSTOMERS_LOG_FILE'):
            config.log_file = os.getenv('CUSTOMERS_LOG_FILE')
        if os.getenv('CUSTOMERS_LOCALE'):
            config.locale = os.getenv('CUSTOMERS_LOCALE')
        if os.getenv('CUSTOMERS_CURRENCY'):
            config.currency = os.getenv('CUSTOMERS_CURRENCY')
        if os.getenv('CUSTOMERS_EXPORT_DIR'):
            config.export_directory = os.getenv('CUSTOMERS_EXPORT_DIR')
        if os.getenv('CUSTOMERS_SQL_DIR'):
            config.sql_directory = os.getenv('CUSTOMERS_SQL_DIR')

        return config

    def apply_args(self, args):
        """Override values with command line arguments that were given."""
        if getattr(args, 'db_file', None):
            self.db_file = args.db_file
        if getattr(args, 'log_file', None):
            self.log_file = args.log_file
        if getattr(args, 'debug', False):
            self.debug = True
        return self

    def validate(self):
        """Validate the configuration.

        Returns:
            tuple: (bool, str) - (is_valid, error_message)
        """
        if not self.db_file:
            return False, "Database file is required"
        if not os.path.isdir(self.sql_directory):
            return False, f"SQL directory not found: {self.sql_directory}"
        if not self.currency:
            return False, "Currency code is required"
        try:
            Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            return False, f"Unknown locale {self.locale!r}: {e}"
        return True, None
