class DbError(Exception):
    """Raised for any failure talking to the database or parsing console input."""

    def __init__(self, message):
        super().__init__(str(message))
        self.message = str(message)
