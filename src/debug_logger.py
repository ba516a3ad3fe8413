"""Debug logging to an optional file, echoed to the console in debug mode."""

from datetime import datetime


class DebugLogger:
    """Writes timestamped lines to a log file and, when asked, to the console."""

    def __init__(self, log_file_path=None, console_debug=False):
        self.log_file_path = log_file_path
        self.console_debug = console_debug
        self.file_handle = None

        if log_file_path:
            try:
                # Line buffering keeps the file current while the menu is open
                self.file_handle = open(log_file_path, 'a', encoding='utf-8', buffering=1)
                self.log(f"Debug log started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            except OSError as e:
                print(f"Warning: Could not open debug log file: {e}")

    def log(self, message):
        """Write a message to the debug log."""
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        if self.file_handle:
            try:
                self.file_handle.write(f"[{timestamp}] {message}\n")
            except OSError as e:
                print(f"Warning: Failed to write to debug log: {e}")

        if self.console_debug:
            print(message)

    def close(self):
        """Close the log file."""
        if self.file_handle:
            self.log(f"Debug log ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            self.file_handle.close()
            self.file_handle = None
