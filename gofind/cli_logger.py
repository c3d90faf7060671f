import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.path.join(os.path.expanduser("~"), ".gofind", "logs")
MAX_LOG_FILES = 20


class Logger:
    """Diagnostics for gofind.

    Everything is appended to a per-run log file. The terminal copy always
    goes to stderr, since stdout carries the search results; info and debug
    messages only reach the terminal when ``verbose`` is set.
    """

    def __init__(self, log_dir=LOG_DIR):
        self.verbose = False
        self.log_dir = log_dir
        self.log_file = os.path.join(
            log_dir,
            f"gofind_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def configure(self, config, keep=MAX_LOG_FILES):
        """Apply the options of one run and drop all but the newest log files."""
        self.verbose = config.verbose
        self.prune(keep)

    def prune(self, keep=MAX_LOG_FILES):
        if not os.path.isdir(self.log_dir):
            return
        log_files = sorted(
            (os.path.join(self.log_dir, f) for f in os.listdir(self.log_dir) if f.endswith(".log")),
            key=os.path.getmtime,
            reverse=True,
        )
        for old in log_files[max(keep, 0):]:
            try:
                os.remove(old)
            except OSError as e:
                self.debug(f"Could not remove old log file {old}: {e}")

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, prefix="", echo=True):
        timestamp = self._get_timestamp()
        if echo:
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=sys.stderr)
        self._write(f"[{timestamp}] [{level}] {message}\n")

    def _write(self, line):
        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(self.log_file, "a") as f:
                f.write(line)
        except OSError:
            # unwritable log dir: terminal output only
            pass

    def info(self, message):
        self._log("INFO", message, Fore.CYAN, echo=self.verbose)

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM, echo=self.verbose)

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED,
                  prefix=f"{Style.BRIGHT}✖ {Style.RESET_ALL}{Fore.RED}")

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, echo=self.verbose)


# ---------------- Helper ----------------
logger = Logger()

def get_latest_log_file(log_dir=LOG_DIR):
    """Return the path to the latest log file."""
    if not os.path.isdir(log_dir):
        return None
    log_files = [os.path.join(log_dir, f) for f in os.listdir(log_dir) if f.endswith(".log")]
    if not log_files:
        return None
    return max(log_files, key=os.path.getctime)
