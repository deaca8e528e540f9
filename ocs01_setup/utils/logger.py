import termtables

from .helpers import create_dirs

CYAN = "\033[96m"
BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"

BOLD = "\033[1m"

END = "\033[0m"


class Logger:
    def __init__(self, log_file=None):
        self.log_file = log_file

    def set_log_file(self, log_file):
        self.log_file = log_file

    # log to file, only when a log file is configured
    def log(self, text):
        if not self.log_file:
            return
        try:
            create_dirs(self.log_file)
            with open(self.log_file, mode="a") as logs:
                logs.write(text + "\n")
        except OSError as e:
            # Console output carries on without the file mirror.
            self.stdout(self.hl(" 🟠 [WARN] ", YELLOW) + f"Log file disabled: {e}")
            self.log_file = None

    # print to std out
    def stdout(self, text=""):
        print(text, flush=True)

    def _emit(self, tag, color, text, value=None):
        log_text = f"{tag} " + text
        stdout_text = self.hl(f" {tag} ", color) + text

        if value is not None:
            log_text = self.cln(log_text, value)
            stdout_text = self.cln(stdout_text, self.hl(value, BOLD))

        self.log(log_text)
        self.stdout(stdout_text)

    def info(self, text, value=None):
        self._emit("🔵 [INFO]", BLUE, text, value)

    def okay(self, text, value=None):
        self._emit("🟢 [OKAY]", GREEN, text, value)

    def warn(self, text, value=None):
        self._emit("🟠 [WARN]", YELLOW, text, value)

    def error(self, text, value=None):
        self._emit("🔴 [ERROR]", RED, text, value)

    def step(self, text, value=None):
        self._emit("🔧 [STEP]", CYAN, text, value)

    def hints(self, hints):
        for hint in hints:
            self.info(f"• {hint}")

    def plain(self, text=""):
        self.log(text)
        self.stdout(text)

    def report_table(self, table):
        header = ["File", "Description"]
        log_table = termtables.to_string(
            table,
            header=header,
            style=termtables.styles.rounded_double,
        )
        self.log(log_table)

        stdout_table = [[self.hlgreen(cell) for cell in row] for row in table]
        self.stdout(
            termtables.to_string(
                stdout_table,
                header=header,
                style=termtables.styles.rounded_double,
            )
        )

    def greet(self, title, subtitle):
        self.log(f"{title} - {subtitle}")
        self.stdout(self.hl(f"🚀  {title} Setup", CYAN))
        self.stdout(self.hl(f"    {subtitle}", CYAN))

    def hl(self, text, color=BOLD):
        return f"{color}{text}{END}"

    def hlgreen(self, text):
        return self.hl(text, GREEN)

    def hlred(self, text):
        return self.hl(text, RED)

    def cln(self, text1, text2):
        return f"{text1}: {text2}"

    def divider(self):
        self.log(" - +" * 20)
        self.stdout((self.hlred(" -") + self.hlgreen(" +")) * 20)


logger = Logger()
