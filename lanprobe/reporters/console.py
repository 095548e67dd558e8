from colorama import init as colorama_init, Fore, Style
from datetime import datetime
colorama_init(autoreset=True)


class Log:
    def __init__(self, verbose: int = 1):
        self.verbose = verbose
        self.URL = Fore.MAGENTA

    def _time(self):
        return datetime.now().strftime("[%H:%M:%S]")

    def _fmt(self, level: str, color: str):
        return f"{self._time()} {color}[{level}]{Style.RESET_ALL}"

    def info(self, msg: str):
        if self.verbose >= 1:
            print(f"{self._fmt('INFO', Fore.CYAN)} {msg}")

    def warn(self, msg: str):
        if self.verbose >= 0:
            print(f"{self._fmt('WARNING', Fore.YELLOW)} {msg}")

    def ok(self, msg: str):
        print(f"{self._fmt('SUCCESS', Fore.GREEN)} {msg}")

    def fail(self, msg: str):
        print(f"{self._fmt('FAIL', Fore.RED)} {msg}")

    def debug(self, msg: str):
        if self.verbose >= 2:
            print(f"{self._fmt('DEBUG', Fore.MAGENTA)} {msg}")

    def outcome(self, url: str, status: str, score: int):
        col = {"OPEN": Fore.GREEN, "SSL_ANOMALY": Fore.YELLOW,
               "CLOSED": Fore.RED}.get(status, Fore.WHITE)
        print(f"{self._fmt('ENDPOINT', col)} "
              f"{self.URL}{url}{Style.RESET_ALL} {status} "
              f"{Style.DIM}(score {score}){Style.RESET_ALL}")

    def decision(self, ctx: str, host: str, action: str, reason: str):
        if self.verbose >= 2:
            print(f"{self._fmt('GATE', Fore.BLUE)} {ctx}-{host} "
                  f"{action} {Style.DIM}({reason}){Style.RESET_ALL}")
