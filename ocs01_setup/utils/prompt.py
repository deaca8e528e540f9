import getpass

from .logger import CYAN, logger

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Prompter:
    """
    Reads operator answers from injectable input functions.

    ``input_func`` reads echoed text, ``secret_func`` reads text with terminal
    echo suppressed. Both take the prompt string and return the raw answer;
    end of input counts as an empty answer.
    """

    def __init__(self, input_func=None, secret_func=None):
        self.input_func = input_func or input
        self.secret_func = secret_func or getpass.getpass

    def _read(self, read_func, question):
        try:
            return read_func(question)
        except EOFError:
            logger.stdout()
            return ""

    def text(self, label: str) -> str:
        return self._read(self.input_func, logger.hl(" ❔ ", CYAN) + f"{label}: ")

    def secret(self, label: str) -> str:
        return self._read(self.secret_func, logger.hl(" 🔒 ", CYAN) + f"{label}: ")

    def confirm(self, question: str, default: bool) -> bool:
        choices = "(Y/n)" if default else "(y/N)"
        answer = self._read(
            self.input_func, logger.hl(" ❔ [YES/NO]: ", CYAN) + f"{question} {choices}: "
        )
        answer = answer.strip().lower()

        if default:
            return answer not in NO_ANSWERS
        return answer in YES_ANSWERS
