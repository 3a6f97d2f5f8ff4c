"""Error reporting for lclex. Scanning never fails: a GenericException is only raised when the lexer is handed
something that isn't source text, i.e. on misuse of the API (internal=True).
"""

from termcolor import colored


ERROR = "red"
WARNING = "magenta"


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lclex error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    def __str__(self):
        header = colored("[internal] ", ERROR, attrs=["bold"]) if self.internal else ""
        return header + colored("error: ", ERROR, attrs=["bold"]) + self.msg


def diagnose(error, warning=False):
    """Returns offending part of error.expr highlighted and bolded, with a marker underneath."""
    color = WARNING if warning else ERROR

    result = "  " + error.expr[:error.start]

    end = max(error.end, error.start + 1)
    result += colored(error.expr[error.start:end], color, attrs=["bold"])
    result += error.expr[end:] + "\n"

    result += "  " + " " * error.start
    result += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

    return result
