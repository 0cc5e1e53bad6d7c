import sys
import shutil
import hashlib
from abc import ABC, abstractmethod


class ContentAddressable(ABC):
    @abstractmethod
    def get_content(self) -> str:
        """
        Must be implemented by child classes to return
        the textual content that will be hashed.
        """
        pass

    def hash_id(self) -> str:
        """
        Returns the SHA-256 hash hex digest of the content.
        """
        content = self.get_content()
        return hashlib.sha256(content.encode()).hexdigest()


class InputFailure(Exception):
    "Raised when the solver input is malformed"
    pass


class DatasetFailure(Exception):
    "Raised when a dataset record is malformed"
    pass


def print_annotated_hr(message):
    width = shutil.get_terminal_size(fallback=(80, 20)).columns
    msg = f' {message} '
    dash_count = width - len(msg)
    if dash_count < 0:
        print(message, file=sys.stderr, flush=True)
        return
    left_dashes = dash_count // 2
    right_dashes = dash_count - left_dashes
    line = '-' * left_dashes + msg + '-' * right_dashes
    print(line, file=sys.stderr, flush=True)


def print_marker(marker):
    print(marker, end="", file=sys.stderr, flush=True)


def panic(msg):
    print(msg, file=sys.stderr)
    sys.exit(1)


def print_legend():
    l = """. - line passed the check
! - line failed the check"""
    print(l, file=sys.stderr, flush=True)
