"""miniJava semantic checker package."""

from .checker import Checker as Checker, CheckError as CheckError, check as check
from .checker import ErrorKind as ErrorKind
